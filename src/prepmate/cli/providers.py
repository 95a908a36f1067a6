"""Provider factory functions for the launcher.

Centralizes creation of the LLM provider, plan generator and controller
from environment variables. Hides configuration details from the entry point.
"""

import os

from rich.console import Console

from ..controller import PrepController
from ..errors import ConfigurationError
from ..llm import LLMProvider, create_llm_provider
from ..planner import StudyPlanGenerator
from ..planner.generator import DEFAULT_PLAN_MODEL, DEFAULT_THINKING_BUDGET

DEFAULT_CHAT_MODEL = "gemini-2.5-flash"

# Default console for output
_console = Console()


def get_llm() -> LLMProvider:
    """Create LLM provider from environment variables.

    Returns:
        LLM provider instance

    Raises:
        ConfigurationError: If the provider is unknown or its key is missing

    Environment variables:
        LLM_PROVIDER: Provider type (gemini; default: gemini)
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_CHAT_MODEL: Chat model (default: gemini-2.5-flash)
    """
    llm_provider = os.getenv("LLM_PROVIDER", "gemini").lower()
    if llm_provider != "gemini":
        raise ConfigurationError(
            f"Unknown LLM provider: {llm_provider}. Web search grounding requires 'gemini'."
        )

    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY not set in environment")

    model = os.getenv("GEMINI_CHAT_MODEL", DEFAULT_CHAT_MODEL)
    return create_llm_provider("gemini", api_key=api_key, model=model)


def get_thinking_budget() -> int | None:
    """Read GEMINI_THINKING_BUDGET; 0 or a negative value disables thinking.

    Raises:
        ConfigurationError: If the value is not an integer
    """
    raw = os.getenv("GEMINI_THINKING_BUDGET", str(DEFAULT_THINKING_BUDGET))
    try:
        budget = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"GEMINI_THINKING_BUDGET must be an integer, got '{raw}'") from e
    return budget if budget > 0 else None


def get_plan_generator(llm: LLMProvider) -> StudyPlanGenerator:
    """Create the study plan generator.

    Environment variables:
        GEMINI_PLAN_MODEL: Plan model (default: gemini-3-pro-preview)
        GEMINI_THINKING_BUDGET: Thinking tokens for plans (default: 2048)
    """
    return StudyPlanGenerator(
        llm,
        model=os.getenv("GEMINI_PLAN_MODEL", DEFAULT_PLAN_MODEL),
        thinking_budget=get_thinking_budget(),
    )


def require_controller(console: Console | None = None) -> PrepController:
    """Build the controller, exiting with an error if configuration is invalid.

    Args:
        console: Optional Rich console for output

    Raises:
        SystemExit: If the LLM provider is not configured
    """
    import typer

    con = console or _console
    try:
        llm = get_llm()
        return PrepController(llm, plan_generator=get_plan_generator(llm))
    except ConfigurationError as e:
        con.print(f"[red]Error: {e.user_message}[/red]")
        raise typer.Exit(code=1)

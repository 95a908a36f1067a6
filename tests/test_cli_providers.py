"""Unit tests for environment-driven provider configuration."""
import pytest
import typer
from rich.console import Console

from prepmate.cli.providers import get_llm, get_plan_generator, get_thinking_budget, require_controller
from prepmate.controller import PrepController
from prepmate.errors import ConfigurationError
from prepmate.llm import GeminiProvider


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("LLM_PROVIDER", "GEMINI_API_KEY", "GEMINI_CHAT_MODEL", "GEMINI_PLAN_MODEL", "GEMINI_THINKING_BUDGET"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGetLLM:
    """Tests for get_llm."""

    def test_missing_key(self, clean_env):
        """Test that a missing API key is a configuration error."""
        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            get_llm()

    def test_unknown_provider(self, clean_env):
        """Test that providers other than gemini are rejected."""
        clean_env.setenv("LLM_PROVIDER", "openai")
        with pytest.raises(ConfigurationError):
            get_llm()

    def test_gemini_with_chat_model(self, clean_env):
        """Test that GEMINI_CHAT_MODEL selects the chat model."""
        clean_env.setenv("GEMINI_API_KEY", "test-key")
        clean_env.setenv("GEMINI_CHAT_MODEL", "gemini-2.5-pro")

        llm = get_llm()

        assert isinstance(llm, GeminiProvider)
        assert llm.model == "gemini-2.5-pro"


class TestThinkingBudget:
    """Tests for GEMINI_THINKING_BUDGET parsing."""

    def test_default(self, clean_env):
        """Test the default thinking budget."""
        assert get_thinking_budget() == 2048

    @pytest.mark.parametrize("raw", ["0", "-1"])
    def test_non_positive_disables(self, clean_env, raw: str):
        """Test that zero or negative budgets disable thinking."""
        clean_env.setenv("GEMINI_THINKING_BUDGET", raw)
        assert get_thinking_budget() is None

    def test_invalid_value(self, clean_env):
        """Test that a non-integer budget is a configuration error."""
        clean_env.setenv("GEMINI_THINKING_BUDGET", "lots")
        with pytest.raises(ConfigurationError):
            get_thinking_budget()

    def test_plan_generator_reads_env(self, clean_env, fake_llm):
        """Test that the plan generator picks up model and budget."""
        clean_env.setenv("GEMINI_PLAN_MODEL", "plan-model")
        clean_env.setenv("GEMINI_THINKING_BUDGET", "512")

        generator = get_plan_generator(fake_llm)

        assert generator.model == "plan-model"
        assert generator.thinking_budget == 512


class TestRequireController:
    """Tests for require_controller."""

    def test_exits_without_key(self, clean_env):
        """Test that the launcher prints the error and exits."""
        console = Console(record=True)
        with pytest.raises(typer.Exit):
            require_controller(console)
        assert "GEMINI_API_KEY" in console.export_text()

    def test_builds_controller(self, clean_env):
        """Test that a valid environment yields a controller."""
        clean_env.setenv("GEMINI_API_KEY", "test-key")
        assert isinstance(require_controller(Console(record=True)), PrepController)

"""Launcher for the interactive app using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console

from .providers import require_controller

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="prepmate",
    help="Interview preparation assistant: knowledge base, study plans, mock interviews",
    add_completion=False,
)

console = Console()


@app.command()
def run(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)"
    ),
):
    """Launch the interactive TUI."""
    from ..ui import run_textual_tui

    controller = require_controller(console)
    asyncio.run(run_textual_tui(controller, log_level=log_level))


if __name__ == "__main__":
    app()

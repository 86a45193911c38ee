"""CLI entry point."""

import typer

app = typer.Typer(
    name="thrash-insight",
    help="Thrash Insight - refactoring candidates from commit history",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .analyze import main as _main_command  # noqa: F401, E402

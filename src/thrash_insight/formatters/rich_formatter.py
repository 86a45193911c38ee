"""Rich terminal formatter for Thrash Insight."""

import io
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..analysis.models import AnalysisResult
from ..analysis.ranking import shorten
from ..config import AnalysisConfig
from .base import BaseFormatter, visible_reasons


class RichFormatter(BaseFormatter):
    """Ranked targets as a table, reasons and commits nested under each row."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult, config: AnalysisConfig) -> None:
        self._print(self.console, result, config)

    def format(self, result: AnalysisResult, config: AnalysisConfig) -> str:
        capture = Console(file=io.StringIO(), record=True, width=120, color_system=None)
        self._print(capture, result, config)
        return capture.export_text()

    def _print(self, console: Console, result: AnalysisResult, config: AnalysisConfig) -> None:
        table = Table(title="Refactoring Candidates", show_lines=True, pad_edge=True)
        table.add_column("Score", justify="right", style="bold")
        table.add_column("Target", style="cyan", no_wrap=True)
        table.add_column("Commits", justify="right")
        table.add_column("Thrashing lines")

        for target in result.targets[: config.top_targets]:
            details = Text()
            for reason in visible_reasons(target, config):
                details.append(f"{reason.count:>4} ", style="yellow")
                details.append(f"{reason.line}\n")
            if config.detail:
                for commit in target.commits:
                    details.append(f"{commit.short_id} ", style="dim")
                    details.append(f"{commit.subject} ({commit.author_name})\n", style="dim")
            details.rstrip()

            table.add_row(
                f"{target.score:.1f}",
                Text(shorten(target.name, config.name_width)),
                str(len(target.commits)),
                details,
            )

        console.print()
        console.print(table)
        console.print(
            f"[bold]total targets:[/bold] {result.total_targets}, "
            f"[bold]total commits:[/bold] {result.total_commits}"
        )

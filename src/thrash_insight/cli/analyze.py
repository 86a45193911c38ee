"""Main command: rank refactoring candidates in a commit window."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.text import Text

from ..api import run_analysis
from ..exceptions import ThrashInsightError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def main(
    after: Optional[str] = typer.Option(
        None,
        "--after",
        help="Inspect commits after this time (any git date, default: 1 week ago)",
    ),
    before: Optional[str] = typer.Option(
        None,
        "--before",
        help="Inspect commits before this time (default: now)",
    ),
    top_targets: Optional[int] = typer.Option(
        None,
        "--target",
        "-t",
        help="Show top K targets (default: 10)",
        min=0,
    ),
    top_reasons: Optional[int] = typer.Option(
        None,
        "--reason",
        "-r",
        help="Show top K reasons per target (default: 3)",
        min=0,
    ),
    detail: bool = typer.Option(
        False,
        "--detail",
        "-d",
        help="Show reasons seen only once and list every commit per target",
    ),
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Repository to analyze (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report style: text | rich",
        click_type=click.Choice(["text", "rich"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress and skipped lines/commits to stderr",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Rank files and co-changing file groups worth refactoring.

    Each candidate's churn (order of magnitude of lines changed per commit)
    is multiplied by how often the same source line was added by one commit
    and removed by another. Candidates without such thrashing are omitted.

    [bold cyan]Examples:[/bold cyan]

      thrash-insight

      thrash-insight --after "1 month ago" --target 20

      thrash-insight -C /path/to/repo --detail
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]Thrash Insight[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    log_path = str(log_file) if log_file is not None else None
    logger = setup_logging(verbose=verbose, log_file=log_path)

    try:
        settings = resolve_config(
            path=path,
            config=config,
            after=after,
            before=before,
            top_targets=top_targets,
            top_reasons=top_reasons,
            detail=True if detail else None,
            output_format=output_format.lower() if output_format else None,
            verbose=verbose,
        )

        if settings.verbosity != "normal":
            logger = setup_logging(
                verbose=settings.verbosity == "verbose",
                quiet=settings.verbosity == "quiet",
                log_file=log_path,
            )

        result = run_analysis(settings)

        get_formatter(settings.output_format).render(result, settings)

    except typer.Exit:
        raise

    except ThrashInsightError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        err_console.print(Text.assemble(("Error: ", "red"), str(e)))
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

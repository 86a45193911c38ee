"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    path: Optional[Path] = None,
    config: Optional[Path] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
    top_targets: Optional[int] = None,
    top_reasons: Optional[int] = None,
    detail: Optional[bool] = None,
    output_format: Optional[str] = None,
    verbose: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options; unset options keep file/env values."""
    overrides = {
        "repo_path": str(path) if path is not None else None,
        "after": after,
        "before": before,
        "top_targets": top_targets,
        "top_reasons": top_reasons,
        "detail": detail,
        "output_format": output_format,
    }
    if verbose:
        overrides["verbose"] = True
    return load_config(config_file=config, **overrides)

"""Public API for Thrash Insight.

Example:
    >>> from thrash_insight import analyze
    >>>
    >>> result = analyze("/path/to/repo", after="1 month ago")
    >>> for target in result.targets[:5]:
    ...     print(target.score, target.name)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .analysis import AnalysisResult, ThrashEngine
from .config import AnalysisConfig, load_config
from .exceptions import InvalidPathError
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(
    path: str = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisResult:
    """Analyze a repository's history and return ranked targets.

    Args:
        path: Repository root
        config_file: Optional TOML config file
        **overrides: Any AnalysisConfig field (after, before, top_targets, ...)

    Raises:
        InvalidPathError: If path is not a directory
        GitCommandError: If the git log cannot be fetched
    """
    config = load_config(config_file=config_file, repo_path=path, **overrides)
    return run_analysis(config)


def run_analysis(config: AnalysisConfig) -> AnalysisResult:
    """Run the pipeline for an already-built configuration."""
    repo = Path(config.repo_path)
    if not repo.is_dir():
        raise InvalidPathError(repo, "not a directory")

    logger.debug("Analyzing %s (%s .. %s)", repo.resolve(), config.after, config.before)
    return ThrashEngine(config).run()

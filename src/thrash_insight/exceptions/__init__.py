"""Exception hierarchy for Thrash Insight."""

from .analysis import AnalysisError, GitCommandError
from .base import ThrashInsightError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "ThrashInsightError",
    "AnalysisError",
    "GitCommandError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]

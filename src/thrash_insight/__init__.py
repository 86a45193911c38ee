"""
Thrash Insight - refactoring candidates from commit history

Ranks files and co-changing file groups by churn magnitude multiplied by how
often the same lines were added by one commit and removed by another.
"""

__version__ = "0.1.0"

from .analysis import AnalysisResult
from .api import analyze, run_analysis
from .config import AnalysisConfig, load_config
from .temporal.models import Commit, Reason, Target

__all__ = [
    "analyze",  # Main entry point
    "run_analysis",
    "AnalysisConfig",
    "AnalysisResult",
    "load_config",
    "Commit",
    "Reason",
    "Target",
]

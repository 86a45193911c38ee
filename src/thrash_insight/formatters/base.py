"""Base formatter interface for Thrash Insight output rendering."""

from abc import ABC, abstractmethod
from typing import List

from ..analysis.models import AnalysisResult
from ..config import AnalysisConfig
from ..temporal.models import Reason, Target


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult, config: AnalysisConfig) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, result: AnalysisResult, config: AnalysisConfig) -> str:
        """Return formatted string representation of the report."""


def visible_reasons(target: Target, config: AnalysisConfig) -> List[Reason]:
    """Reasons to print for a target.

    Only the first ``top_reasons`` reasons are considered; of those,
    single-count reasons are hidden unless detail mode is on.
    """
    considered = target.reasons[: config.top_reasons]
    return [r for r in considered if config.detail or r.count > 1]

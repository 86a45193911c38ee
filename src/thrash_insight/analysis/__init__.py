"""Analysis pipeline: churn scoring, thrash replay, ranking."""

from .engine import ThrashEngine
from .models import AnalysisResult
from .ranking import rank_targets, shorten

__all__ = ["ThrashEngine", "AnalysisResult", "rank_targets", "shorten"]

"""Thrash analysis pipeline.

  git log -> Commits
          -> Churn targets (per file, per co-change group)
          -> Thrash replay per target (git diff per member commit)
          -> Ranking
"""

from __future__ import annotations

from typing import Optional

from ..config import AnalysisConfig
from ..exceptions import GitCommandError
from ..logging_config import get_logger
from ..temporal.churn import build_targets
from ..temporal.git_extractor import GitLogExtractor
from ..temporal.models import Commit
from ..temporal.patch_extractor import PatchExtractor
from ..temporal.thrash import detect_thrash
from .models import AnalysisResult
from .ranking import rank_targets

logger = get_logger(__name__)


class ThrashEngine:
    """Runs the full pipeline for one configuration."""

    def __init__(
        self,
        config: AnalysisConfig,
        log_extractor: Optional[GitLogExtractor] = None,
        patch_extractor: Optional[PatchExtractor] = None,
    ):
        self.config = config
        self.log_extractor = log_extractor or GitLogExtractor(
            config.repo_path, config.after, config.before
        )
        self.patch_extractor = patch_extractor or PatchExtractor(config.repo_path)
        self._patches: dict[str, Optional[tuple[list[str], list[str]]]] = {}

    def run(self) -> AnalysisResult:
        """Run the pipeline. GitCommandError from the log fetch propagates."""
        commits = self.log_extractor.extract()

        targets = build_targets(commits, self.config.source_extensions)
        logger.info("Built %d candidate targets from %d commits", len(targets), len(commits))

        for target in targets.values():
            total = detect_thrash(target, self._lines_for)
            logger.debug("Target %s: %d thrash events, score %.1f", target.name, total, target.score)

        result = AnalysisResult(
            targets=rank_targets(targets.values()),
            commits=commits,
            candidate_count=len(targets),
            unavailable_patches=sum(1 for p in self._patches.values() if p is None),
        )
        logger.info(
            "%d of %d targets show thrashing", result.total_targets, result.candidate_count
        )
        return result

    def _lines_for(self, commit: Commit) -> Optional[tuple[list[str], list[str]]]:
        # Patches cover the whole commit, so one fetch serves every target.
        if commit.id not in self._patches:
            try:
                self._patches[commit.id] = self.patch_extractor.lines_for(commit.id)
            except GitCommandError as e:
                logger.debug("No patch for %s, skipping thrash replay: %s", commit.short_id, e)
                self._patches[commit.id] = None
        return self._patches[commit.id]

"""Result of a full thrash analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..temporal.models import Commit, Target


@dataclass
class AnalysisResult:
    targets: list[Target] = field(default_factory=list)  # ranked, thrash-only
    commits: list[Commit] = field(default_factory=list)  # newest first
    candidate_count: int = 0  # targets before thrash filtering
    unavailable_patches: int = 0

    @property
    def total_targets(self) -> int:
        return len(self.targets)

    @property
    def total_commits(self) -> int:
        return len(self.commits)

"""Build per-file and co-change churn targets from commit history."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Commit, Target

DEFAULT_SOURCE_EXTENSIONS = (".h", ".c", ".go")


def edit_to_score(n: int) -> float:
    """Order-of-magnitude score for ``n`` edited lines.

    Counts decimal digits: 1 -> 1.0, 10 -> 2.0, 100 -> 3.0, 0 -> 0.0.
    Large mechanical diffs are compressed relative to small hand edits.
    """
    score = 0.0
    while n >= 1:
        score += 1
        n //= 10
    return score


def _add(targets: dict[str, Target], name: str, commit: Commit, score: float) -> None:
    target = targets.get(name)
    if target is None:
        target = Target(name=name)
        targets[name] = target
    target.commits.append(commit)
    target.score += score


def build_targets(
    commits: Iterable[Commit],
    extensions: Sequence[str] = DEFAULT_SOURCE_EXTENSIONS,
) -> dict[str, Target]:
    """Accumulate churn scores into targets keyed by name.

    Every changed source file gets a per-file target. A commit touching two
    or more source files also feeds a group target named by those paths
    joined with commas (in commit order); its contribution is the sum of the
    file scores multiplied by the number of files.
    """
    suffixes = tuple(extensions)
    targets: dict[str, Target] = {}

    for commit in commits:
        files: list[str] = []
        group_score = 0.0
        for diff in commit.diffs:
            if not diff.file.endswith(suffixes):
                continue
            file_score = edit_to_score(diff.total)
            files.append(diff.file)
            group_score += file_score
            _add(targets, diff.file, commit, file_score)

        if len(files) >= 2:
            _add(targets, ",".join(files), commit, group_score * len(files))

    return targets

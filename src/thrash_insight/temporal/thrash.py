"""Detect lines that thrash between commits within a target's history."""

from __future__ import annotations

from typing import Callable, Optional

from .models import Commit, Reason, Target

# (added, removed) lines for a commit, or None when unavailable
LineSource = Callable[[Commit], Optional[tuple[list[str], list[str]]]]


def detect_thrash(target: Target, line_source: LineSource) -> int:
    """Replay the target's commits and record thrashing lines as reasons.

    A line thrashes when one commit adds it after a different commit removed
    it, or removes it after a different commit added it. Each event consumes
    the opposite entry, so a further event needs a fresh add/remove pair.
    The target's score is multiplied by the total number of events, which is
    returned.
    """
    added_by: dict[str, str] = {}
    removed_by: dict[str, str] = {}
    counts: dict[str, int] = {}

    for commit in target.commits:
        lines = line_source(commit)
        if lines is None:
            continue
        added, removed = lines

        for line in added:
            owner = removed_by.get(line)
            if owner is not None and owner != commit.id:
                counts[line] = counts.get(line, 0) + 1
                del removed_by[line]
            added_by[line] = commit.id

        for line in removed:
            owner = added_by.get(line)
            if owner is not None and owner != commit.id:
                counts[line] = counts.get(line, 0) + 1
                del added_by[line]
            removed_by[line] = commit.id

    reasons = [Reason(line=line, count=count) for line, count in counts.items()]
    # stable: ties keep first-event order
    reasons.sort(key=lambda r: r.count, reverse=True)
    target.reasons = reasons

    total = target.thrash_count
    target.score *= total
    return total

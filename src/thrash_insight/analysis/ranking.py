"""Rank refactoring targets by final score."""

from __future__ import annotations

from typing import Iterable

from ..temporal.models import Target


def rank_targets(targets: Iterable[Target]) -> list[Target]:
    """Drop targets without a positive score and sort the rest.

    Order is descending score, then descending number of member commits.
    """
    survivors = [t for t in targets if t.score > 0]
    survivors.sort(key=lambda t: (t.score, len(t.commits)), reverse=True)
    return survivors


def shorten(s: str, width: int) -> str:
    """Fit ``s`` into ``width`` characters, ellipsizing when too long."""
    if width < 3:
        return ""
    if len(s) > width:
        return s[: width - 3] + "..."
    return s

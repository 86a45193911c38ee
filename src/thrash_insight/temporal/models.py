"""Data models for commit history and refactoring targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Author:
    name: str
    email: str
    timestamp: int  # unix seconds, tz offset ignored


@dataclass(frozen=True)
class Diff:
    file: str
    added: int
    deleted: int

    @property
    def total(self) -> int:
        return self.added + self.deleted


@dataclass
class Commit:
    id: str
    tree: str = ""
    parent: str = ""  # empty for root commits
    author: Optional[Author] = None
    message: list[str] = field(default_factory=list)
    diffs: list[Diff] = field(default_factory=list)

    @property
    def short_id(self) -> str:
        return self.id[:7]

    @property
    def subject(self) -> str:
        """First message line, or empty string for commits without one."""
        return self.message[0] if self.message else ""

    @property
    def author_name(self) -> str:
        return self.author.name if self.author else ""


@dataclass
class Reason:
    line: str
    count: int = 0


@dataclass
class Target:
    """A refactoring candidate: one file, or files that changed together.

    Group targets are named by their member paths joined with commas.
    """

    name: str
    score: float = 0.0
    commits: list[Commit] = field(default_factory=list)
    reasons: list[Reason] = field(default_factory=list)

    @property
    def files(self) -> list[str]:
        return self.name.split(",")

    @property
    def is_group(self) -> bool:
        return "," in self.name

    @property
    def thrash_count(self) -> int:
        return sum(r.count for r in self.reasons)

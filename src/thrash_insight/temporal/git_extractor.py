"""Extract commit history from ``git log --format=raw --numstat``."""

import re
import subprocess
from pathlib import Path
from typing import Sequence

from ..exceptions import GitCommandError
from ..logging_config import get_logger
from .models import Author, Commit, Diff

logger = get_logger(__name__)


def run_git(repo_path: str, args: Sequence[str]) -> str:
    """Run ``git -C <repo_path> <args>`` and return its stdout.

    Blocks until git exits. Raises GitCommandError if git is missing or
    exits non-zero.
    """
    cmd = ["git", "-C", repo_path, *args]
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except (FileNotFoundError, PermissionError) as e:
        raise GitCommandError(cmd, str(e)) from e

    if result.returncode != 0:
        raise GitCommandError(cmd, result.stderr.strip(), returncode=result.returncode)
    return result.stdout


_COMMIT_RE = re.compile(r"^commit (\S+)")
_TREE_RE = re.compile(r"^tree (.+)$")
_PARENT_RE = re.compile(r"^parent (.+)$")
# author <name> <<email>> <unix-ts> <tz>; name may contain spaces
_AUTHOR_RE = re.compile(r"^author (.*) <([^>]*)> (\S+) \S+$")
_MESSAGE_RE = re.compile(r"^ {4}(.+)$")
_NUMSTAT_RE = re.compile(r"^([^\t]+)\t([^\t]+)\t(.+)$")
_COUNT_RE = re.compile(r"[0-9]+")
_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def parse_raw_log(raw: str) -> list[Commit]:
    """Parse raw-format git log output with numstat lines into commits.

    Single forward pass. Each line is classified by pattern and attached to
    the most recent ``commit`` header. Lines that cannot be parsed (bad
    timestamps, binary numstat entries) are skipped.
    """
    commits: list[Commit] = []
    current = None

    for line in raw.split("\n"):
        line = line.removesuffix("\r")
        match = _COMMIT_RE.match(line)
        if match:
            current = Commit(id=match.group(1))
            commits.append(current)
            continue

        if current is None:
            continue

        match = _TREE_RE.match(line)
        if match:
            current.tree = match.group(1)
            continue

        match = _PARENT_RE.match(line)
        if match:
            current.parent = match.group(1)
            continue

        match = _AUTHOR_RE.match(line)
        if match:
            if not _TIMESTAMP_RE.fullmatch(match.group(3)):
                logger.debug("Skipping author line with bad timestamp: %r", line)
                continue
            timestamp = int(match.group(3))
            current.author = Author(
                name=match.group(1),
                email=match.group(2),
                timestamp=timestamp,
            )
            continue

        match = _MESSAGE_RE.match(line)
        if match:
            current.message.append(match.group(1))
            continue

        match = _NUMSTAT_RE.match(line)
        if match:
            added, deleted = match.group(1), match.group(2)
            if not (_COUNT_RE.fullmatch(added) and _COUNT_RE.fullmatch(deleted)):
                logger.debug("Skipping non-numeric numstat line: %r", line)
                continue
            current.diffs.append(Diff(file=match.group(3), added=int(added), deleted=int(deleted)))

    return commits


class GitLogExtractor:
    """Fetch and parse every commit in a time window across all refs."""

    def __init__(self, repo_path: str, after: str, before: str):
        self.repo_path = str(Path(repo_path).resolve())
        self.after = after
        self.before = before

    def extract(self) -> list[Commit]:
        """Return commits in git log order (newest first).

        Raises GitCommandError if the log cannot be fetched.
        """
        raw = run_git(
            self.repo_path,
            [
                "log",
                "--all",
                f"--after={self.after}",
                f"--before={self.before}",
                "--format=raw",
                "--numstat",
            ],
        )
        commits = parse_raw_log(raw)
        logger.info("Parsed %d commits between %r and %r", len(commits), self.after, self.before)
        return commits

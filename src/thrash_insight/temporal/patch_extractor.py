"""Extract meaningful added/removed lines from a single commit's patch."""

import re
from pathlib import Path

from ..logging_config import get_logger
from .git_extractor import run_git

logger = get_logger(__name__)

# Exactly one leading +/-; "+++"/"---" file headers are excluded
_ADDED_RE = re.compile(r"^\+([^+].*)$")
_REMOVED_RE = re.compile(r"^-([^-].*)$")

# Call or definition, loop/branch head, or assignment
_USEFUL_LINE_RE = re.compile(r"[a-zA-Z0-9_]+\(|^if |^for |=")

_COMMENT_PREFIXES = ("/", "*")


def is_useful_line(line: str) -> bool:
    """True if a stripped source line looks structurally interesting."""
    if line.startswith(_COMMENT_PREFIXES):
        return False
    return _USEFUL_LINE_RE.search(line) is not None


def parse_patch(patch: str) -> tuple[list[str], list[str]]:
    """Split unified diff text into (added, removed) useful lines.

    Lines are stripped of surrounding whitespace and kept in patch order.
    """
    added: list[str] = []
    removed: list[str] = []

    for line in patch.split("\n"):
        line = line.removesuffix("\r")
        match = _ADDED_RE.match(line)
        if match:
            text = match.group(1).strip()
            if is_useful_line(text):
                added.append(text)
            continue

        match = _REMOVED_RE.match(line)
        if match:
            text = match.group(1).strip()
            if is_useful_line(text):
                removed.append(text)

    return added, removed


class PatchExtractor:
    """Fetch per-commit patches (``git diff <id>^!``) and filter their lines."""

    def __init__(self, repo_path: str):
        self.repo_path = str(Path(repo_path).resolve())

    def lines_for(self, commit_id: str) -> tuple[list[str], list[str]]:
        """Return (added, removed) useful lines for one commit.

        Raises GitCommandError if the patch cannot be fetched. Whether a root
        commit yields an empty patch or an error depends on the git version.
        """
        patch = run_git(self.repo_path, ["diff", f"{commit_id}^!"])
        added, removed = parse_patch(patch)
        logger.debug(
            "Commit %s: %d added, %d removed useful lines",
            commit_id[:7],
            len(added),
            len(removed),
        )
        return added, removed

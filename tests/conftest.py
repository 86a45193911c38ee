"""Shared test fixtures for Thrash Insight tests."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register markers."""
    config.addinivalue_line("markers", "git: test needs a git executable")


def pytest_collection_modifyitems(config, items):
    """Skip git tests when no git executable is installed."""
    skip_git = pytest.mark.skip(reason="git executable not found")
    has_git = shutil.which("git") is not None
    for item in items:
        if "git" in item.keywords and not has_git:
            item.add_marker(skip_git)


class GitRepo:
    """Throwaway repository driven through the git CLI."""

    def __init__(self, root: Path):
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self._tick = 0
        self.git("init", "-q")
        self.git("config", "user.name", "Alice Example")
        self.git("config", "user.email", "alice@example.com")
        self.git("config", "commit.gpgsign", "false")

    def git(self, *args: str) -> str:
        env = os.environ.copy()
        # Fixed dates (mid November 2023) keep runs deterministic
        stamp = f"@{1_700_000_000 + self._tick} +0000"
        env["GIT_AUTHOR_DATE"] = stamp
        env["GIT_COMMITTER_DATE"] = stamp
        result = subprocess.run(
            ["git", *args],
            cwd=str(self.root),
            env=env,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def commit(self, message: str, files: dict) -> str:
        """Write files (path -> content) and commit them; return the commit id."""
        for rel, content in files.items():
            path = self.root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
            self.git("add", rel)
        self._tick += 60
        self.git("commit", "-q", "-m", message)
        return self.git("rev-parse", "HEAD").strip()


@pytest.fixture
def git_repo(tmp_path):
    """Empty git repository in a temporary directory."""
    if shutil.which("git") is None:
        pytest.skip("git executable not found")
    return GitRepo(tmp_path / "repo")

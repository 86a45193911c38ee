"""Temporal analysis: git history, churn targets, and thrash detection."""

from .churn import DEFAULT_SOURCE_EXTENSIONS, build_targets, edit_to_score
from .git_extractor import GitLogExtractor, parse_raw_log, run_git
from .models import Author, Commit, Diff, Reason, Target
from .patch_extractor import PatchExtractor, is_useful_line, parse_patch
from .thrash import detect_thrash

__all__ = [
    "Author",
    "Commit",
    "Diff",
    "Reason",
    "Target",
    "DEFAULT_SOURCE_EXTENSIONS",
    "GitLogExtractor",
    "PatchExtractor",
    "build_targets",
    "detect_thrash",
    "edit_to_score",
    "is_useful_line",
    "parse_patch",
    "parse_raw_log",
    "run_git",
]

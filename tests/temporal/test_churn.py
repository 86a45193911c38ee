"""Tests for churn scoring and target construction."""

import math

import pytest

from thrash_insight.temporal.churn import build_targets, edit_to_score
from thrash_insight.temporal.models import Author, Commit, Diff


def make_commit(commit_id: str, diffs: list[tuple[str, int, int]]) -> Commit:
    """Create a commit from (file, added, deleted) tuples."""
    return Commit(
        id=commit_id,
        author=Author(name="alice", email="alice@example.com", timestamp=1000),
        message=[f"Commit {commit_id}"],
        diffs=[Diff(file=f, added=a, deleted=d) for f, a, d in diffs],
    )


class TestEditToScore:
    @pytest.mark.parametrize(
        "n,expected",
        [(0, 0.0), (1, 1.0), (9, 1.0), (10, 2.0), (99, 2.0), (100, 3.0), (12345, 5.0)],
    )
    def test_digit_count(self, n, expected):
        assert edit_to_score(n) == expected

    def test_matches_log10(self):
        for n in range(1, 5000, 37):
            assert edit_to_score(n) == math.floor(math.log10(n)) + 1

    def test_negative_is_zero(self):
        assert edit_to_score(-5) == 0.0


class TestBuildTargets:
    def test_empty_history(self):
        assert build_targets([]) == {}

    def test_single_file_target(self):
        targets = build_targets([make_commit("c1", [("main.go", 10, 2)])])
        assert list(targets) == ["main.go"]
        assert targets["main.go"].score == 2.0
        assert [c.id for c in targets["main.go"].commits] == ["c1"]

    def test_non_source_files_ignored(self):
        targets = build_targets(
            [make_commit("c1", [("README.md", 50, 0), ("main.go", 1, 0)])]
        )
        assert list(targets) == ["main.go"]

    def test_scores_accumulate_across_commits(self):
        targets = build_targets(
            [
                make_commit("c2", [("a.c", 5, 5)]),
                make_commit("c1", [("a.c", 100, 0)]),
            ]
        )
        assert targets["a.c"].score == 2.0 + 3.0
        assert [c.id for c in targets["a.c"].commits] == ["c2", "c1"]

    def test_group_target_created_for_two_files(self):
        targets = build_targets([make_commit("c1", [("a.c", 1, 0), ("a.h", 10, 0)])])
        group = targets["a.c,a.h"]
        assert group.is_group
        assert group.files == ["a.c", "a.h"]
        assert group.score == (1.0 + 2.0) * 2

    def test_three_file_group_score(self):
        # magnitudes 2, 1, 3 -> (2 + 1 + 3) * 3
        targets = build_targets(
            [make_commit("c1", [("x.c", 50, 0), ("y.c", 3, 0), ("z.c", 0, 500)])]
        )
        assert targets["x.c,y.c,z.c"].score == 18.0

    def test_group_name_preserves_commit_order(self):
        targets = build_targets([make_commit("c1", [("z.go", 1, 0), ("a.go", 1, 0)])])
        assert "z.go,a.go" in targets

    def test_no_group_for_single_qualifying_file(self):
        targets = build_targets(
            [make_commit("c1", [("a.c", 1, 0), ("notes.txt", 1, 0)])]
        )
        assert all(not t.is_group for t in targets.values())

    def test_group_accumulates_when_repeated(self):
        commits = [
            make_commit("c2", [("a.c", 1, 0), ("b.c", 1, 0)]),
            make_commit("c1", [("a.c", 1, 0), ("b.c", 1, 0)]),
        ]
        group = build_targets(commits)["a.c,b.c"]
        assert group.score == 8.0
        assert len(group.commits) == 2

    def test_custom_extensions(self):
        targets = build_targets(
            [make_commit("c1", [("app.py", 1, 0), ("main.go", 1, 0)])],
            extensions=(".py",),
        )
        assert list(targets) == ["app.py"]

    def test_zero_line_diff_still_member(self):
        targets = build_targets([make_commit("c1", [("mode.c", 0, 0)])])
        assert targets["mode.c"].score == 0.0
        assert len(targets["mode.c"].commits) == 1

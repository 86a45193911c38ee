"""Tests for thrash detection."""

from thrash_insight.temporal.models import Commit, Target
from thrash_insight.temporal.thrash import detect_thrash


def make_target(score: float, patches: dict[str, tuple[list[str], list[str]]]) -> Target:
    """Target whose commits are the patch keys, in insertion order."""
    return Target(name="main.c", score=score, commits=[Commit(id=cid) for cid in patches])


def source(patches):
    return lambda commit: patches.get(commit.id)


class TestDetectThrash:
    def test_removed_then_readded_counts_once(self):
        patches = {"c1": ([], ["if (foo)"]), "c2": (["if (foo)"], [])}
        target = make_target(4.0, patches)

        total = detect_thrash(target, source(patches))

        assert total == 1
        assert [(r.line, r.count) for r in target.reasons] == [("if (foo)", 1)]
        assert target.score == 4.0

    def test_added_then_removed_counts(self):
        patches = {"c1": (["x = 1"], []), "c2": ([], ["x = 1"])}
        target = make_target(3.0, patches)
        assert detect_thrash(target, source(patches)) == 1

    def test_same_commit_is_not_thrash(self):
        patches = {"c1": (["x = 1"], ["x = 1"])}
        target = make_target(5.0, patches)

        assert detect_thrash(target, source(patches)) == 0
        assert target.reasons == []
        assert target.score == 0.0

    def test_same_commit_id_repeated_is_not_thrash(self):
        patches = {"c1": (["x = 1"], [])}
        target = Target(name="t", score=1.0, commits=[Commit(id="c1"), Commit(id="c1")])

        def lines(commit):
            return ([], ["x = 1"]) if commit is target.commits[1] else patches["c1"]

        assert detect_thrash(target, lines) == 0

    def test_event_consumes_entry(self):
        # c1 removes, c2 adds (event), c3 adds again: no removal left to pair with
        patches = {
            "c1": ([], ["f(x)"]),
            "c2": (["f(x)"], []),
            "c3": (["f(x)"], []),
        }
        target = make_target(1.0, patches)
        assert detect_thrash(target, source(patches)) == 1

    def test_fresh_pair_counts_again(self):
        patches = {
            "c1": ([], ["f(x)"]),
            "c2": (["f(x)"], []),
            "c3": ([], ["f(x)"]),
            "c4": (["f(x)"], []),
        }
        target = make_target(2.0, patches)

        assert detect_thrash(target, source(patches)) == 3
        assert target.reasons[0].count == 3
        assert target.thrash_count == 3
        assert target.score == 6.0

    def test_reasons_sorted_by_count_then_encounter(self):
        patches = {
            "c1": ([], ["a = 1", "b = 2"]),
            "c2": (["a = 1", "b = 2"], []),
            "c3": ([], ["b = 2"]),
            "c4": ([], ["c = 3"]),
            "c5": (["c = 3"], []),
        }
        target = make_target(1.0, patches)
        detect_thrash(target, source(patches))
        assert [(r.line, r.count) for r in target.reasons] == [
            ("b = 2", 2),
            ("a = 1", 1),
            ("c = 3", 1),
        ]

    def test_unavailable_commit_skipped(self):
        patches = {"c1": ([], ["g()"]), "c3": (["g()"], [])}
        target = make_target(2.0, patches)
        target.commits.insert(1, Commit(id="c2"))

        assert detect_thrash(target, source(patches)) == 1
        assert len(target.commits) == 3

    def test_no_lines_means_zero_score(self):
        target = make_target(50.0, {"c1": ([], []), "c2": ([], [])})
        assert detect_thrash(target, lambda c: ([], [])) == 0
        assert target.score == 0.0

    def test_score_multiplied_by_summed_reason_counts(self):
        patches = {
            "c1": ([], ["a = 1", "b = 2"]),
            "c2": (["a = 1", "b = 2"], []),
        }
        target = make_target(3.0, patches)

        total = detect_thrash(target, source(patches))

        assert total == target.thrash_count == 2
        assert target.score == 6.0

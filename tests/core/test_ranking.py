# Author: Bradley R. Kinnard
"""Tests for dedup and ranking."""

from contradiction_engine.core.analysis.ranking import (
    deduplicate,
    deduplicate_and_rank,
    evidence_similarity,
    is_duplicate,
    rank_matches,
)
from contradiction_engine.core.models.finding import ContradictionMatch


def _match(
    evidence,
    type="semantic",
    severity="medium",
    description="desc",
    confidence=70,
) -> ContradictionMatch:
    return ContradictionMatch(
        type=type,
        severity=severity,
        description=description,
        evidence=evidence,
        confidence=confidence,
    )


class TestEvidenceSimilarity:
    def test_identical_ignoring_case(self):
        assert evidence_similarity(["A", "b"], ["a", "B"]) == 1.0

    def test_disjoint(self):
        assert evidence_similarity(["a"], ["b"]) == 0.0

    def test_partial(self):
        assert abs(evidence_similarity(["a", "b"], ["a", "c"]) - 1 / 3) < 1e-9

    def test_order_irrelevant(self):
        assert evidence_similarity(["x", "y"], ["y", "x"]) == 1.0

    def test_both_empty(self):
        assert evidence_similarity([], []) == 0.0


class TestDeduplicate:
    def test_first_occurrence_wins(self):
        first = _match(["The lot is large"], confidence=60)
        second = _match(["THE LOT IS LARGE"], confidence=90)

        assert deduplicate([first, second]) == [first]

    def test_different_description_kept(self):
        a = _match(["s"], description="one")
        b = _match(["s"], description="two")
        assert deduplicate([a, b]) == [a, b]

    def test_different_type_kept(self):
        a = _match(["s"], type="semantic")
        b = _match(["s"], type="logical")
        assert deduplicate([a, b]) == [a, b]

    def test_threshold_is_strict(self):
        # jaccard 4/5 == 0.8 is not above the threshold
        a = _match(["a", "b", "c", "d"])
        b = _match(["a", "b", "c", "d", "e"])
        assert not is_duplicate(a, b)
        assert len(deduplicate([a, b])) == 2

    def test_custom_threshold(self):
        a = _match(["a", "b"])
        b = _match(["a", "c"])
        assert len(deduplicate([a, b], threshold=0.3)) == 1


class TestRank:
    def test_severity_then_confidence(self):
        low = _match(["1"], severity="low", confidence=99)
        med70 = _match(["2"], severity="medium", confidence=70)
        med85 = _match(["3"], severity="medium", confidence=85)
        crit = _match(["4"], severity="critical", confidence=10)

        assert rank_matches([low, med70, crit, med85]) == [crit, med85, med70, low]

    def test_stable_for_ties(self):
        a = _match(["a"], description="a")
        b = _match(["b"], description="b")
        assert rank_matches([a, b]) == [a, b]
        assert rank_matches([b, a]) == [b, a]

    def test_dedup_then_rank(self):
        high = _match(["x"], severity="high", description="h")
        dup = _match(["x"], severity="high", description="h", confidence=10)
        med = _match(["y"])
        assert deduplicate_and_rank([med, high, dup]) == [high, med]

    def test_empty(self):
        assert deduplicate_and_rank([]) == []

# Author: Bradley R. Kinnard
"""Tests for the cross-sentence pass."""

import logging

from contradiction_engine.core.analysis.cross_sentence import (
    NEGATION_CONFIDENCE,
    OPPOSITION_CONFIDENCE,
    run_cross_sentence_pass,
)
from contradiction_engine.core.analysis.lexicon import default_lexicon
from contradiction_engine.core.models.finding import ContradictionType, Severity


class TestNegationTemplates:
    def test_true_then_false(self):
        matches = run_cross_sentence_pass(["This is true", "This is false"], default_lexicon())

        assert len(matches) == 1
        m = matches[0]
        assert m.type == ContradictionType.Logical
        assert m.severity == Severity.Critical
        assert m.confidence == NEGATION_CONFIDENCE == 90
        assert m.description == "Direct logical contradiction between statements"
        assert m.evidence == ("This is true", "This is false")

    def test_negative_first_not_flagged(self):
        # only positive-then-negative order is checked
        assert run_cross_sentence_pass(["This is false", "This is true"], default_lexicon()) == []

    def test_will_and_will_not(self):
        matches = run_cross_sentence_pass(
            ["Settlement will happen", "Settlement will not happen"], default_lexicon()
        )
        assert [m.type for m in matches] == [ContradictionType.Logical]

    def test_can_and_cannot(self):
        matches = run_cross_sentence_pass(
            ["The owner can achieve approval", "The owner cannot achieve approval"], default_lexicon()
        )
        assert [m.severity for m in matches] == [Severity.Critical]

    def test_connectors_do_not_suppress_negation(self):
        matches = run_cross_sentence_pass(["This is true", "However this is false"], default_lexicon())
        assert len(matches) == 1


class TestOppositionAcrossSentences:
    def test_safe_vs_dangerous(self):
        matches = run_cross_sentence_pass(
            ["The area is safe", "Some streets are dangerous at night"], default_lexicon()
        )

        assert len(matches) == 1
        m = matches[0]
        assert m.type == ContradictionType.Semantic
        assert m.severity == Severity.High
        assert m.confidence == OPPOSITION_CONFIDENCE == 75
        assert m.description == 'Contradictory statements about "safe" vs "dangerous" across different sentences'
        assert m.evidence == ("The area is safe", "Some streets are dangerous at night")

    def test_reverse_direction_reports_pair_order(self):
        matches = run_cross_sentence_pass(["Streets are dangerous", "The area is safe"], default_lexicon())
        assert matches[0].description == 'Contradictory statements about "safe" vs "dangerous" across different sentences'
        assert matches[0].evidence == ("Streets are dangerous", "The area is safe")

    def test_connector_suppresses(self):
        assert run_cross_sentence_pass(
            ["The area is safe", "However, some streets are dangerous at night"], default_lexicon()
        ) == []

    def test_connector_is_substring_check(self):
        # "attribute" contains "but"
        assert run_cross_sentence_pass(
            ["The lot is large", "The attribute table says small"], default_lexicon()
        ) == []

    def test_single_sentence(self):
        assert run_cross_sentence_pass(["The lot is large and small"], default_lexicon()) == []

    def test_empty(self):
        assert run_cross_sentence_pass([], default_lexicon()) == []


class TestSentenceCap:
    def test_cap_truncates_and_warns(self, caplog):
        sentences = ["The area is safe", "Nothing here", "Streets are dangerous"]
        assert len(run_cross_sentence_pass(sentences, default_lexicon())) == 1

        with caplog.at_level(logging.WARNING):
            capped = run_cross_sentence_pass(sentences, default_lexicon(), max_sentences=2)

        assert capped == []
        assert "capping at 2" in caplog.text

# Author: Bradley R. Kinnard
"""Tests for finding and pattern models."""

import re

import pytest
from pydantic import ValidationError

from contradiction_engine.core.models.finding import (
    ContradictionMatch,
    ContradictionPattern,
    ContradictionType,
    MatchLocation,
    Severity,
)


def _match(**overrides) -> ContradictionMatch:
    data = dict(
        type="semantic",
        severity="medium",
        description="d",
        evidence=["sentence"],
        confidence=70,
    )
    data.update(overrides)
    return ContradictionMatch(**data)


class TestContradictionMatch:
    def test_coerces_enums(self):
        m = _match(type="logical", severity="critical")
        assert m.type is ContradictionType.Logical
        assert m.severity is Severity.Critical
        assert m.severity_rank == 4

    def test_confidence_bounds(self):
        _match(confidence=0)
        _match(confidence=100)
        with pytest.raises(ValidationError):
            _match(confidence=101)
        with pytest.raises(ValidationError):
            _match(confidence=-1)

    def test_evidence_required(self):
        with pytest.raises(ValidationError):
            _match(evidence=[])

    def test_unknown_severity_rejected(self):
        with pytest.raises(ValidationError):
            _match(severity="urgent")

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            _match(type="emotional")

    def test_frozen(self):
        m = _match()
        with pytest.raises(ValidationError):
            m.confidence = 5

    def test_evidence_and_suggestions_are_tuples(self):
        m = _match(evidence=["a", "b"], suggestions=["fix it"])
        assert m.evidence == ("a", "b")
        assert m.suggestions == ("fix it",)
        with pytest.raises(AttributeError):
            m.evidence.append("tampered")
        with pytest.raises(AttributeError):
            m.suggestions.append("tampered")

    def test_equality_by_value(self):
        assert _match() == _match()


class TestMatchLocation:
    def test_valid_span(self):
        loc = MatchLocation(start=2, end=5, context="abc")
        assert (loc.start, loc.end) == (2, 5)

    def test_inverted_span_rejected(self):
        with pytest.raises(ValidationError):
            MatchLocation(start=5, end=2, context="x")

    def test_negative_start_rejected(self):
        with pytest.raises(ValidationError):
            MatchLocation(start=-1, end=2, context="x")


class TestContradictionPattern:
    def _pattern(self, pattern):
        return ContradictionPattern(
            id="p",
            name="P",
            type="factual",
            pattern=pattern,
            description="d",
            severity="high",
        )

    def test_string_compiled_case_insensitive(self):
        p = self._pattern(r"flood.*dry")
        assert isinstance(p.pattern, re.Pattern)
        assert p.pattern.flags & re.IGNORECASE
        assert p.pattern.search("FLOOD zone, DRY site")

    def test_compiled_pattern_kept(self):
        p = self._pattern(re.compile(r"flood"))
        assert p.pattern.pattern == "flood"
        assert p.pattern.search("FLOOD") is None

    def test_bad_regex_fails_at_construction(self):
        with pytest.raises(ValidationError):
            self._pattern(r"(unclosed")

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            ContradictionPattern(
                id="  ", name="P", type="factual", pattern="x", description="d", severity="low"
            )

"""
Pydantic models for contradiction findings and the patterns that produce them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


# Python 3.10 compat - StrEnum added in 3.11
class StrEnum(str, Enum):
    pass


class ContradictionType(StrEnum):
    Logical = "logical"
    Factual = "factual"
    Temporal = "temporal"
    Quantitative = "quantitative"
    Semantic = "semantic"


class Severity(StrEnum):
    Low = "low"
    Medium = "medium"
    High = "high"
    Critical = "critical"


SEVERITY_RANK = {
    Severity.Critical: 4,
    Severity.High: 3,
    Severity.Medium: 2,
    Severity.Low: 1,
}

# antonym pair, both lowercase
OppositionPair = Tuple[str, str]


class FindingBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class MatchLocation(FindingBaseModel):
    """Character span of a direct pattern hit in the normalized text."""

    start: int
    end: int
    context: str

    @model_validator(mode="after")
    def validate_span(self) -> "MatchLocation":
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span: start={self.start}, end={self.end}")
        return self


class ContradictionMatch(FindingBaseModel):
    """One reported contradiction. Immutable once created; list inputs become tuples."""

    type: ContradictionType
    severity: Severity
    description: str
    evidence: Tuple[str, ...]
    confidence: int  # 0 to 100
    location: Optional[MatchLocation] = None
    suggestions: Optional[Tuple[str, ...]] = None

    @field_validator("confidence")
    @classmethod
    def validate_confidence(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"confidence must be between 0 and 100, got {v}")
        return v

    @field_validator("evidence")
    @classmethod
    def validate_evidence_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("evidence cannot be empty")
        return v

    @property
    def severity_rank(self) -> int:
        return SEVERITY_RANK[self.severity]


class ContradictionPattern(FindingBaseModel):
    """
    Regex plus metadata for one class of lexical self-contradiction.
    String patterns are compiled case-insensitively; bad regexes fail here,
    not at analysis time.
    """

    id: str
    name: str
    type: ContradictionType
    pattern: re.Pattern
    description: str
    severity: Severity

    @field_validator("pattern", mode="before")
    @classmethod
    def compile_pattern(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                return re.compile(v, re.IGNORECASE)
            except re.error as e:
                raise ValueError(f"pattern does not compile: {e}") from e
        return v

    @field_validator("id")
    @classmethod
    def validate_id_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("pattern id cannot be empty")
        return v.strip()


MatchLike = Union[ContradictionMatch, dict]
RuleCheck = Callable[[str], Union[List[MatchLike], Awaitable[List[MatchLike]]]]


@dataclass
class CustomRule:
    """
    Caller-supplied check over the normalized text.
    check() may be sync or async; it returns matches or dicts that validate into them.
    """

    id: str
    name: str
    category: str
    check: RuleCheck


__all__ = [
    "StrEnum",
    "ContradictionType",
    "Severity",
    "SEVERITY_RANK",
    "OppositionPair",
    "MatchLocation",
    "ContradictionMatch",
    "ContradictionPattern",
    "CustomRule",
    "MatchLike",
    "RuleCheck",
]

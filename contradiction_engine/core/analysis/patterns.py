"""
Seed contradiction patterns.
Each regex is scanned once over the whole normalized text; `.*` spans sentences.
"""

from typing import List, Tuple

from ..models.finding import ContradictionPattern, ContradictionType, Severity


SEED_PATTERNS: Tuple[ContradictionPattern, ...] = (
    ContradictionPattern(
        id="absolute-conditional",
        name="Absolute vs Conditional Statements",
        type=ContradictionType.Logical,
        pattern=r"(always|never|all|none|every|no one).*(?:sometimes|occasionally|often|rarely|few|some)",
        description="Contradiction between absolute and conditional statements",
        severity=Severity.High,
    ),
    ContradictionPattern(
        id="quantitative-opposite",
        name="Opposing Quantitative Trends",
        type=ContradictionType.Quantitative,
        pattern=r"(increase|rise|grow|up|higher|more).*(?:decrease|fall|decline|down|lower|less|reduce)",
        description="Contradictory quantitative trends in the same context",
        severity=Severity.Medium,
    ),
    ContradictionPattern(
        id="temporal-conflict",
        name="Temporal Contradictions",
        type=ContradictionType.Temporal,
        pattern=r"(before|earlier|prior|first).*(?:after|later|following|then|subsequently)",
        description="Conflicting temporal sequence descriptions",
        severity=Severity.Medium,
    ),
    ContradictionPattern(
        id="boolean-opposite",
        name="Boolean Contradictions",
        type=ContradictionType.Factual,
        pattern=r"(yes|true|correct|right|accurate).*(?:no|false|incorrect|wrong|inaccurate)",
        description="Direct contradictory boolean statements",
        severity=Severity.High,
    ),
    ContradictionPattern(
        id="quality-opposite",
        name="Quality Contradictions",
        type=ContradictionType.Semantic,
        pattern=r"(excellent|great|good|positive|beneficial).*(?:terrible|bad|poor|negative|harmful)",
        description="Contradictory quality assessments",
        severity=Severity.Medium,
    ),
    ContradictionPattern(
        id="existence-contradiction",
        name="Existence Contradictions",
        type=ContradictionType.Logical,
        pattern=r"(exists?|present|available|there is).*(?:doesn't exist|absent|unavailable|there is no)",
        description="Contradictory statements about existence or presence",
        severity=Severity.High,
    ),
    ContradictionPattern(
        id="capability-contradiction",
        name="Capability Contradictions",
        type=ContradictionType.Logical,
        pattern=r"(can|able|capable|possible).*(?:cannot|unable|incapable|impossible)",
        description="Contradictory statements about capabilities or possibilities",
        severity=Severity.Medium,
    ),
)


def default_patterns() -> List[ContradictionPattern]:
    """Fresh list of the seed patterns. Callers own the list, the patterns are frozen."""
    return list(SEED_PATTERNS)


__all__ = ["SEED_PATTERNS", "default_patterns"]

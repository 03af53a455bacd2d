"""
Finding and pattern models.
"""

from .finding import (
    SEVERITY_RANK,
    ContradictionMatch,
    ContradictionPattern,
    ContradictionType,
    CustomRule,
    MatchLocation,
    OppositionPair,
    Severity,
)

__all__ = [
    "SEVERITY_RANK",
    "ContradictionMatch",
    "ContradictionPattern",
    "ContradictionType",
    "CustomRule",
    "MatchLocation",
    "OppositionPair",
    "Severity",
]

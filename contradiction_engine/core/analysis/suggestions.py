"""
Fixed remediation suggestions attached to findings.
"""

from typing import Dict, Optional, Tuple

from ..models.finding import ContradictionType

PATTERN_SUGGESTIONS: Dict[ContradictionType, Tuple[str, ...]] = {
    ContradictionType.Logical: (
        "Review the logical consistency of your statements",
        "Consider whether all conditions and exceptions are properly specified",
        "Use more precise language to avoid logical conflicts",
    ),
    ContradictionType.Factual: (
        "Verify the accuracy of factual claims",
        "Ensure consistent use of factual information",
        "Consider citing sources for contradictory facts",
    ),
    ContradictionType.Temporal: (
        "Clarify the chronological order of events",
        "Use specific dates or time references",
        "Consider if events occurred simultaneously",
    ),
    ContradictionType.Quantitative: (
        "Verify numerical data and trends",
        "Specify the time periods for different measurements",
        "Consider whether trends apply to different contexts",
    ),
    ContradictionType.Semantic: (
        "Use more precise terminology",
        "Define ambiguous terms clearly",
        "Consider the context in which different terms are used",
    ),
}

GENERIC_SUGGESTIONS: Tuple[str, ...] = (
    "Review the identified contradiction",
    "Consider clarifying or rephrasing the conflicting statements",
    "Ensure consistency throughout the document",
)

SAME_SENTENCE_SUGGESTIONS: Tuple[str, ...] = (
    "Consider if both terms are necessary in the same context",
    "Clarify the relationship between these opposing concepts",
    "Use more specific language to avoid ambiguity",
)

CROSS_SENTENCE_SUGGESTIONS: Tuple[str, ...] = (
    "Review these statements for consistency",
    "Consider adding clarifying context",
    "Ensure both statements can be true simultaneously",
)

NEGATION_SUGGESTIONS: Tuple[str, ...] = (
    "Resolve the logical contradiction",
    "Clarify which statement is accurate",
    "Consider if both can be true under different conditions",
)


def suggestions_for(contradiction_type: Optional[str]) -> Tuple[str, ...]:
    """Suggestions for a pattern hit of the given type; generic ones for anything unknown."""
    try:
        key = ContradictionType(contradiction_type)
    except ValueError:
        return GENERIC_SUGGESTIONS
    return PATTERN_SUGGESTIONS.get(key, GENERIC_SUGGESTIONS)


__all__ = [
    "PATTERN_SUGGESTIONS",
    "GENERIC_SUGGESTIONS",
    "SAME_SENTENCE_SUGGESTIONS",
    "CROSS_SENTENCE_SUGGESTIONS",
    "NEGATION_SUGGESTIONS",
    "suggestions_for",
]

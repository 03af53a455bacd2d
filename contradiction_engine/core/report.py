"""
Report-level helpers: assemble section text for analysis, summarize findings for the gate.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Union

from .models.finding import SEVERITY_RANK, ContradictionMatch, Severity

SECTION_SEPARATOR = "\n\n"

# display order, highest first
SEVERITY_ORDER = (Severity.Critical, Severity.High, Severity.Medium, Severity.Low)


def assemble_report_text(
    sections: Union[Mapping, Iterable[Optional[str]]],
) -> str:
    """
    Join non-empty sections (property data, risk ratings, narrative, sales
    evidence, comments...) with a blank line. Mappings contribute their values
    in insertion order.
    """
    if isinstance(sections, Mapping):
        sections = sections.values()
    parts = [s for s in sections if s is not None and s.strip()]
    return SECTION_SEPARATOR.join(parts)


@dataclass
class FindingSummary:
    """Counts and gate flags for one analysis result."""

    total: int
    by_severity: Dict[Severity, int]
    by_type: Dict[str, int] = field(default_factory=dict)
    highest_severity: Optional[Severity] = None
    requires_review: bool = False
    blocks_report: bool = False

    @classmethod
    def from_matches(
        cls,
        matches: Sequence[ContradictionMatch],
        blocking_severity: Severity = Severity.Critical,
    ) -> "FindingSummary":
        by_severity = {sev: 0 for sev in SEVERITY_ORDER}
        by_type: Dict[str, int] = {}
        for m in matches:
            by_severity[m.severity] += 1
            key = m.type.value
            by_type[key] = by_type.get(key, 0) + 1

        highest = next((sev for sev in SEVERITY_ORDER if by_severity[sev]), None)
        threshold = SEVERITY_RANK[Severity(blocking_severity)]
        blocks = any(SEVERITY_RANK[m.severity] >= threshold for m in matches)

        return cls(
            total=len(matches),
            by_severity=by_severity,
            by_type=by_type,
            highest_severity=highest,
            requires_review=len(matches) > 0,
            blocks_report=blocks,
        )


__all__ = ["SECTION_SEPARATOR", "SEVERITY_ORDER", "assemble_report_text", "FindingSummary"]

# Author: Bradley R. Kinnard
"""
FindingsExplainerAgent - turns ranked findings into text for the report warning banner.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Sequence

from ..core.config import EngineSettings, settings as default_settings
from ..core.models.finding import ContradictionMatch
from ..core.report import SEVERITY_ORDER, FindingSummary

logger = logging.getLogger(__name__)


@dataclass
class Explanation:
    """A generated explanation."""

    summary: str
    details: list[str]
    match_count: int
    explanation_type: str  # "findings", "finding"
    blocks_report: bool = False
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _truncate(text: str, max_len: int = 60) -> str:
    """Truncate text for display."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def _confidence_descriptor(conf: int) -> str:
    if conf >= 85:
        return "high confidence"
    if conf >= 70:
        return "moderate confidence"
    return "low confidence"


def _severity_breakdown(summary: FindingSummary) -> str:
    parts = [
        f"{summary.by_severity[sev]} {sev.value}"
        for sev in SEVERITY_ORDER
        if summary.by_severity[sev]
    ]
    return ", ".join(parts)


def _describe(match: ContradictionMatch) -> str:
    evidence = " / ".join(f'"{_truncate(e)}"' for e in match.evidence)
    return (
        f"[{match.severity.value.upper()}] {match.type.value}: {match.description} "
        f"({match.confidence}%, {_confidence_descriptor(match.confidence)}) - {evidence}"
    )


class FindingsExplainerAgent:
    """Human-readable summaries of contradiction findings."""

    def __init__(
        self, max_details: Optional[int] = None, settings: Optional[EngineSettings] = None
    ):
        self._settings = settings or default_settings
        if max_details is None:
            max_details = self._settings.explainer_max_details
        if max_details < 0:
            raise ValueError(f"max_details must be >= 0, got {max_details}")
        self._max_details = max_details

    def explain(
        self, matches: Sequence[ContradictionMatch], summary: Optional[FindingSummary] = None
    ) -> Explanation:
        """
        One summary line plus a detail line per finding, in the given (ranked) order.
        """
        if summary is None:
            summary = FindingSummary.from_matches(matches, self._settings.blocking_severity)

        if not matches:
            return Explanation(
                summary="No contradictions found.",
                details=[],
                match_count=0,
                explanation_type="findings",
            )

        details = [_describe(m) for m in matches[: self._max_details]]
        hidden = len(matches) - len(details)
        if hidden > 0:
            details.append(f"...and {hidden} more")

        text = f"{summary.total} potential contradiction(s) found ({_severity_breakdown(summary)})."
        if summary.blocks_report:
            text += " Resolve before generating the report."

        return Explanation(
            summary=text,
            details=details,
            match_count=summary.total,
            explanation_type="findings",
            blocks_report=summary.blocks_report,
        )

    def explain_match(self, match: ContradictionMatch) -> Explanation:
        """Full detail for one finding, including its suggestions."""
        details = [f'Evidence: "{e}"' for e in match.evidence]
        if match.location is not None:
            details.append(f"Location: characters {match.location.start}-{match.location.end}")
        for s in match.suggestions or []:
            details.append(f"Suggestion: {s}")

        return Explanation(
            summary=_describe(match),
            details=details,
            match_count=1,
            explanation_type="finding",
        )


__all__ = ["FindingsExplainerAgent", "Explanation"]

"""
Contradiction detection for report text.
"""

from .agents import (
    ContradictionAnalyzerAgent,
    CustomRuleError,
    Explanation,
    FindingsExplainerAgent,
    analyze_text,
)
from .core import (
    ContradictionMatch,
    ContradictionPattern,
    ContradictionType,
    CustomRule,
    EngineSettings,
    FindingSummary,
    MatchLocation,
    Severity,
    assemble_report_text,
)

__version__ = "0.1.0"

__all__ = [
    "ContradictionAnalyzerAgent",
    "CustomRuleError",
    "Explanation",
    "FindingsExplainerAgent",
    "analyze_text",
    "ContradictionMatch",
    "ContradictionPattern",
    "ContradictionType",
    "CustomRule",
    "EngineSettings",
    "FindingSummary",
    "MatchLocation",
    "Severity",
    "assemble_report_text",
]

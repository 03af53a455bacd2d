"""
Core exports: models, config, and report helpers.
"""

# models
from .models.finding import (
    SEVERITY_RANK,
    ContradictionMatch,
    ContradictionPattern,
    ContradictionType,
    CustomRule,
    MatchLocation,
    OppositionPair,
    Severity,
)

# config
from .config import EngineSettings, get_settings, settings

# report helpers
from .report import FindingSummary, assemble_report_text

__all__ = [
    # finding models
    "SEVERITY_RANK",
    "ContradictionMatch",
    "ContradictionPattern",
    "ContradictionType",
    "CustomRule",
    "MatchLocation",
    "OppositionPair",
    "Severity",
    # config
    "EngineSettings",
    "settings",
    "get_settings",
    # report
    "FindingSummary",
    "assemble_report_text",
]

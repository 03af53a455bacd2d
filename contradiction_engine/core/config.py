"""
Configuration for the contradiction engine using Pydantic settings.
Reads from environment variables (CONTRADICTION_*) or .env file.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.finding import Severity


class EngineSettings(BaseSettings):
    """Tunables for the analysis passes and the report gate."""

    # two findings with same type+description merge above this evidence overlap
    duplicate_similarity_threshold: float = Field(default=0.8, ge=0.0, le=1.0)

    # catch, log and skip a failing custom rule instead of aborting the analysis
    isolate_custom_rules: bool = True

    # cross-sentence pass is O(n^2); None means no cap
    max_cross_sentences: Optional[int] = Field(default=None, ge=2)

    # report every occurrence of a pattern, not just the first
    report_all_pattern_occurrences: bool = False

    # findings at or above this severity block report generation
    blocking_severity: Severity = Severity.Critical

    explainer_max_details: int = Field(default=10, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="CONTRADICTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# singleton instance
settings = EngineSettings()


def get_settings() -> EngineSettings:
    """Get global settings."""
    return settings


__all__ = ["EngineSettings", "settings", "get_settings"]

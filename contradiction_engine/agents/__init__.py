# Author: Bradley R. Kinnard
"""
Agent layer: the contradiction analyzer and the findings explainer.
"""

from .contradiction_analyzer import (
    ContradictionAnalyzerAgent,
    CustomRuleError,
    analyze_text,
)
from .findings_explainer import Explanation, FindingsExplainerAgent


__all__ = [
    "ContradictionAnalyzerAgent",
    "CustomRuleError",
    "analyze_text",
    "FindingsExplainerAgent",
    "Explanation",
]

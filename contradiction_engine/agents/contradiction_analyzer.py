# Author: Bradley R. Kinnard
"""
ContradictionAnalyzerAgent - scans report text for internally inconsistent statements.
Runs the pattern, semantic and cross-sentence passes plus any custom rules,
then dedups and ranks the findings.
"""

import asyncio
import inspect
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.analysis.cross_sentence import run_cross_sentence_pass
from ..core.analysis.lexicon import default_lexicon, normalize_pair
from ..core.analysis.pattern_pass import run_pattern_pass
from ..core.analysis.patterns import default_patterns
from ..core.analysis.preprocess import preprocess
from ..core.analysis.ranking import deduplicate_and_rank
from ..core.analysis.semantic_pass import run_semantic_pass
from ..core.config import EngineSettings, settings as default_settings
from ..core.models.finding import (
    ContradictionMatch,
    ContradictionPattern,
    CustomRule,
    OppositionPair,
)

logger = logging.getLogger(__name__)


class CustomRuleError(RuntimeError):
    """A custom rule failed while isolation was disabled."""

    def __init__(self, rule_id: str, cause: BaseException):
        super().__init__(f"custom rule {rule_id!r} failed: {cause}")
        self.rule_id = rule_id


def _coerce_matches(result) -> List[ContradictionMatch]:
    if result is None:
        return []
    out = []
    for item in result:
        if isinstance(item, ContradictionMatch):
            out.append(item)
        else:
            out.append(ContradictionMatch.model_validate(item))
    return out


class ContradictionAnalyzerAgent:
    """
    Heuristic contradiction detector over a block of report text.

    Patterns, lexicon and settings are injected at construction; each instance
    owns its own copy of the pattern list so add_custom_pattern never leaks.
    analyze_text is async only because custom rules may be.
    """

    def __init__(
        self,
        patterns: Optional[Iterable[ContradictionPattern]] = None,
        lexicon: Optional[Iterable[OppositionPair]] = None,
        settings: Optional[EngineSettings] = None,
    ):
        self._settings = settings or default_settings
        self._patterns: List[ContradictionPattern] = []
        for p in (default_patterns() if patterns is None else patterns):
            self.add_custom_pattern(p)
        source = default_lexicon() if lexicon is None else lexicon
        self._lexicon: Tuple[OppositionPair, ...] = tuple(normalize_pair(p) for p in source)
        self._custom_rules: List[CustomRule] = []

    @property
    def patterns(self) -> Tuple[ContradictionPattern, ...]:
        return tuple(self._patterns)

    @property
    def lexicon(self) -> Tuple[OppositionPair, ...]:
        return self._lexicon

    @property
    def custom_rules(self) -> Tuple[CustomRule, ...]:
        return tuple(self._custom_rules)

    def add_custom_rule(self, rule: CustomRule) -> None:
        if not callable(getattr(rule, "check", None)):
            raise TypeError(f"custom rule needs a callable check(), got {rule!r}")
        if any(r.id == rule.id for r in self._custom_rules):
            raise ValueError(f"custom rule id {rule.id!r} already registered")
        self._custom_rules.append(rule)
        logger.debug(f"registered custom rule {rule.id} ({rule.category})")

    def add_custom_pattern(self, pattern: ContradictionPattern) -> None:
        """Append to this instance's registry. The regex was already compiled by the model."""
        if not isinstance(pattern, ContradictionPattern):
            raise TypeError(f"expected ContradictionPattern, got {type(pattern).__name__}")
        if any(p.id == pattern.id for p in self._patterns):
            raise ValueError(f"pattern id {pattern.id!r} already registered")
        self._patterns.append(pattern)

    async def _run_rule(self, rule: CustomRule, text: str) -> List[ContradictionMatch]:
        try:
            result = rule.check(text)
            if inspect.isawaitable(result):
                result = await result
            return _coerce_matches(result)
        except Exception as e:
            if not self._settings.isolate_custom_rules:
                raise CustomRuleError(rule.id, e) from e
            logger.warning(f"custom rule {rule.id} failed, skipping: {e}")
            return []

    async def _run_custom_rules(
        self, rules: Sequence[CustomRule], text: str
    ) -> List[ContradictionMatch]:
        if not rules:
            return []
        # gather keeps registration order in the result list
        results = await asyncio.gather(*(self._run_rule(r, text) for r in rules))
        return [m for batch in results for m in batch]

    async def analyze_text(self, text: str) -> List[ContradictionMatch]:
        """
        Full analysis. Findings are concatenated pattern, semantic, cross-sentence,
        then custom rules in registration order, so first-occurrence dedup is stable.
        """
        # snapshot so registrations during an await don't change this run
        patterns = tuple(self._patterns)
        rules = tuple(self._custom_rules)
        cfg = self._settings

        # empty text still runs custom rules; the passes just return nothing
        normalized, sentences = preprocess(text or "")

        findings: List[ContradictionMatch] = []
        findings.extend(
            run_pattern_pass(
                normalized,
                sentences,
                patterns,
                all_occurrences=cfg.report_all_pattern_occurrences,
            )
        )
        findings.extend(run_semantic_pass(sentences, self._lexicon))
        findings.extend(
            run_cross_sentence_pass(
                sentences, self._lexicon, max_sentences=cfg.max_cross_sentences
            )
        )
        findings.extend(await self._run_custom_rules(rules, normalized))

        ranked = deduplicate_and_rank(findings, cfg.duplicate_similarity_threshold)
        logger.debug(
            f"analyzed {len(sentences)} sentences: {len(findings)} raw, {len(ranked)} after dedup"
        )
        return ranked


async def analyze_text(text: str) -> List[ContradictionMatch]:
    """One-shot analysis with the default registry and lexicon."""
    return await ContradictionAnalyzerAgent().analyze_text(text)


__all__ = ["ContradictionAnalyzerAgent", "CustomRuleError", "analyze_text"]

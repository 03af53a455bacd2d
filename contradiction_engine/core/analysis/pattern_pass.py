"""
Pattern pass: run each registry regex over the normalized full text.
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence

from ..models.finding import ContradictionMatch, ContradictionPattern, MatchLocation
from .suggestions import suggestions_for

logger = logging.getLogger(__name__)

PATTERN_CONFIDENCE = 85

_SENTENCE_PIECE = re.compile(r"[^.!?]+")


def _find_sentence(fragment: str, sentences: Sequence[str]) -> Optional[str]:
    """First sentence containing the fragment, case-insensitive."""
    needle = fragment.lower()
    for s in sentences:
        if needle in s.lower():
            return s
    return None


def _sentence_at(text: str, offset: int, fragment: str) -> Optional[str]:
    """Sentence whose span holds offset, if it also holds the whole fragment."""
    for piece in _SENTENCE_PIECE.finditer(text):
        if piece.start() <= offset < piece.end():
            sentence = piece.group(0).strip()
            return sentence if fragment.lower() in sentence.lower() else None
    return None


def _to_match(
    pattern: ContradictionPattern, hit: re.Match, sentence: Optional[str]
) -> ContradictionMatch:
    fragment = hit.group(0)
    context = sentence if sentence is not None else fragment

    return ContradictionMatch(
        type=pattern.type,
        severity=pattern.severity,
        description=pattern.description,
        evidence=(context,),
        confidence=PATTERN_CONFIDENCE,
        location=MatchLocation(start=hit.start(), end=hit.end(), context=context),
        suggestions=suggestions_for(pattern.type),
    )


def run_pattern_pass(
    text: str,
    sentences: Sequence[str],
    patterns: Iterable[ContradictionPattern],
    all_occurrences: bool = False,
) -> List[ContradictionMatch]:
    """
    One finding per pattern that hits. Only the first non-empty hit is
    reported unless all_occurrences is set. A hit spanning sentences
    falls back to the raw matched text as evidence.
    """
    if not text:
        return []

    matches: List[ContradictionMatch] = []
    for pattern in patterns:
        # zero-width hits carry no evidence
        nonempty = (h for h in pattern.pattern.finditer(text) if h.group(0))
        if all_occurrences:
            hits = list(nonempty)
        else:
            first = next(nonempty, None)
            hits = [first] if first is not None else []

        for hit in hits:
            if all_occurrences:
                # later hits are located by offset, or they would all cite the first sentence
                sentence = _sentence_at(text, hit.start(), hit.group(0))
            else:
                sentence = _find_sentence(hit.group(0), sentences)
            matches.append(_to_match(pattern, hit, sentence))

    logger.debug(f"pattern pass: {len(matches)} findings")
    return matches


__all__ = ["PATTERN_CONFIDENCE", "run_pattern_pass"]

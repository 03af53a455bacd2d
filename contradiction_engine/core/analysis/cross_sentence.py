"""
Cross-sentence pass: opposing words and negation templates split across two sentences.

The naive scan is O(n^2) over sentence pairs. We index which sentences hold each
lexicon word and match each negation template, visit only pairs that can fire,
and visit them in ascending (i, j) order so output matches the naive scan exactly.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..models.finding import ContradictionMatch, ContradictionType, OppositionPair, Severity
from .lexicon import has_contextual_connector
from .suggestions import CROSS_SENTENCE_SUGGESTIONS, NEGATION_SUGGESTIONS

logger = logging.getLogger(__name__)

OPPOSITION_CONFIDENCE = 75
NEGATION_CONFIDENCE = 90

# (positive, negative); only positive-then-negative order is flagged
NEGATION_TEMPLATES: Tuple[Tuple[re.Pattern, re.Pattern], ...] = (
    (
        re.compile(r"is (true|correct|accurate|valid)", re.IGNORECASE),
        re.compile(r"is (false|incorrect|inaccurate|invalid)", re.IGNORECASE),
    ),
    (
        re.compile(r"will (happen|occur|succeed)", re.IGNORECASE),
        re.compile(r"will not (happen|occur|succeed)", re.IGNORECASE),
    ),
    (
        re.compile(r"can (do|achieve|accomplish)", re.IGNORECASE),
        re.compile(r"cannot (do|achieve|accomplish)", re.IGNORECASE),
    ),
)


def _word_index(lowered: Sequence[str], pairs: Sequence[OppositionPair]) -> Dict[str, Set[int]]:
    words = {w for pair in pairs for w in pair}
    return {w: {i for i, s in enumerate(lowered) if w in s} for w in words}


def _template_index(lowered: Sequence[str]) -> List[Tuple[Set[int], Set[int]]]:
    out = []
    for positive, negative in NEGATION_TEMPLATES:
        pos = {i for i, s in enumerate(lowered) if positive.search(s)}
        neg = {i for i, s in enumerate(lowered) if negative.search(s)}
        out.append((pos, neg))
    return out


def _candidate_pairs(
    pairs: Sequence[OppositionPair],
    word_index: Dict[str, Set[int]],
    template_index: List[Tuple[Set[int], Set[int]]],
    has_connector: Sequence[bool],
) -> List[Tuple[int, int]]:
    candidates: Set[Tuple[int, int]] = set()

    for word1, word2 in pairs:
        for x in word_index[word1]:
            if has_connector[x]:
                continue
            for y in word_index[word2]:
                if x == y or has_connector[y]:
                    continue
                candidates.add((min(x, y), max(x, y)))

    for pos, neg in template_index:
        for i in pos:
            for j in neg:
                if i < j:
                    candidates.add((i, j))

    return sorted(candidates)


def run_cross_sentence_pass(
    sentences: Sequence[str],
    lexicon: Iterable[OppositionPair],
    max_sentences: Optional[int] = None,
) -> List[ContradictionMatch]:
    """Compare every unordered sentence pair (i < j) for opposition and direct negation."""
    if max_sentences is not None and len(sentences) > max_sentences:
        logger.warning(
            f"cross-sentence pass got {len(sentences)} sentences, capping at {max_sentences}"
        )
        sentences = sentences[:max_sentences]

    if len(sentences) < 2:
        return []

    pairs = list(lexicon)
    lowered = [s.lower() for s in sentences]
    has_connector = [has_contextual_connector(s) for s in lowered]
    word_index = _word_index(lowered, pairs)
    template_index = _template_index(lowered)

    matches: List[ContradictionMatch] = []
    for i, j in _candidate_pairs(pairs, word_index, template_index, has_connector):
        evidence = (sentences[i], sentences[j])

        if not (has_connector[i] or has_connector[j]):
            for word1, word2 in pairs:
                a, b = word_index[word1], word_index[word2]
                if (i in a and j in b) or (i in b and j in a):
                    matches.append(
                        ContradictionMatch(
                            type=ContradictionType.Semantic,
                            severity=Severity.High,
                            description=f'Contradictory statements about "{word1}" vs "{word2}" across different sentences',
                            evidence=evidence,
                            confidence=OPPOSITION_CONFIDENCE,
                            suggestions=CROSS_SENTENCE_SUGGESTIONS,
                        )
                    )

        # negation templates ignore connectors
        for pos, neg in template_index:
            if i in pos and j in neg:
                matches.append(
                    ContradictionMatch(
                        type=ContradictionType.Logical,
                        severity=Severity.Critical,
                        description="Direct logical contradiction between statements",
                        evidence=evidence,
                        confidence=NEGATION_CONFIDENCE,
                        suggestions=NEGATION_SUGGESTIONS,
                    )
                )

    logger.debug(f"cross-sentence pass: {len(matches)} findings over {len(sentences)} sentences")
    return matches


__all__ = [
    "OPPOSITION_CONFIDENCE",
    "NEGATION_CONFIDENCE",
    "NEGATION_TEMPLATES",
    "run_cross_sentence_pass",
]

"""
Semantic pass: opposing lexicon words inside a single sentence.
"""

import logging
from typing import Iterable, List, Sequence

from ..models.finding import ContradictionMatch, ContradictionType, OppositionPair, Severity
from .lexicon import has_comparative_marker
from .suggestions import SAME_SENTENCE_SUGGESTIONS

logger = logging.getLogger(__name__)

SEMANTIC_CONFIDENCE = 70


def run_semantic_pass(
    sentences: Sequence[str], lexicon: Iterable[OppositionPair]
) -> List[ContradictionMatch]:
    """Flag sentences holding both words of a pair, unless the sentence is a comparison."""
    pairs = list(lexicon)
    matches: List[ContradictionMatch] = []

    for sentence in sentences:
        lowered = sentence.lower()
        # marker check is sentence-global, not positional
        if has_comparative_marker(sentence):
            continue

        for word1, word2 in pairs:
            if word1 in lowered and word2 in lowered:
                matches.append(
                    ContradictionMatch(
                        type=ContradictionType.Semantic,
                        severity=Severity.Medium,
                        description=f'Contradictory terms "{word1}" and "{word2}" found in same statement',
                        evidence=(sentence,),
                        confidence=SEMANTIC_CONFIDENCE,
                        suggestions=SAME_SENTENCE_SUGGESTIONS,
                    )
                )

    logger.debug(f"semantic pass: {len(matches)} findings")
    return matches


__all__ = ["SEMANTIC_CONFIDENCE", "run_semantic_pass"]

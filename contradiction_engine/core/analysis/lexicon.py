"""
Opposition lexicon and the marker words that suppress it.
Lookups are lowercase substring checks, not tokenized word matches,
so "slow" also hits "low". Known and accepted.
"""

import re
from typing import List, Tuple

from ..models.finding import OppositionPair

OPPOSITION_PAIRS: Tuple[OppositionPair, ...] = (
    ("large", "small"), ("big", "little"), ("huge", "tiny"),
    ("fast", "slow"), ("quick", "sluggish"), ("rapid", "gradual"),
    ("hot", "cold"), ("warm", "cool"), ("high", "low"),
    ("safe", "dangerous"), ("secure", "risky"), ("stable", "unstable"),
    ("simple", "complex"), ("easy", "difficult"), ("clear", "confusing"),
    ("strong", "weak"), ("powerful", "powerless"), ("effective", "ineffective"),
    ("expensive", "cheap"), ("costly", "affordable"), ("profitable", "unprofitable"),
    ("success", "failure"), ("winner", "loser"), ("victory", "defeat"),
    ("accept", "reject"), ("approve", "deny"), ("include", "exclude"),
    ("start", "stop"), ("begin", "end"), ("open", "close"),
)

# a legitimate comparison inside one sentence ("bigger than the small one")
COMPARATIVE_MARKERS = re.compile(
    r"(?:more|less|than|compared|versus|vs|rather|instead)", re.IGNORECASE
)

# discourse words that signal an intended contrast between two sentences
CONTEXTUAL_CONNECTORS: Tuple[str, ...] = (
    "but", "however", "although", "while", "whereas", "in contrast",
)


def default_lexicon() -> List[OppositionPair]:
    return list(OPPOSITION_PAIRS)


def normalize_pair(pair) -> OppositionPair:
    """Lowercase and validate a caller-supplied pair."""
    if len(pair) != 2:
        raise ValueError(f"opposition pair needs exactly 2 words, got {pair!r}")
    a, b = (str(w).strip().lower() for w in pair)
    if not a or not b:
        raise ValueError(f"opposition pair words cannot be empty, got {pair!r}")
    return (a, b)


def has_comparative_marker(sentence: str) -> bool:
    return COMPARATIVE_MARKERS.search(sentence) is not None


def has_contextual_connector(lowered: str) -> bool:
    # caller passes an already-lowercased sentence
    return any(word in lowered for word in CONTEXTUAL_CONNECTORS)


__all__ = [
    "OPPOSITION_PAIRS",
    "COMPARATIVE_MARKERS",
    "CONTEXTUAL_CONNECTORS",
    "default_lexicon",
    "normalize_pair",
    "has_comparative_marker",
    "has_contextual_connector",
]

"""
Text normalization and sentence splitting.
No language-aware boundary detection: "Dr." or "3.5" split a sentence.
"""

import re
from typing import List, Tuple

_WHITESPACE = re.compile(r"\s+")
_DOUBLE_QUOTES = re.compile(r"[“”]")
_SINGLE_QUOTES = re.compile(r"[‘’]")
_SENTENCE_END = re.compile(r"[.!?]+")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs, straighten curly quotes, trim."""
    if not text:
        return ""
    text = _WHITESPACE.sub(" ", text)
    text = _DOUBLE_QUOTES.sub('"', text)
    text = _SINGLE_QUOTES.sub("'", text)
    return text.strip()


def split_sentences(text: str) -> List[str]:
    """Split on runs of . ! ? and drop empty pieces."""
    return [s.strip() for s in _SENTENCE_END.split(text) if s.strip()]


def preprocess(text: str) -> Tuple[str, List[str]]:
    normalized = normalize_text(text)
    return normalized, split_sentences(normalized)


__all__ = ["normalize_text", "split_sentences", "preprocess"]

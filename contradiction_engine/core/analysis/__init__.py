"""
Analysis passes: preprocessing, pattern/semantic/cross-sentence detection, ranking.
"""

from .cross_sentence import NEGATION_TEMPLATES, run_cross_sentence_pass
from .lexicon import OPPOSITION_PAIRS, default_lexicon, normalize_pair
from .pattern_pass import run_pattern_pass
from .patterns import SEED_PATTERNS, default_patterns
from .preprocess import normalize_text, preprocess, split_sentences
from .ranking import deduplicate, deduplicate_and_rank, evidence_similarity, rank_matches
from .semantic_pass import run_semantic_pass
from .suggestions import suggestions_for

__all__ = [
    "NEGATION_TEMPLATES",
    "OPPOSITION_PAIRS",
    "SEED_PATTERNS",
    "deduplicate",
    "deduplicate_and_rank",
    "default_lexicon",
    "default_patterns",
    "evidence_similarity",
    "normalize_pair",
    "normalize_text",
    "preprocess",
    "rank_matches",
    "run_cross_sentence_pass",
    "run_pattern_pass",
    "run_semantic_pass",
    "split_sentences",
    "suggestions_for",
]

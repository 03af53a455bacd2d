"""
Finding deduplication and ranking.
Greedy first-occurrence dedup, then severity-then-confidence ordering.
"""

from typing import Iterable, List, Sequence

from ..models.finding import SEVERITY_RANK, ContradictionMatch

DEFAULT_SIMILARITY_THRESHOLD = 0.8


def evidence_similarity(evidence_a: Sequence[str], evidence_b: Sequence[str]) -> float:
    """Jaccard index of the lowercased evidence sets."""
    set_a = {e.lower() for e in evidence_a}
    set_b = {e.lower() for e in evidence_b}

    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


def is_duplicate(
    existing: ContradictionMatch,
    candidate: ContradictionMatch,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> bool:
    return (
        existing.type == candidate.type
        and existing.description == candidate.description
        and evidence_similarity(existing.evidence, candidate.evidence) > threshold
    )


def deduplicate(
    matches: Iterable[ContradictionMatch],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> List[ContradictionMatch]:
    """Keep a finding only if no earlier kept finding duplicates it. Order dependent."""
    unique: List[ContradictionMatch] = []
    for m in matches:
        if not any(is_duplicate(kept, m, threshold) for kept in unique):
            unique.append(m)
    return unique


def rank_matches(matches: Iterable[ContradictionMatch]) -> List[ContradictionMatch]:
    """Sort by severity then confidence, both descending. Stable for ties."""
    return sorted(
        matches,
        key=lambda m: (SEVERITY_RANK[m.severity], m.confidence),
        reverse=True,
    )


def deduplicate_and_rank(
    matches: Iterable[ContradictionMatch],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> List[ContradictionMatch]:
    return rank_matches(deduplicate(matches, threshold))


__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "evidence_similarity",
    "is_duplicate",
    "deduplicate",
    "rank_matches",
    "deduplicate_and_rank",
]

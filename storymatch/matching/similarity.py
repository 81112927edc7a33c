"""Jaccard similarity and the pairwise similarity matrix."""

from itertools import combinations
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterator, Mapping, Tuple

PairKey = Tuple[str, str]


def jaccard_similarity(set1: AbstractSet[str], set2: AbstractSet[str]) -> float:
    """
    Jaccard similarity between two token sets.

    Returns 1.0 when both sets are empty and 0.0 when exactly one is.
    """
    if not set1 and not set2:
        return 1.0
    if not set1 or not set2:
        return 0.0

    intersection = len(set1 & set2)
    union = len(set1 | set2)
    return intersection / union


def pair_key(id1: str, id2: str) -> PairKey:
    """Order-independent key for a pair of ids (smaller id first)."""
    return (id1, id2) if id1 < id2 else (id2, id1)


class SimilarityMatrix:
    """Read-only sparse mapping from unordered id pairs to similarity scores."""

    def __init__(self, scores: Mapping[PairKey, float]) -> None:
        canonical = {pair_key(a, b): score for (a, b), score in scores.items()}
        self._scores = MappingProxyType(canonical)

    def get(self, id1: str, id2: str) -> float:
        """Similarity of a pair; unknown pairs score 0.0."""
        if id1 == id2:
            return 1.0
        return self._scores.get(pair_key(id1, id2), 0.0)

    def items(self) -> Iterator[Tuple[PairKey, float]]:
        """Iterate over (pair, score) entries."""
        return iter(self._scores.items())

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return pair_key(*pair) in self._scores


def build_similarity_matrix(fingerprints: Mapping[str, AbstractSet[str]]) -> SimilarityMatrix:
    """
    Compute similarity for every pair of fingerprints.

    All scores are kept, including those below any merge threshold, since
    cluster validation needs them too.
    """
    scores: Dict[PairKey, float] = {}
    for id1, id2 in combinations(fingerprints, 2):
        scores[pair_key(id1, id2)] = jaccard_similarity(fingerprints[id1], fingerprints[id2])
    return SimilarityMatrix(scores)

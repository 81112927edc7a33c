"""Merge-and-validate partitioning of items by pairwise similarity.

Union-find merges transitively: A~B and B~C puts A and C together even when
A and C share almost nothing. Every multi-member group is therefore checked
against a lower pairwise floor, and a group failing that check is dissolved
into singletons rather than split.
"""

from itertools import combinations
from typing import List, Sequence

from ..matching.similarity import SimilarityMatrix
from .union_find import UnionFind


def validate_group(
    member_ids: Sequence[str],
    matrix: SimilarityMatrix,
    min_pair_similarity: float,
) -> bool:
    """Check that every pair in the group meets the minimum similarity."""
    if len(member_ids) <= 1:
        return True

    for id1, id2 in combinations(member_ids, 2):
        if matrix.get(id1, id2) < min_pair_similarity:
            return False
    return True


def merge_groups(
    ids: Sequence[str],
    matrix: SimilarityMatrix,
    similarity_threshold: float,
) -> List[List[str]]:
    """Provisional groups: union every pair at or above the merge threshold."""
    uf = UnionFind()
    for item_id in ids:
        uf.make_set(item_id)

    for id1, id2 in combinations(ids, 2):
        if matrix.get(id1, id2) >= similarity_threshold:
            uf.union(id1, id2)

    return uf.groups()


def partition(
    ids: Sequence[str],
    matrix: SimilarityMatrix,
    similarity_threshold: float,
    min_pair_similarity: float,
) -> List[List[str]]:
    """
    Partition ids into validated groups.

    Returns:
        Valid groups in root order, followed by one singleton per member
        of each rejected group
    """
    valid: List[List[str]] = []
    rejected: List[str] = []

    for group in merge_groups(ids, matrix, similarity_threshold):
        if validate_group(group, matrix, min_pair_similarity):
            valid.append(group)
        else:
            rejected.extend(group)

    return valid + [[item_id] for item_id in rejected]

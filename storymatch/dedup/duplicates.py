"""Exact-duplicate detection for research articles.

The same article is often announced more than once with small title
differences (UK/US spelling, a missing space, punctuation). Duplicates
collapse to a single surviving record; articles from different journals are
never treated as duplicates even when their titles match.
"""

import hashlib
from typing import Dict, List, Sequence, Set

from ..matching import extract_shingles, jaccard_similarity, normalize_title
from ..models import EvidenceArticle

DEFAULT_TITLE_THRESHOLD = 0.85


def generate_normalized_id(title: str, journal: str) -> str:
    """Stable id that survives spelling and punctuation variations."""
    normalized_content = f"{normalize_title(title)}_{normalize_title(journal)}"
    return hashlib.md5(normalized_content.encode("utf-8")).hexdigest()[:12]


def are_titles_similar(title1: str, title2: str, threshold: float = DEFAULT_TITLE_THRESHOLD) -> bool:
    """Check whether two titles name the same article."""
    if normalize_title(title1) == normalize_title(title2):
        return True

    similarity = jaccard_similarity(extract_shingles(title1), extract_shingles(title2))
    return similarity >= threshold


def find_duplicate_groups(
    articles: Sequence[EvidenceArticle],
    threshold: float = DEFAULT_TITLE_THRESHOLD,
) -> Dict[str, List[str]]:
    """
    Find groups of articles announcing the same paper.

    Each unprocessed article seeds a group; later articles join it when they
    share the seed's journal exactly and have a similar title.

    Args:
        articles: Articles in arrival order
        threshold: Title similarity threshold

    Returns:
        Mapping of the seed's normalized id to member ids, for groups of two or more
    """
    groups: Dict[str, List[str]] = {}
    processed: Set[str] = set()

    for i, seed in enumerate(articles):
        if seed.id in processed:
            continue

        group = [seed.id]
        for candidate in articles[i + 1 :]:
            if candidate.id in processed or candidate.id == seed.id:
                continue
            if candidate.journal == seed.journal and are_titles_similar(seed.title, candidate.title, threshold):
                group.append(candidate.id)
                processed.add(candidate.id)

        if len(group) > 1:
            groups[generate_normalized_id(seed.title, seed.journal)] = group
            processed.update(group)

    return groups


def _abstract_length(article: EvidenceArticle) -> int:
    return len(article.abstract or "")


def collapse_duplicates(
    articles: Sequence[EvidenceArticle],
    threshold: float = DEFAULT_TITLE_THRESHOLD,
) -> List[EvidenceArticle]:
    """
    Keep one record per duplicate group.

    The survivor is the member with the longest abstract (first seen on
    ties) and takes the position of the group's first member.
    """
    by_id = {}
    for article in articles:
        by_id.setdefault(article.id, article)

    survivor_for: Dict[str, EvidenceArticle] = {}
    dropped: Set[str] = set()
    for member_ids in find_duplicate_groups(articles, threshold).values():
        members = [by_id[member_id] for member_id in member_ids]
        # max() keeps the first of equal lengths
        survivor = max(members, key=_abstract_length)
        survivor_for[member_ids[0]] = survivor
        dropped.update(member_ids[1:])

    result: List[EvidenceArticle] = []
    seen: Set[str] = set()
    for article in articles:
        if article.id in dropped or article.id in seen:
            continue
        seen.add(article.id)
        result.append(survivor_for.get(article.id, article))

    return result

"""Union-find clustering of news items into stories."""

from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

from ..config.models import ClusterThresholds
from ..matching import (
    DEFAULT_SHINGLE_SIZES,
    SimilarityMatrix,
    build_similarity_matrix,
    fingerprint,
    is_same_article,
    item_text,
)
from ..models import NewsCluster, NewsItem
from .headlines import HeadlinePolicy, PassthroughHeadlineSelector
from .validator import partition


def _timestamp(item: NewsItem) -> float:
    # Items without a timestamp sort as oldest
    return item.published_at.timestamp() if item.published_at else float("-inf")


def _content_length(item: NewsItem) -> int:
    return len(item.content or "")


class ClusterEngine:
    """Group items describing the same story.

    Holds no state between calls: every call to ``cluster`` builds its own
    fingerprints, similarity matrix and union-find forest.
    """

    def __init__(
        self,
        thresholds: Optional[ClusterThresholds] = None,
        headline_selector: Optional[HeadlinePolicy] = None,
        shingle_sizes: Iterable[int] = DEFAULT_SHINGLE_SIZES,
    ) -> None:
        """
        Initialize cluster engine.

        Args:
            thresholds: Merge and minimum pair thresholds
            headline_selector: Policy producing each cluster's neutral headline
            shingle_sizes: Character n-gram sizes combined into fingerprints
        """
        self.thresholds = thresholds or ClusterThresholds()
        self.headline_selector = headline_selector or PassthroughHeadlineSelector()
        self.shingle_sizes = tuple(shingle_sizes)

    def unique_items(self, items: Sequence[NewsItem]) -> Dict[str, NewsItem]:
        """
        Collapse items pointing at the same article.

        The duplicate with longer content replaces the earlier one in its
        slot; on equal length the first seen is kept.
        """
        unique: Dict[str, NewsItem] = {}

        for index, item in enumerate(items):
            for existing_id, existing in unique.items():
                if is_same_article(item, existing):
                    if _content_length(item) > _content_length(existing):
                        unique[existing_id] = item
                    break
            else:
                unique[f"item_{index}"] = item

        return unique

    def fingerprints(self, unique: Dict[str, NewsItem]) -> Dict[str, FrozenSet[str]]:
        """Fingerprint every unique item."""
        return {
            item_id: fingerprint(item_text(item), self.shingle_sizes)
            for item_id, item in unique.items()
        }

    def similarity_matrix(self, items: Sequence[NewsItem]) -> SimilarityMatrix:
        """Pairwise similarities of the unique items in ``items``."""
        return build_similarity_matrix(self.fingerprints(self.unique_items(items)))

    def build_cluster(self, cluster_id: str, members: Sequence[NewsItem]) -> NewsCluster:
        """Choose representative fields for a validated group."""
        ordered = sorted(members, key=_timestamp, reverse=True)
        newest = ordered[0]

        return NewsCluster(
            id=cluster_id,
            title=newest.title,
            neutral_headline=self.headline_selector(ordered),
            items=ordered,
            coverage=len({item.source for item in ordered}),
            updated_at=newest.published_at,
            featured_image=next((item.image_url for item in ordered if item.image_url), None),
        )

    def cluster(self, items: Sequence[NewsItem]) -> List[NewsCluster]:
        """
        Cluster items into stories.

        Args:
            items: Items for one partition, treated as read-only

        Returns:
            Clusters ordered by coverage, then freshness
        """
        if not items:
            return []

        unique = self.unique_items(items)
        matrix = build_similarity_matrix(self.fingerprints(unique))
        groups = partition(
            list(unique),
            matrix,
            self.thresholds.similarity_threshold,
            self.thresholds.min_pair_similarity,
        )

        clusters = [
            self.build_cluster(f"cluster_{n}", [unique[item_id] for item_id in group])
            for n, group in enumerate(groups)
        ]

        clusters.sort(
            key=lambda c: (c.coverage, c.updated_at.timestamp() if c.updated_at else float("-inf")),
            reverse=True,
        )
        return clusters


def cluster_news_items(
    items: Sequence[NewsItem],
    thresholds: Optional[ClusterThresholds] = None,
    headline_selector: Optional[HeadlinePolicy] = None,
) -> List[NewsCluster]:
    """Cluster items with the given thresholds and headline policy."""
    return ClusterEngine(thresholds, headline_selector).cluster(items)

"""Section ranker that filters clusters and orders them by popularity."""

from datetime import datetime
from typing import List, Optional

import pendulum

from ..config import SectionConfig
from ..models import NewsCluster
from .models import ClusterScore, RankingResult
from .scorers import (
    BaseScorer,
    CoverageScorer,
    FeedPositionScorer,
    RecencyScorer,
    TitleLengthScorer,
    TopicScorer,
    TrustedSourceScorer,
)


class ClusterRanker:
    """Apply section rules and popularity scoring to clusters."""

    def __init__(self, section: str, config: SectionConfig, now: Optional[datetime] = None) -> None:
        """
        Initialize cluster ranker.

        Args:
            section: Section name
            config: Section rules
            now: Reference time for recency; the current time when omitted
        """
        self.section = section
        self.config = config
        self.now = now
        self.scorers: List[BaseScorer] = [
            CoverageScorer(),
            FeedPositionScorer(),
            TrustedSourceScorer(config.trusted_sources),
            TopicScorer(config.topic_boosts),
            TitleLengthScorer(),
            RecencyScorer(),
        ]

    def is_allowed(self, cluster: NewsCluster) -> bool:
        """Check a cluster against the section's single-source rule."""
        if not self.config.require_multi_source or cluster.coverage >= 2:
            return True
        trusted = set(self.config.trusted_sources)
        return any(item.source in trusted for item in cluster.items)

    def score_cluster(self, cluster: NewsCluster) -> ClusterScore:
        """Score a single cluster."""
        context = {"section": self.section, "now": self.now or pendulum.now("UTC")}
        components = {scorer.name: scorer.score(cluster, context) for scorer in self.scorers}
        return ClusterScore(
            cluster_id=cluster.id,
            total_score=sum(components.values()),
            components=components,
        )

    def rank(self, clusters: List[NewsCluster]) -> RankingResult:
        """
        Filter, score and order clusters.

        Args:
            clusters: Clusters in engine order

        Returns:
            Ranking result; equal scores keep engine order
        """
        allowed = [c for c in clusters if self.is_allowed(c)]

        scored = []
        for cluster in allowed:
            score = self.score_cluster(cluster)
            scored.append((cluster.model_copy(update={"popularity_score": score.total_score}), score))

        scored.sort(key=lambda pair: pair[1].total_score, reverse=True)
        selected = scored[: self.config.max_clusters]

        return RankingResult(
            section=self.section,
            total_clusters=len(clusters),
            filtered_out=len(clusters) - len(allowed),
            ranked_clusters=[cluster for cluster, _ in selected],
            scores=[score for _, score in selected],
        )

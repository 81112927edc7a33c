"""Individual scoring components for cluster popularity."""

import re
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

import pendulum

from ..config import TopicBoost
from ..matching import normalize_title
from ..models import NewsCluster


class BaseScorer(ABC):
    """Base class for scoring components."""

    name = "base"

    @abstractmethod
    def score(self, cluster: NewsCluster, context: Optional[Dict] = None) -> float:
        """
        Score a cluster.

        Args:
            cluster: Cluster to score
            context: Additional context (e.g., section name)

        Returns:
            Score contribution; penalties are negative
        """
        pass


class CoverageScorer(BaseScorer):
    """Multi-source stories always outrank single-source ones."""

    name = "coverage"

    def __init__(self, per_source: float = 1000.0, single_source: float = 100.0) -> None:
        self.per_source = per_source
        self.single_source = single_source

    def score(self, cluster: NewsCluster, context: Optional[Dict] = None) -> float:
        if cluster.coverage >= 2:
            return cluster.coverage * self.per_source
        return self.single_source


class FeedPositionScorer(BaseScorer):
    """Bonus for single-source items near the top of a curated feed."""

    name = "feed_position"

    def __init__(self, max_position: int = 10, top_bonus: float = 200.0, step: float = 10.0) -> None:
        self.max_position = max_position
        self.top_bonus = top_bonus
        self.step = step

    def score(self, cluster: NewsCluster, context: Optional[Dict] = None) -> float:
        if cluster.coverage != 1:
            return 0.0

        position = cluster.items[0].feed_position
        if position is None or position >= self.max_position:
            return 0.0
        return self.top_bonus - position * self.step


class TrustedSourceScorer(BaseScorer):
    """Bonus for single-source stories from a trusted source."""

    name = "trusted_source"

    def __init__(self, trusted_sources: Iterable[str], bonus: float = 30.0) -> None:
        self.trusted_sources = set(trusted_sources)
        self.bonus = bonus

    def score(self, cluster: NewsCluster, context: Optional[Dict] = None) -> float:
        if cluster.coverage == 1 and cluster.items[0].source in self.trusted_sources:
            return self.bonus
        return 0.0


class TopicScorer(BaseScorer):
    """Keyword-group bonuses for single-source titles."""

    name = "topic"

    def __init__(self, topic_boosts: Iterable[TopicBoost]) -> None:
        """
        Initialize topic scorer.

        Args:
            topic_boosts: Keyword groups; each group scores once per title
        """
        self.patterns = []
        for boost in topic_boosts:
            keywords = [normalize_title(keyword) for keyword in boost.keywords]
            keywords = [re.escape(keyword) for keyword in keywords if keyword]
            if keywords:
                self.patterns.append((re.compile(r"\b(?:" + "|".join(keywords) + r")\b"), boost.bonus))

    def score(self, cluster: NewsCluster, context: Optional[Dict] = None) -> float:
        if cluster.coverage != 1:
            return 0.0

        title = normalize_title(cluster.items[0].title)
        return sum(bonus for pattern, bonus in self.patterns if pattern.search(title))


class TitleLengthScorer(BaseScorer):
    """Small bonus for single-source titles of a substantial length."""

    name = "title_length"

    def __init__(self, min_length: int = 50, max_length: int = 120, bonus: float = 3.0) -> None:
        self.min_length = min_length
        self.max_length = max_length
        self.bonus = bonus

    def score(self, cluster: NewsCluster, context: Optional[Dict] = None) -> float:
        if cluster.coverage != 1:
            return 0.0
        if self.min_length < len(cluster.items[0].title) < self.max_length:
            return self.bonus
        return 0.0


class RecencyScorer(BaseScorer):
    """Up to ``max_bonus`` points, losing one per hour of age."""

    name = "recency"

    def __init__(self, max_bonus: float = 20.0) -> None:
        self.max_bonus = max_bonus

    def score(self, cluster: NewsCluster, context: Optional[Dict] = None) -> float:
        if cluster.updated_at is None:
            return 0.0

        now = (context or {}).get("now") or pendulum.now("UTC")
        hours_old = (now - cluster.updated_at).total_seconds() / 3600
        return min(self.max_bonus, max(0.0, self.max_bonus - hours_old))

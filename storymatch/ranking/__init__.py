"""Section rules and popularity ranking of clusters."""

from .models import ClusterScore, RankingResult
from .ranker import ClusterRanker
from .scorers import (
    BaseScorer,
    CoverageScorer,
    FeedPositionScorer,
    RecencyScorer,
    TitleLengthScorer,
    TopicScorer,
    TrustedSourceScorer,
)

__all__ = [
    "BaseScorer",
    "ClusterRanker",
    "ClusterScore",
    "CoverageScorer",
    "FeedPositionScorer",
    "RankingResult",
    "RecencyScorer",
    "TitleLengthScorer",
    "TopicScorer",
    "TrustedSourceScorer",
]

"""storymatch - lexical clustering and deduplication of noisy news and research feeds."""

from .clustering import ClusterEngine, cluster_news_items
from .dedup import find_duplicate_groups
from .models import EvidenceArticle, NewsCluster, NewsItem

__version__ = "0.1.0"

__all__ = [
    "ClusterEngine",
    "EvidenceArticle",
    "NewsCluster",
    "NewsItem",
    "cluster_news_items",
    "find_duplicate_groups",
]

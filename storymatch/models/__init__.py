"""Data models for storymatch."""

from .article import EvidenceArticle
from .cluster import NewsCluster, SectionResult
from .item import NewsItem

__all__ = ["EvidenceArticle", "NewsCluster", "NewsItem", "SectionResult"]

"""Loading of fetched items into models."""

from .loader import DEFAULT_SECTION, load_evidence_articles, load_news_items, parse_records

__all__ = [
    "DEFAULT_SECTION",
    "load_evidence_articles",
    "load_news_items",
    "parse_records",
]

"""Duplicate detection for research-alert articles."""

from .duplicates import (
    DEFAULT_TITLE_THRESHOLD,
    are_titles_similar,
    collapse_duplicates,
    find_duplicate_groups,
    generate_normalized_id,
)

__all__ = [
    "DEFAULT_TITLE_THRESHOLD",
    "are_titles_similar",
    "collapse_duplicates",
    "find_duplicate_groups",
    "generate_normalized_id",
]

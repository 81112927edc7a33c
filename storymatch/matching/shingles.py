"""Shingle extraction for similarity fingerprints."""

from typing import FrozenSet, Iterable, Optional, Set

from ..models import NewsItem
from .normalize import normalize_title

DEFAULT_SHINGLE_SIZES = (3, 4, 5)


def extract_shingles(text: Optional[str], k: int = 3) -> Set[str]:
    """
    Extract word tokens and character k-grams from text.

    Args:
        text: Raw text, normalized before extraction
        k: Character window size

    Returns:
        Words of length >= 2 plus every length-k substring of the normalized text
    """
    if k < 1:
        raise ValueError(f"Shingle size must be positive, got {k}")

    normalized = normalize_title(text)
    shingles = {word for word in normalized.split(" ") if len(word) >= 2}

    for i in range(len(normalized) - k + 1):
        shingles.add(normalized[i : i + k])

    return shingles


def fingerprint(text: Optional[str], sizes: Iterable[int] = DEFAULT_SHINGLE_SIZES) -> FrozenSet[str]:
    """Union of shingles across several window sizes."""
    tokens: Set[str] = set()
    for k in sizes:
        tokens |= extract_shingles(text, k)
    return frozenset(tokens)


def item_text(item: NewsItem) -> str:
    """Text used to fingerprint a news item."""
    return f"{item.title} {item.standfirst or ''}"

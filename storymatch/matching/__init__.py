"""Lexical matching primitives: normalization, shingles, similarity."""

from .normalize import SPELLING_VARIANTS, normalize_title
from .shingles import DEFAULT_SHINGLE_SIZES, extract_shingles, fingerprint, item_text
from .similarity import SimilarityMatrix, build_similarity_matrix, jaccard_similarity, pair_key
from .urls import clean_url, is_same_article

__all__ = [
    "DEFAULT_SHINGLE_SIZES",
    "SPELLING_VARIANTS",
    "SimilarityMatrix",
    "build_similarity_matrix",
    "clean_url",
    "extract_shingles",
    "fingerprint",
    "is_same_article",
    "item_text",
    "jaccard_similarity",
    "normalize_title",
    "pair_key",
]

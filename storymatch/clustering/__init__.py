"""Story clustering: union-find grouping, validation and headline choice."""

from .engine import ClusterEngine, cluster_news_items
from .headlines import (
    FallbackHeadlineSelector,
    HeadlineSelector,
    NeutralHeadlineSelector,
    PassthroughHeadlineSelector,
    neutralize_headline,
)
from .union_find import UnionFind
from .validator import merge_groups, partition, validate_group

__all__ = [
    "ClusterEngine",
    "FallbackHeadlineSelector",
    "HeadlineSelector",
    "NeutralHeadlineSelector",
    "PassthroughHeadlineSelector",
    "UnionFind",
    "cluster_news_items",
    "merge_groups",
    "neutralize_headline",
    "partition",
    "validate_group",
]

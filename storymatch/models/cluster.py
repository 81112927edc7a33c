"""Cluster models for grouping related news items."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import RecordModel
from .item import NewsItem


class NewsCluster(RecordModel):
    """A set of items believed to describe the same story."""

    id: str = Field(..., description="Cluster identifier, unique within one pass")
    title: str = Field(..., description="Original title of the newest member")
    neutral_headline: str = Field(..., description="Headline chosen by the headline selector")
    items: List[NewsItem] = Field(..., description="Member items, newest first")
    coverage: int = Field(..., description="Number of distinct sources", ge=1)
    updated_at: Optional[datetime] = Field(None, description="Publication time of the newest member")
    featured_image: Optional[str] = Field(None, description="First member image URL")
    popularity_score: Optional[float] = Field(None, description="Score assigned by section ranking")


class SectionResult(RecordModel):
    """Clusters produced for one logical partition of the input."""

    section: str = Field(..., description="Section (partition) name")
    updated_at: datetime = Field(..., description="When the section was processed")
    clusters: List[NewsCluster] = Field(default_factory=list, description="Ranked clusters")

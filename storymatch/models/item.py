"""News item model for ingested feed records."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import RecordModel, parse_timestamp


class NewsItem(RecordModel):
    """One ingested text record. Immutable once created."""

    title: str = Field("", description="Item title")
    url: str = Field("", description="Source URL of the item")
    source: str = Field("", description="Source (feed) name")
    standfirst: Optional[str] = Field(None, description="Sub-headline or summary")
    content: Optional[str] = Field(None, description="Body content")
    canonical_url: Optional[str] = Field(None, description="Canonical URL if known")
    published_at: Optional[datetime] = Field(None, description="Publication timestamp")
    image_url: Optional[str] = Field(None, description="Representative image URL")
    feed_position: Optional[int] = Field(None, description="Position in the source feed (0 = top)", ge=0)

    class Config:
        """Pydantic config."""

        frozen = True

    @field_validator("published_at", mode="before")
    @classmethod
    def parse_published_at(cls, v):
        """Unreadable timestamps become None rather than failing validation."""
        return parse_timestamp(v)

    @field_validator("title", "url", "source", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Treat missing text fields as empty strings."""
        return v if v is not None else ""

"""Evidence article model for research-alert deduplication."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .base import RecordModel, parse_timestamp


class EvidenceArticle(RecordModel):
    """Research article announced by an evidence-alert email or feed."""

    id: str = Field(..., description="Identifier supplied by the parser")
    title: str = Field("", description="Article title")
    journal: str = Field("", description="Journal the article appeared in")
    score: Optional[str] = Field(None, description="Rating in 'n/7' form")
    tags: List[str] = Field(default_factory=list, description="Medical specialties")
    url: Optional[str] = Field(None, description="Alert page URL")
    abstract: Optional[str] = Field(None, description="Scraped abstract")
    pubmed_url: Optional[str] = Field(None, description="PubMed URL")
    doi: Optional[str] = Field(None, description="DOI")
    date_received: Optional[datetime] = Field(None, description="When the alert arrived")

    class Config:
        """Pydantic config."""

        frozen = True

    @field_validator("date_received", mode="before")
    @classmethod
    def parse_date_received(cls, v):
        """Degrade unreadable dates to None."""
        return parse_timestamp(v)

    @field_validator("title", "journal", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Treat missing text fields as empty strings."""
        return v if v is not None else ""

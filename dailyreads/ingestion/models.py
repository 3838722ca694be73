"""Data models for ingestion."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RawArticle(BaseModel):
    """Candidate article parsed from one feed item."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Article title", min_length=1)
    url: str = Field(..., description="Article URL", min_length=1)
    pub_date: datetime = Field(..., description="Publication date")
    source: str = Field(..., description="URL of the feed the item came from")
    content_snippet: str = Field("", description="Sanitized description/content")


class FeedResult(BaseModel):
    """Result of fetching an RSS feed."""

    source_name: str = Field(..., description="Source name")
    source_url: str = Field(..., description="RSS feed URL")
    success: bool = Field(..., description="Whether fetch was successful")
    items: list[RawArticle] = Field(default_factory=list, description="Parsed feed items")
    error: Optional[str] = Field(None, description="Error message if failed")
    item_count: int = Field(0, description="Number of items parsed")

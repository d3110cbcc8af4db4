"""Data models for fetched feeds."""

from typing import List

from pydantic import BaseModel, Field


class FeedItem(BaseModel):
    """Parsed RSS feed item."""

    title: str = Field("", description="Article title")
    link: str = Field("", description="Article URL")
    description: str = Field("", description="Article description/summary")
    pub_date: str = Field("", description="Publication date exactly as the feed wrote it")


class FeedDocument(BaseModel):
    """Result of fetching an RSS feed."""

    title: str = Field("", description="Channel title")
    link: str = Field("", description="Channel link")
    description: str = Field("", description="Channel description")
    items: List[FeedItem] = Field(default_factory=list, description="Items in feed order")

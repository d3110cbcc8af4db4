"""Post model for ingested articles."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from .base import DBModel


class Post(DBModel):
    """Article ingested from a feed."""

    title: str = Field(..., description="Post title")
    url: str = Field(..., description="Canonical URL, unique across posts")
    description: Optional[str] = Field(None, description="Post description/summary")
    published_at: datetime = Field(..., description="Publication timestamp")
    feed_id: UUID = Field(..., description="Foreign key to feeds table")
    feed_name: Optional[str] = Field(None, description="Name of the feed the post belongs to")

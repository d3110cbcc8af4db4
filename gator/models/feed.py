"""Feed model for subscribable RSS sources."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from .base import DBModel


class Feed(DBModel):
    """RSS feed model."""

    name: str = Field(..., description="Human readable feed name")
    url: str = Field(..., description="Unique feed URL")
    user_id: UUID = Field(..., description="User who added the feed")
    last_fetched_at: Optional[datetime] = Field(None, description="Last poll attempt, None if never polled")
    user_name: Optional[str] = Field(None, description="Name of the user who added the feed")

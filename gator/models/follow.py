"""Feed follow model."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from .base import DBModel


class FeedFollow(DBModel):
    """Subscription of a user to a feed."""

    user_id: UUID = Field(..., description="Foreign key to users table")
    feed_id: UUID = Field(..., description="Foreign key to feeds table")
    feed_name: Optional[str] = Field(None, description="Followed feed name")
    user_name: Optional[str] = Field(None, description="Following user name")

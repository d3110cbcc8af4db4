"""Storage interface consumed by the commands and the scheduler."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from ..models import Feed, FeedFollow, Post, User


class Gateway(ABC):
    """Narrow query interface over users, feeds, follows and posts.

    Lookups that miss raise ``NotFound``; uniqueness violations raise
    ``Conflict``. Implementations guard their own concurrent access.
    """

    # Users

    @abstractmethod
    def get_user_by_name(self, name: str) -> User:
        """Return the user called ``name``."""

    @abstractmethod
    def create_user(self, id: UUID, created_at: datetime, updated_at: datetime, name: str) -> User:
        """Insert a user."""

    @abstractmethod
    def delete_all_users(self) -> None:
        """Delete every user along with their feeds, follows and posts."""

    @abstractmethod
    def list_users(self) -> List[User]:
        """Return all users ordered by name."""

    # Feeds

    @abstractmethod
    def create_feed(
        self,
        id: UUID,
        created_at: datetime,
        updated_at: datetime,
        name: str,
        url: str,
        user_id: UUID,
    ) -> Feed:
        """Insert a feed."""

    @abstractmethod
    def list_feeds(self) -> List[Feed]:
        """Return all feeds with their creator's name."""

    @abstractmethod
    def get_feed_by_url(self, url: str) -> Feed:
        """Return the feed registered under ``url``."""

    @abstractmethod
    def get_next_feed_to_fetch(self) -> Optional[Feed]:
        """Return the feed polled least recently (never-polled first), or None."""

    @abstractmethod
    def mark_feed_fetched(self, id: UUID, fetched_at: datetime) -> None:
        """Stamp a feed's ``last_fetched_at``."""

    # Follows

    @abstractmethod
    def create_follow(
        self,
        id: UUID,
        created_at: datetime,
        updated_at: datetime,
        user_id: UUID,
        feed_id: UUID,
    ) -> FeedFollow:
        """Subscribe a user to a feed."""

    @abstractmethod
    def list_follows_for_user(self, user_id: UUID) -> List[FeedFollow]:
        """Return the follows of a user with feed and user names."""

    @abstractmethod
    def delete_follows_for_user(self, user_id: UUID, feed_url: str) -> int:
        """Unsubscribe a user from the feed at ``feed_url``; returns rows removed."""

    # Posts

    @abstractmethod
    def create_post(
        self,
        id: UUID,
        created_at: datetime,
        updated_at: datetime,
        title: str,
        url: str,
        description: Optional[str],
        published_at: datetime,
        feed_id: UUID,
    ) -> Post:
        """Insert a post."""

    @abstractmethod
    def list_recent_posts_for_user(self, user_id: UUID, limit: int) -> List[Post]:
        """Return the newest posts across the feeds a user follows."""

"""Data models for the feed aggregator."""

from .feed import Feed
from .follow import FeedFollow
from .post import Post
from .user import User

__all__ = ["Feed", "FeedFollow", "Post", "User"]

"""RSS fetching and parsing."""

from .dates import PUB_DATE_FORMAT, parse_pub_date
from .models import FeedDocument, FeedItem
from .rss_fetcher import RSSFetcher

__all__ = [
    "PUB_DATE_FORMAT",
    "FeedDocument",
    "FeedItem",
    "RSSFetcher",
    "parse_pub_date",
]

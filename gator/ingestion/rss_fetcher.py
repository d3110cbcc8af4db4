"""RSS feed fetcher."""

import html
from typing import Any, Optional

import feedparser
import httpx

from ..errors import FetchError
from .models import FeedDocument, FeedItem


def _text(value: Any) -> str:
    """Unescape HTML entities; feeds often double-encode them."""
    if not value:
        return ""
    return html.unescape(str(value))


class RSSFetcher:
    """Fetch and parse RSS feeds, one request per call."""

    def __init__(
        self,
        user_agent: str = "gator",
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize RSS fetcher.

        ``timeout=None`` waits on the server indefinitely.
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    def fetch(self, url: str) -> FeedDocument:
        """Fetch and parse a single RSS feed."""
        try:
            with httpx.Client(
                headers={"User-Agent": self.user_agent},
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchError(url, f"HTTP error: {e}") from e
        except httpx.InvalidURL as e:
            raise FetchError(url, f"Invalid URL: {e}") from e
        except (UnicodeError, ValueError) as e:
            # IDNA encoding of over-long host labels and similar malformed URLs
            raise FetchError(url, f"Invalid URL: {e}") from e

        feed = feedparser.parse(response.content)

        # No detected version means feedparser did not find a feed at all
        if not feed.get("version"):
            reason = feed.get("bozo_exception") or "not an RSS or Atom document"
            raise FetchError(url, f"Invalid RSS feed: {reason}")

        channel = feed.feed
        items = [
            FeedItem(
                title=_text(entry.get("title")),
                link=entry.get("link") or "",
                description=_text(entry.get("description")),
                pub_date=entry.get("published") or "",
            )
            for entry in feed.entries
        ]

        return FeedDocument(
            title=_text(channel.get("title")),
            link=channel.get("link") or "",
            description=_text(channel.get("description")),
            items=items,
        )

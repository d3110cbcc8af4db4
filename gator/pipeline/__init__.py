"""Feed polling pipeline."""

from .ingest import IngestStats, ingest_items
from .scheduler import FeedScheduler, TickResult, utc_now
from .timer import IntervalTimer, parse_duration

__all__ = [
    "FeedScheduler",
    "IngestStats",
    "IntervalTimer",
    "TickResult",
    "ingest_items",
    "parse_duration",
    "utc_now",
]

"""Publish date parsing.

Items must carry an RFC 1123 date with a zone abbreviation, for example
``Mon, 02 Jan 2006 15:04:05 MST``. Anything else is rejected.
"""

import re
from datetime import datetime, timedelta, timezone

from ..errors import DateParseError

PUB_DATE_FORMAT = "Mon, 02 Jan 2006 15:04:05 MST"

_BODY_FORMAT = "%a, %d %b %Y %H:%M:%S"
_ZONE_RE = re.compile(r"^[A-Z]{3,5}$")

# Hours east of UTC for the abbreviations RFC 822 names, less UT and the military zones.
# Unknown abbreviations are read as UTC.
ZONE_OFFSETS = {
    "UTC": 0,
    "GMT": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}


def parse_pub_date(text: str) -> datetime:
    """Parse a feed publish date into an aware datetime."""
    body, _, zone = text.strip().rpartition(" ")
    if not body or not _ZONE_RE.match(zone):
        raise DateParseError(text)

    try:
        parsed = datetime.strptime(body, _BODY_FORMAT)
    except ValueError as e:
        raise DateParseError(text) from e

    # strptime accepts single digit days, the layout does not
    if not re.match(r"^[A-Za-z]{3}, \d{2} ", body):
        raise DateParseError(text)

    offset = timedelta(hours=ZONE_OFFSETS.get(zone, 0))
    return parsed.replace(tzinfo=timezone(offset, zone))

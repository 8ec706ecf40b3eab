"""Date handling for the Ausgrid outage feed.

The feed mixes encodings: epoch milliseconds as numbers, the legacy .NET
JSON form "/Date(1771718700000)/", and plain ISO-8601 strings. Everything is
reduced to an aware UTC datetime, or None when the value can't be read.
"""

import re
from datetime import datetime, timedelta, timezone

# "/Date(1771718700000)/" and "/Date(1771718700000+1000)/"; the offset is
# display-only, the integer is already UTC.
_WRAPPED_EPOCH = re.compile(r"/Date\((-?\d+)(?:[+-]\d{4})?\)/")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_feed_date(val) -> datetime | None:
    """Parse any feed date encoding into a UTC datetime; never raises."""
    if val is None or isinstance(val, bool):
        return None

    if isinstance(val, (int, float)):
        return _from_epoch_ms(val)

    if isinstance(val, str):
        match = _WRAPPED_EPOCH.search(val)
        if match:
            return _from_epoch_ms(int(match.group(1)))
        return _from_iso(val)

    return None


def format_instant(dt: datetime) -> str:
    """Render as YYYY-MM-DDTHH:MM:SS.mmmZ."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _from_epoch_ms(ms) -> datetime | None:
    # NaN raises ValueError, infinity and out-of-range values OverflowError
    try:
        return _EPOCH + timedelta(milliseconds=ms)
    except (OverflowError, ValueError):
        return None


def _from_iso(val: str) -> datetime | None:
    text = val.strip()
    if not text:
        return None
    try:
        dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        # offsets at the edges of the datetime range overflow on conversion
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None

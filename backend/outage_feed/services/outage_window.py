"""Time-window filtering, ordering and truncation of normalized outages."""

import re
from datetime import datetime, timedelta, timezone
from typing import Iterable

from outage_feed.schemas.outage import NormalizedOutage

# Leading signed integer, the way query strings are read leniently ("15d" -> 15)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

_MAX_INSTANT = datetime.max.replace(tzinfo=timezone.utc)


def parse_positive_int(raw, default: int) -> int:
    """Leading integer of ``raw`` if it is positive, otherwise ``default``."""
    if raw is None:
        return default
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw if raw > 0 else default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


def window_bounds(now: datetime, window_days: int) -> tuple[datetime, datetime]:
    """[now, now + window_days]; an end past the datetime range is clamped to its maximum."""
    try:
        return now, now + timedelta(days=window_days)
    except OverflowError:
        return now, _MAX_INSTANT


def in_window(outage: NormalizedOutage, start: datetime, end: datetime) -> bool:
    """True when the outage starts inside [start, end]; both ends inclusive."""
    if outage.start_time is None:
        return False
    return start <= outage.start_time <= end


def sort_and_trim(outages: Iterable[NormalizedOutage], max_items: int) -> list[NormalizedOutage]:
    # sorted() is stable, so equal start times keep feed order
    ordered = sorted(outages, key=lambda o: o.start_time)
    return ordered[:max_items]

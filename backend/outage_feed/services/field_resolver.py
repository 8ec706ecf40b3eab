"""Map a raw Ausgrid record onto NormalizedOutage.

The feed has no fixed schema: the same attribute shows up under different
keys depending on the record's vintage, so each attribute is resolved from an
ordered alias list.
"""

import logging
from datetime import datetime
from typing import Any, Iterable

from outage_feed.schemas.outage import NormalizedOutage
from outage_feed.services.feed_dates import parse_feed_date

logger = logging.getLogger(__name__)

START_ALIASES = ("PlannedStartDateTime", "StartDateTime", "StartTime")
END_ALIASES = ("PlannedEndDateTime", "EndDateTime", "EstRestTime")
LOCATION_ALIASES = ("Suburb", "Area", "Location")
CUSTOMERS_ALIASES = ("CustomersAffected", "Customers")
STATUS_ALIASES = ("OutageStatus", "Status")
DISPLAY_TYPE_ALIASES = ("OutageDisplayType",)
ID_ALIASES = ("WebId",)

MAX_COORDS = 8


def first_present(record: dict, aliases: Iterable[str], default: Any = None) -> Any:
    """First alias whose value is not None."""
    for key in aliases:
        val = record.get(key)
        if val is not None:
            return val
    return default


def first_truthy(record: dict, aliases: Iterable[str], default: Any = None) -> Any:
    """First alias with a truthy value; empty strings and zeros are skipped."""
    for key in aliases:
        val = record.get(key)
        if val:
            return val
    return default


def first_date(record: dict, aliases: Iterable[str]) -> datetime | None:
    """First alias whose value parses as a feed date.

    Falsy values (0, "", None) are the feed's "no date" sentinels and fall
    through to the next alias.
    """
    for key in aliases:
        val = record.get(key)
        if not val:
            continue
        parsed = parse_feed_date(val)
        if parsed is not None:
            return parsed
    return None


def normalize_record(record: Any) -> NormalizedOutage:
    if not isinstance(record, dict):
        logger.debug("Skipping non-object feed record: %r", record)
        record = {}

    location = first_truthy(record, LOCATION_ALIASES)
    return NormalizedOutage(
        id=first_present(record, ID_ALIASES),
        display_type=str(first_present(record, DISPLAY_TYPE_ALIASES, "P")),
        location=str(location) if location is not None else None,
        customers_affected=_safe_int(first_present(record, CUSTOMERS_ALIASES)),
        status=str(first_truthy(record, STATUS_ALIASES, "Planned")),
        start_time=first_date(record, START_ALIASES),
        end_time=first_date(record, END_ALIASES),
        coordinates=_coords(record.get("Coords")),
    )


def _coords(val) -> list | None:
    if isinstance(val, (list, tuple)):
        return list(val[:MAX_COORDS])
    return None


def _safe_int(val) -> int | None:
    if val is None or isinstance(val, bool):
        return None
    try:
        return int(val)
    except (ValueError, TypeError, OverflowError):
        return None

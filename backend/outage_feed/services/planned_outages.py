"""Assemble API responses from raw Ausgrid records."""

import logging
from datetime import datetime, timezone

from outage_feed.schemas.outage import (
    OutagePreview,
    OutagePreviewResponse,
    PlannedOutagesResponse,
)
from outage_feed.services.field_resolver import normalize_record
from outage_feed.services.outage_window import in_window, sort_and_trim, window_bounds

logger = logging.getLogger(__name__)


def build_planned_response(
    records: list,
    window_days: int,
    max_items: int,
    now: datetime | None = None,
) -> PlannedOutagesResponse:
    """Normalize, window, sort and trim records into the planned-outage envelope."""
    now = now or datetime.now(timezone.utc)
    window_start, window_end = window_bounds(now, window_days)

    normalized = (normalize_record(r) for r in records)
    upcoming = [o for o in normalized if in_window(o, window_start, window_end)]
    trimmed = sort_and_trim(upcoming, max_items)

    logger.info(
        "Planned outages: %d of %d records in %d-day window, returning %d",
        len(upcoming), len(records), window_days, len(trimmed),
    )
    return PlannedOutagesResponse(
        fetched_at=datetime.now(timezone.utc),
        window_days=window_days,
        window_start=window_start,
        window_end=window_end,
        count=len(trimmed),
        outages=trimmed,
    )


def build_preview_response(records: list, limit: int) -> OutagePreviewResponse:
    """First ``limit`` raw records cut down to five fields; no dates, no window."""
    previews = [
        OutagePreview(
            id=r.get("WebId"),
            location=r.get("Suburb"),
            customers_affected=r.get("CustomersAffected"),
            status=r.get("OutageStatus"),
            display_type=r.get("OutageDisplayType"),
        )
        for r in records[:limit]
        if isinstance(r, dict)
    ]
    return OutagePreviewResponse(
        fetched_at=datetime.now(timezone.utc),
        count=len(previews),
        outages=previews,
    )

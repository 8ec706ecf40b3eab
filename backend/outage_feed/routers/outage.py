import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from outage_feed.config import settings
from outage_feed.schemas.outage import OutagePreviewResponse, PlannedOutagesResponse
from outage_feed.services import ausgrid_client
from outage_feed.services.outage_window import parse_positive_int
from outage_feed.services.planned_outages import build_planned_response, build_preview_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["outages"])


@router.get("/v1/ausgrid/planned", response_model=PlannedOutagesResponse)
async def planned_outages(
    days: str | None = Query(None, description="Window length in days (default 15)"),
    limit: str | None = Query(None, description="Maximum outages returned (default 500)"),
):
    """Upcoming planned outages starting within the next ``days`` days, soonest first.

    Upstream failures surface as 502 via the UpstreamError handler in main.
    """
    window_days = parse_positive_int(days, settings.default_window_days)
    max_items = parse_positive_int(limit, settings.max_items_cap)

    records = await ausgrid_client.fetch_planned_outages()
    return build_planned_response(records, window_days, max_items)


@router.get("/ausgrid/outages", response_model=OutagePreviewResponse)
async def outage_preview():
    """Quick look at the first few raw feed records."""
    try:
        records = await ausgrid_client.fetch_planned_outages()
        return build_preview_response(records, settings.preview_limit)
    except Exception as e:
        logger.error("Outage preview failed: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e) or type(e).__name__})

"""Ausgrid planned outage feed client.

Single GET against the public OutageListData web API, bounded by a hard
deadline. No authentication, no retries: any failure is reported to the
caller as an UpstreamError.
"""

import asyncio
import logging
from typing import Any

import httpx

from outage_feed.config import settings

logger = logging.getLogger(__name__)

HEADERS = {"Accept": "application/json"}


class UpstreamError(Exception):
    """Base for failures talking to the Ausgrid feed."""

    error = "Failed to fetch Ausgrid planned outages"

    def to_body(self) -> dict:
        return {"error": self.error}


class UpstreamHTTPError(UpstreamError):
    error = "Ausgrid request failed"

    def __init__(self, status: int, status_text: str):
        super().__init__(f"{status} {status_text}")
        self.status = status
        self.status_text = status_text

    def to_body(self) -> dict:
        return {"error": self.error, "status": self.status, "statusText": self.status_text}


class UpstreamTimeout(UpstreamError):
    reason = "timeout"

    def to_body(self) -> dict:
        return {"error": self.error, "reason": self.reason}


class UpstreamTransportError(UpstreamError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def to_body(self) -> dict:
        return {"error": self.error, "reason": self.reason}


async def fetch_feed(timeout: float | None = None) -> Any:
    """GET the feed and return the decoded JSON body.

    The request runs under asyncio.wait_for, so on expiry the in-flight
    request is cancelled and the client context closes its connection.
    """
    deadline = settings.upstream_timeout_seconds if timeout is None else timeout
    url = settings.ausgrid_planned_outages_url
    try:
        async with httpx.AsyncClient(timeout=deadline) as client:
            resp = await asyncio.wait_for(client.get(url, headers=HEADERS), timeout=deadline)
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        logger.warning("Ausgrid fetch timed out after %.1fs", deadline)
        raise UpstreamTimeout("timeout") from e
    except httpx.HTTPError as e:
        reason = str(e) or type(e).__name__
        logger.warning("Ausgrid fetch failed: %s", reason)
        raise UpstreamTransportError(reason) from e

    if not resp.is_success:
        logger.warning("Ausgrid returned %d %s", resp.status_code, resp.reason_phrase)
        raise UpstreamHTTPError(resp.status_code, resp.reason_phrase)

    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Ausgrid returned a non-JSON body: %s", e)
        raise UpstreamTransportError(f"invalid JSON from upstream: {e}") from e


def envelope_shape(data: Any) -> str | None:
    """Which container the feed used: "bare", "d", "Data", or None if unrecognized."""
    if isinstance(data, list):
        return "bare"
    if isinstance(data, dict):
        for key in ("d", "Data"):
            if isinstance(data.get(key), list):
                return key
    return None


def extract_records(data: Any) -> list:
    """Pull the record list out of a bare array, {"d": [...]} or {"Data": [...]}."""
    shape = envelope_shape(data)
    if shape is None:
        logger.debug("Unrecognized Ausgrid envelope (%s); treating as empty", type(data).__name__)
        return []
    return data if shape == "bare" else data[shape]


async def fetch_planned_outages(timeout: float | None = None) -> list:
    """Fetch the feed and return its raw outage records."""
    data = await fetch_feed(timeout)
    records = extract_records(data)
    logger.info(
        "Ausgrid: fetched %d planned outage records (envelope: %s)",
        len(records), envelope_shape(data) or "unrecognized",
    )
    return records

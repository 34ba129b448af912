from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from providers.base import MissingCredential
from providers.eventbrite import EventbriteProvider
from providers.google_calendar import GoogleCalendarProvider
from providers.icsfeed import ICSProvider
from schemas import ErrorResponse, EventsResponse

router = APIRouter(prefix="/api", tags=["events"])

logger = logging.getLogger(__name__)

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _error(status: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status, content=body.model_dump(exclude_none=True)
    )


# ---------- Routes ----------


@router.get("/eventbrite", response_model=EventsResponse, responses=_ERRORS)
def eventbrite(
    q: Optional[str] = Query(None, description="Free-text search"),
    page: Optional[str] = Query(None, description="Result page, default 1"),
    settings: Settings = Depends(get_settings),
):
    provider = EventbriteProvider(
        settings.eventbrite_token, timeout=settings.http_timeout_seconds
    )
    try:
        events = provider.search(query=q or "", page=page or 1)
    except MissingCredential as exc:
        return _error(500, str(exc))
    except Exception as exc:
        logger.exception("Eventbrite fetch failed")
        return _error(500, "Eventbrite fetch failed", str(exc))
    return EventsResponse(events=events)


@router.get("/google-calendar", response_model=EventsResponse, responses=_ERRORS)
def google_calendar(
    calendar_id: Optional[str] = Query(None, alias="calendarId"),
    settings: Settings = Depends(get_settings),
):
    if not calendar_id:
        return _error(400, "calendarId required")

    provider = GoogleCalendarProvider(
        settings.google_api_key, timeout=settings.http_timeout_seconds
    )
    try:
        events = provider.list_events(calendar_id)
    except MissingCredential as exc:
        return _error(500, str(exc))
    except Exception as exc:
        logger.exception("Google Calendar fetch failed")
        return _error(500, "Google Calendar fetch failed", str(exc))
    return EventsResponse(events=events)


@router.get("/fetch-ics", response_model=EventsResponse, responses=_ERRORS)
def fetch_ics(
    url: Optional[str] = Query(None, description="Address of an .ics document"),
    settings: Settings = Depends(get_settings),
):
    if not url:
        return _error(400, "url query param required")

    provider = ICSProvider(timeout=settings.http_timeout_seconds)
    try:
        events = provider.fetch(url)
    except Exception as exc:
        logger.exception("ICS fetch/parse error for %s", url)
        return _error(500, "Failed to fetch/parse ICS", str(exc))
    return EventsResponse(events=events)

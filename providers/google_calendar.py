from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from providers.base import (
    MissingCredential,
    ProviderError,
    first_of,
    nested,
    prefixed_id,
    timestamp_of,
)
from schemas import CanonicalEvent
from services import http
from services.normalize import normalize_event

KEY = "gcal"
NAME = "Google Calendar"
GCAL_URL = "https://www.googleapis.com/calendar/v3/calendars/{calendar_id}/events"
KEY_ENV = "GOOGLE_API_KEY"

logger = logging.getLogger(__name__)


def parse_item(it: Dict[str, Any]) -> CanonicalEvent:
    return normalize_event(
        id=prefixed_id(KEY, it.get("id")),
        title=it.get("summary"),
        description=it.get("description") or "",
        # timed events carry dateTime, all-day events only date
        start=timestamp_of(it.get("start"), "dateTime", "date"),
        end=timestamp_of(it.get("end"), "dateTime", "date"),
        venue=it.get("location") or "",
        organizer_name=first_of(
            nested(it, "organizer", "displayName"),
            nested(it, "organizer", "email"),
            NAME,
        ),
        organizer_type="other",
        source_name=NAME,
        external=True,
    )


class GoogleCalendarProvider:
    """Reads a public calendar with an API key (no OAuth)."""

    def __init__(self, api_key: Optional[str], timeout: Optional[float] = None) -> None:
        self.api_key = api_key
        self.timeout = timeout

    def list_events(self, calendar_id: str) -> List[CanonicalEvent]:
        if not self.api_key:
            raise MissingCredential(KEY_ENV)

        url = GCAL_URL.format(calendar_id=quote(calendar_id, safe=""))
        # Google expands recurring events for us and sorts by start
        headers = {"X-Goog-Api-Key": self.api_key}
        params = {
            "singleEvents": "true",
            "orderBy": "startTime",
        }
        try:
            payload = http.get_json(
                url, params=params, headers=headers, timeout=self.timeout
            )
        except (requests.RequestException, ValueError) as exc:
            raise ProviderError(str(exc)) from exc

        if not isinstance(payload, dict):
            raise ProviderError("Unexpected Google Calendar payload")
        items = payload.get("items") or []
        logger.info("gcal calendar=%s -> %d items", calendar_id, len(items))
        return [parse_item(it) for it in items]

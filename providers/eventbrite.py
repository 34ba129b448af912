# providers/eventbrite.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

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

KEY = "eventbrite"
NAME = "Eventbrite"
EB_URL = "https://www.eventbriteapi.com/v3/events/search/"
TOKEN_ENV = "EVENTBRITE_TOKEN"

logger = logging.getLogger(__name__)


def parse_event(e: Dict[str, Any]) -> CanonicalEvent:
    venue = e.get("venue")
    return normalize_event(
        id=prefixed_id(KEY, e.get("id")),
        title=nested(e, "name", "text"),
        description=nested(e, "description", "text"),
        # utc first, the venue-local timestamp only when utc is missing
        start=timestamp_of(e.get("start"), "utc", "local"),
        end=timestamp_of(e.get("end"), "utc", "local"),
        venue=first_of(
            nested(venue, "address", "localized_address_display"),
            nested(venue, "name"),
        ),
        organizer_name=nested(e, "organizer", "name"),
        organizer_type="company",
        source_name=NAME,
        external=True,
    )


class EventbriteProvider:
    def __init__(self, token: Optional[str], timeout: Optional[float] = None) -> None:
        self.token = token
        self.timeout = timeout

    def search(self, *, query: str = "", page: str | int = 1) -> List[CanonicalEvent]:
        if not self.token:
            raise MissingCredential(TOKEN_ENV)

        headers = {"Authorization": f"Bearer {self.token}"}
        params: Dict[str, Any] = {
            "q": query,
            "expand": "venue,organizer",
            "page": page,
        }
        try:
            payload = http.get_json(
                EB_URL, params=params, headers=headers, timeout=self.timeout
            )
        except (requests.RequestException, ValueError) as exc:
            raise ProviderError(str(exc)) from exc

        if not isinstance(payload, dict):
            raise ProviderError("Unexpected Eventbrite payload")
        events = payload.get("events") or []
        logger.info("eventbrite q=%r page=%s -> %d events", query, page, len(events))
        return [parse_event(ev) for ev in events]

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests
from icalendar import Calendar

from providers.base import ProviderError, prefixed_id, to_iso_z
from schemas import CanonicalEvent
from services import http
from services.normalize import normalize_event

KEY = "ics"
NAME = "ICS"
ID_MAX_LEN = 40

logger = logging.getLogger(__name__)


def _text(component: Any, prop: str) -> str:
    value = component.get(prop)
    return str(value) if value is not None else ""


def _instant(component: Any, prop: str) -> str:
    value = component.get(prop)
    if value is None:
        return ""
    return to_iso_z(value.dt) or ""


def parse_component(component: Any) -> CanonicalEvent:
    """Map one parsed VEVENT onto the canonical event."""
    summary = _text(component, "summary")
    local_id = (_text(component, "uid") or summary)[:ID_MAX_LEN]
    return normalize_event(
        id=prefixed_id(KEY, local_id),
        title=summary,
        description=_text(component, "description"),
        start=_instant(component, "dtstart"),
        end=_instant(component, "dtend"),
        venue=_text(component, "location"),
        # raw ORGANIZER value, mailto: included
        organizer_name=_text(component, "organizer"),
        organizer_type="other",
        source_name=NAME,
        external=True,
    )


def parse_calendar(text: str) -> List[CanonicalEvent]:
    """
    Parse an iCalendar document and return its events in document order.

    Only VEVENT components are emitted; timezone definitions, todos and
    free/busy blocks never reach the output.
    """
    try:
        cal = Calendar.from_ical(text)
    except ValueError as exc:
        raise ProviderError(f"Invalid ICS document: {exc}") from exc

    events = []
    for component in cal.walk():
        if component.name != "VEVENT":
            continue
        events.append(parse_component(component))
    return events


class ICSProvider:
    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def fetch(self, url: str) -> List[CanonicalEvent]:
        try:
            text = http.get_text(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ProviderError(str(exc)) from exc

        events = parse_calendar(text)
        logger.info("ics url=%s -> %d events", url, len(events))
        return events

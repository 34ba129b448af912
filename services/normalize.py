from __future__ import annotations

from typing import Optional

from schemas import CanonicalEvent, EventSource, Organizer, Registration

VERIFIED_ORGANIZER_TYPES = frozenset({"government", "company"})


def is_verified(organizer_type: str | None) -> bool:
    return organizer_type in VERIFIED_ORGANIZER_TYPES


def normalize_event(
    *,
    id: Optional[str] = None,
    title: Optional[str] = None,
    description: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    venue: Optional[str] = None,
    organizer_name: Optional[str] = None,
    organizer_type: Optional[str] = None,
    source_name: Optional[str] = None,
    external: bool = True,
) -> CanonicalEvent:
    """
    Build the canonical event from whatever a provider could extract.

    Never fails: missing strings become "", the organizer name falls back to
    the source name and then "Unknown". The id is used as given; providers
    are expected to have prefixed it already.
    """
    organizer_type = organizer_type or "other"
    return CanonicalEvent(
        id=id or "",
        title=title or "",
        description=description or "",
        start=start or "",
        end=end or "",
        venue=venue or "",
        organizer=Organizer(
            name=organizer_name or source_name or "Unknown",
            type=organizer_type,
            verified=is_verified(organizer_type),
        ),
        source=EventSource(name=source_name or "external"),
        tags=[],
        external=external,
        registration=Registration(open=True),
    )

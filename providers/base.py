from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional

ISO_Z_FMT = "%Y-%m-%dT%H:%M:%SZ"


class ProviderError(Exception):
    """An upstream feed could not be fetched or decoded."""


class MissingCredential(ProviderError):
    def __init__(self, env_var: str) -> None:
        super().__init__(f"Missing {env_var} env var")
        self.env_var = env_var


def to_iso_z(value: Any) -> Optional[str]:
    """
    Serialize a datetime-like value as a UTC instant, e.g. 2025-01-31T19:00:00Z.
    Accepts datetime, date (midnight UTC) and anything exposing `.datetime`
    (arrow objects). Naive datetimes are taken as UTC.
    """
    if not value:
        return None
    dt = getattr(value, "datetime", value)
    if isinstance(dt, date) and not isinstance(dt, datetime):
        dt = datetime.combine(dt, time.min)
    if not isinstance(dt, datetime):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime(ISO_Z_FMT)


def prefixed_id(prefix: str, local_id: Any) -> str:
    """`eventbrite` + `123` -> `eventbrite_123`; ids stay unique across feeds."""
    return f"{prefix}_{'' if local_id is None else local_id}"


def nested(obj: Any, *keys: str) -> Any:
    """Null-safe lookup through nested provider dicts."""
    for k in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(k)
    return obj


def first_of(*values: Any) -> Any:
    for v in values:
        if v:
            return v
    return None


def timestamp_of(block: Dict[str, Any] | None, *keys: str) -> Optional[str]:
    """Pick the first populated key of a provider's start/end object."""
    if not isinstance(block, dict):
        return None
    return first_of(*(block.get(k) for k in keys))

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Organizer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = "other"
    verified: bool = False


class EventSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "external"


class Registration(BaseModel):
    model_config = ConfigDict(frozen=True)

    open: bool = True


class CanonicalEvent(BaseModel):
    """One event, whatever feed it came from."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    description: str = ""
    start: str = Field(
        default="", description="ISO8601 e.g. 2025-11-05T19:00:00Z, or empty"
    )
    end: str = ""
    venue: str = ""
    organizer: Organizer
    source: EventSource
    tags: List[str] = Field(default_factory=list)
    external: bool = True
    registration: Registration = Field(default_factory=Registration)


class EventsResponse(BaseModel):
    events: List[CanonicalEvent] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    ok: bool = True
    ts: int = Field(..., description="Epoch milliseconds")

from __future__ import annotations

import time

from fastapi import APIRouter

from schemas import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, ts=int(time.time() * 1000))

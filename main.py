from __future__ import annotations

import logging
import time as _t

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from routers import (
    events as events_router,
    health as health_router,
)

app = FastAPI(title="event-relay", version="1.0.0")

# CORS (the browser frontend calls these routes directly)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_log = logging.getLogger("uvicorn.error")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = _t.perf_counter()  # monotonic for durations
    response = None
    try:
        response = await call_next(request)
        return response
    finally:
        dur_ms = int((_t.perf_counter() - start) * 1000)
        status = getattr(response, "status_code", "-")
        _log.info(
            "path=%s status=%s dur_ms=%s ua=%s",
            request.url.path,
            status,
            dur_ms,
            request.headers.get("user-agent", "-"),
        )

# Routers
app.include_router(events_router.router)
app.include_router(health_router.router)


@app.get("/")
def root():
    return {"ok": True, "service": "event-relay"}


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    _log.info("Proxy running on %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()

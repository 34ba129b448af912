"""
Service package marker.

Intentionally empty to avoid heavy imports at package import time.
Import the concrete modules directly, e.g.:

    from services import http
    from services.normalize import normalize_event
"""
__all__: list[str] = []

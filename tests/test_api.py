"""Tests for the HTTP surface."""

import time
from unittest.mock import patch

import requests

from providers.base import ProviderError
from services.normalize import normalize_event


def _event(id_):
    return normalize_event(id=id_, title="T", source_name="ICS", organizer_type="other")


def test_health_endpoint(client):
    before = int(time.time() * 1000)
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert isinstance(data["ts"], int)
    assert data["ts"] >= before


def test_root_endpoint(client):
    assert client.get("/").json() == {"ok": True, "service": "event-relay"}


# ---------- Eventbrite ----------


def test_eventbrite_success(client):
    payload = {"events": [{"id": "123", "name": {"text": "Jazz"}, "start": {"utc": "u", "local": "l"}}]}
    with patch("services.http.get_json", return_value=payload) as mock_get:
        response = client.get("/api/eventbrite", params={"q": "jazz", "page": "2"})

    assert response.status_code == 200
    events = response.json()["events"]
    assert len(events) == 1
    assert events[0]["id"] == "eventbrite_123"
    assert events[0]["start"] == "u"
    assert events[0]["organizer"] == {"name": "Eventbrite", "type": "company", "verified": True}
    assert events[0]["registration"] == {"open": True}
    params = mock_get.call_args.kwargs["params"]
    assert params["q"] == "jazz"
    assert params["page"] == "2"


def test_eventbrite_defaults_query_and_page(client):
    with patch("services.http.get_json", return_value={"events": []}) as mock_get:
        response = client.get("/api/eventbrite")
    assert response.json() == {"events": []}
    params = mock_get.call_args.kwargs["params"]
    assert params["q"] == ""
    assert params["page"] == 1


def test_eventbrite_missing_token(client_without_credentials):
    with patch("services.http.get_json") as mock_get:
        response = client_without_credentials.get("/api/eventbrite")
    assert response.status_code == 500
    assert response.json() == {"error": "Missing EVENTBRITE_TOKEN env var"}
    mock_get.assert_not_called()


def test_eventbrite_upstream_failure(client):
    with patch("services.http.get_json", side_effect=requests.HTTPError("401 Client Error")):
        response = client.get("/api/eventbrite")
    assert response.status_code == 500
    assert response.json() == {"error": "Eventbrite fetch failed", "details": "401 Client Error"}


# ---------- Google Calendar ----------


def test_google_calendar_requires_calendar_id(client):
    with patch("services.http.get_json") as mock_get:
        response = client.get("/api/google-calendar")
    assert response.status_code == 400
    assert response.json() == {"error": "calendarId required"}
    mock_get.assert_not_called()


def test_google_calendar_checks_calendar_id_before_key(client_without_credentials):
    response = client_without_credentials.get("/api/google-calendar")
    assert response.status_code == 400


def test_google_calendar_missing_key(client_without_credentials):
    with patch("services.http.get_json") as mock_get:
        response = client_without_credentials.get("/api/google-calendar", params={"calendarId": "c1"})
    assert response.status_code == 500
    assert response.json() == {"error": "Missing GOOGLE_API_KEY env var"}
    mock_get.assert_not_called()


def test_google_calendar_success(client):
    payload = {"items": [{"id": "e1", "summary": "Standup", "start": {"date": "2025-03-01"}}]}
    with patch("services.http.get_json", return_value=payload):
        response = client.get("/api/google-calendar", params={"calendarId": "c1"})
    assert response.status_code == 200
    (event,) = response.json()["events"]
    assert event["id"] == "gcal_e1"
    assert event["start"] == "2025-03-01"
    assert event["source"] == {"name": "Google Calendar"}
    assert event["tags"] == []


def test_google_calendar_upstream_failure(client):
    with patch("services.http.get_json", side_effect=ValueError("Expecting value")):
        response = client.get("/api/google-calendar", params={"calendarId": "c1"})
    assert response.status_code == 500
    assert response.json() == {"error": "Google Calendar fetch failed", "details": "Expecting value"}


# ---------- ICS ----------


def test_fetch_ics_requires_url(client):
    with patch("providers.icsfeed.ICSProvider.fetch") as mock_fetch:
        response = client.get("/api/fetch-ics")
    assert response.status_code == 400
    assert response.json() == {"error": "url query param required"}
    mock_fetch.assert_not_called()


def test_fetch_ics_success(client):
    with patch("providers.icsfeed.ICSProvider.fetch", return_value=[_event("ics_a"), _event("ics_b")]) as mock_fetch:
        response = client.get("/api/fetch-ics", params={"url": "https://example.com/cal.ics"})
    assert response.status_code == 200
    assert [e["id"] for e in response.json()["events"]] == ["ics_a", "ics_b"]
    mock_fetch.assert_called_once_with("https://example.com/cal.ics")


def test_fetch_ics_failure_returns_no_partial_events(client):
    with patch("providers.icsfeed.ICSProvider.fetch", side_effect=ProviderError("Invalid ICS document")):
        response = client.get("/api/fetch-ics", params={"url": "https://example.com/cal.ics"})
    assert response.status_code == 500
    body = response.json()
    assert body == {"error": "Failed to fetch/parse ICS", "details": "Invalid ICS document"}
    assert "events" not in body


def test_google_calendar_upstream_404_does_not_expose_api_key(client):
    def not_found(url, *, params=None, headers=None, timeout=None):
        resp = requests.Response()
        resp.status_code = 404
        resp.reason = "Not Found"
        resp.url = requests.Request("GET", url, params=params).prepare().url
        return resp

    with patch("services.http.get", side_effect=not_found):
        response = client.get("/api/google-calendar", params={"calendarId": "bogus"})
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Google Calendar fetch failed"
    assert "404" in body["details"]
    assert "g-key" not in body["details"]


def test_cors_allows_any_origin_without_credentials(client):
    response = client.get("/api/health", headers={"Origin": "https://frontend.example"})
    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers

"""
Shared HTTP session for all outbound requests.

One attempt per call: the session mounts a plain adapter, so failures reach
the caller immediately instead of being retried.
"""
import logging
from typing import Any, Mapping, MutableMapping, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.utils import get_encoding_from_headers

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "EventRelay/1.0 (+https://example.com)",
    "Accept": "application/json, text/calendar;q=0.9, */*;q=0.8",
}


def _make_session() -> requests.Session:
    sess = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    sess.mount("https://", adapter)
    sess.mount("http://", adapter)
    return sess


_SESSION = _make_session()


def get(
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> requests.Response:
    merged: MutableMapping[str, str] = dict(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return _SESSION.get(url, params=params, headers=merged, timeout=timeout)


def _checked(resp: requests.Response) -> requests.Response:
    try:
        resp.raise_for_status()
    except requests.HTTPError as e:
        logger.warning("HTTP error %s for %s", e, resp.url)
        raise
    return resp


def get_json(
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> Any:
    """GET and decode JSON. Raises on non-2xx and on an undecodable body."""
    resp = _checked(get(url, params=params, headers=headers, timeout=timeout))
    return resp.json()


def get_text(
    url: str,
    *,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> str:
    """GET a text document. Without a declared charset the body is read as UTF-8."""
    resp = _checked(get(url, headers=headers, timeout=timeout))
    content_type = resp.headers.get("Content-Type", "")
    if "charset" in content_type.lower():
        resp.encoding = get_encoding_from_headers(resp.headers)
    else:
        resp.encoding = "utf-8"
    return resp.text

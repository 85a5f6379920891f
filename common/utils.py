"""
Common helpers shared by the API clients, the models and the pages.

This module contains the HTTP transport used by every client (a small
`requests.Session` wrapper that adds JSON and bearer-token headers and turns
non-2xx responses into `RequestError`), the timestamp helpers used by the
models to read and write ISO-8601 dates, and the list helpers the Home page
uses on matches that were already fetched (`filter_matches`,
`sort_matches`).

Function notes:
    - `parse_timestamp` never raises: anything pandas cannot read becomes
        `None`, the same way the pages treat a missing kickoff date.
    - `filter_matches` returns the input list itself (not a copy) when the
        query is too short to search.
"""

# Import libraries
from __future__ import annotations
import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd
import requests

from .constants import DEFAULT_TIMEOUT, MIN_QUERY_LENGTH, USER_AGENT
from .errors import RequestError

logger = logging.getLogger(__name__)

Timeout = Union[float, Tuple[float, float]]


# ---------- Dates ----------
def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an API date (ISO string or epoch millis) into an aware UTC datetime."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    if not isinstance(value, (str, int, float, date)):
        return None
    try:
        if isinstance(value, (int, float)):
            ts = pd.to_datetime(value, unit="ms", utc=True, errors="coerce")
        else:
            ts = pd.to_datetime(value, utc=True, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if pd.isnull(ts):
        return None
    return ts.to_pydatetime()


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime the way the backend writes it: 2024-05-01T18:30:00.000Z."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_day(value: Union[date, datetime, str]) -> str:
    """Date or datetime -> 'YYYY-MM-DD'; strings are passed through as given."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value)


def format_display_date(value: Optional[datetime], with_weekday: bool = False) -> str:
    if value is None:
        return ""
    fmt = "%a, %b %d, %Y, %I:%M %p" if with_weekday else "%b %d, %Y, %I:%M %p"
    return value.strftime(fmt)


def as_dict(data: Any) -> Dict[str, Any]:
    return data if isinstance(data, dict) else {}


def as_list(data: Any) -> List[Any]:
    return data if isinstance(data, list) else []


def as_text(value: Any) -> str:
    """Scalar -> str; None and containers become the empty string."""
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, dict, list)):
        return ""
    return str(value)


# ---------- HTTP ----------
def handle_response(resp: requests.Response) -> Any:
    """Return the decoded JSON body or raise `RequestError` for non-2xx statuses."""
    if not resp.ok:
        body = resp.text or ""
        message = None
        try:
            payload = resp.json()
            if isinstance(payload, dict):
                message = payload.get("message")
        except ValueError:
            message = body or None
        raise RequestError(resp.status_code, resp.reason or "", body, message)

    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        # Malformed success body: the normalizers turn None into defaults.
        logger.warning("Non-JSON success body from %s", resp.url)
        return None


class ApiTransport:
    """
    Thin `requests.Session` wrapper shared by the API clients.

    `token_provider` is called on every request, so a token stored after
    login is picked up by the next call without rebuilding the clients.
    `timeout` is the default (connect, read) deadline; each call may pass
    its own.
    """

    def __init__(
        self,
        base_url: str,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        timeout: Timeout = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_provider = token_provider
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def headers(self, authenticated: bool = True) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if authenticated and self.token_provider is not None:
            token = self.token_provider()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        timeout: Optional[Timeout] = None,
        authenticated: bool = True,
    ) -> Any:
        url = self.url(path)
        logger.debug("%s %s params=%s", method, url, params)
        resp = self.session.request(
            method,
            url,
            params=params,
            json=json,
            headers=self.headers(authenticated),
            timeout=timeout or self.timeout,
        )
        return handle_response(resp)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[Timeout] = None) -> Any:
        return self.request("GET", path, params=params, timeout=timeout)

    def post(self, path: str, json: Any = None, timeout: Optional[Timeout] = None, authenticated: bool = True) -> Any:
        return self.request("POST", path, json=json, timeout=timeout, authenticated=authenticated)


# ---------- Match lists ----------
def _lower(value: Optional[str]) -> str:
    return as_text(value).lower()


def filter_matches(matches: Sequence[Any], query: Optional[str]) -> Sequence[Any]:
    """
    Local search over already-fetched matches.

    Queries shorter than two characters return `matches` untouched. Longer
    queries keep (in order) the matches whose home team, away team,
    competition name or competition code contains the query, ignoring case.
    """
    if not query or len(query) < MIN_QUERY_LENGTH:
        return matches

    q = query.lower()
    out = []
    for m in matches:
        home, away, comp = m.home_team, m.away_team, m.competition
        haystack = (
            _lower(home.name if home else None),
            _lower(away.name if away else None),
            _lower(comp.name if comp else None),
            _lower(comp.code if comp else None),
        )
        if any(q in field for field in haystack):
            out.append(m)
    return out


def sort_matches(matches: Sequence[Any], descending: bool = False) -> List[Any]:
    """Order by kickoff; matches without a date always go last."""
    dated = [m for m in matches if m.utc_date is not None]
    undated = [m for m in matches if m.utc_date is None]
    dated.sort(key=lambda m: m.utc_date, reverse=descending)
    return dated + undated

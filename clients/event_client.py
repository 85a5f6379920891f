"""Client for the legacy `/api/events` endpoints (older backend variant)."""

from __future__ import annotations
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

from common.constants import EVENTS_PATH
from common.utils import ApiTransport, Timeout, as_list, format_day
from models.event_model import Event

logger = logging.getLogger(__name__)


class EventClient:
    def __init__(self, transport: ApiTransport):
        self.transport = transport

    def _fetch_list(self, path: str, what: str, params: Optional[Dict[str, Any]] = None,
                    timeout: Optional[Timeout] = None) -> List[Event]:
        try:
            data = self.transport.get(path, params=params, timeout=timeout)
        except Exception as exc:
            logger.error("Error fetching %s: %s", what, exc)
            raise
        return [Event.from_json(e) for e in as_list(data)]

    def get_events(self, timeout: Optional[Timeout] = None) -> List[Event]:
        return self._fetch_list(EVENTS_PATH, "events", timeout=timeout)

    def get_events_by_date(self, day: Union[date, str], timeout: Optional[Timeout] = None) -> List[Event]:
        return self._fetch_list(f"{EVENTS_PATH}/date/{format_day(day)}", "events by date", timeout=timeout)

    def get_event_by_id(self, event_id: int, timeout: Optional[Timeout] = None) -> Event:
        try:
            data = self.transport.get(f"{EVENTS_PATH}/id/{event_id}", timeout=timeout)
        except Exception as exc:
            logger.error("Error fetching event %s: %s", event_id, exc)
            raise
        return Event.from_json(data)

    def get_events_by_team_name(self, team_name: str, timeout: Optional[Timeout] = None) -> List[Event]:
        path = f"{EVENTS_PATH}/team/{quote(team_name, safe='')}"
        return self._fetch_list(path, "events by team name", timeout=timeout)

    def get_events_by_date_range(self, start_date: Union[date, str], end_date: Union[date, str],
                                 timeout: Optional[Timeout] = None) -> List[Event]:
        params = {"startDate": format_day(start_date), "endDate": format_day(end_date)}
        return self._fetch_list(f"{EVENTS_PATH}/daterange", "events by date range", params, timeout)

    def search_events(self, query: str, limit: int = 10, timeout: Optional[Timeout] = None) -> List[Event]:
        params = {"query": query, "limit": limit}
        return self._fetch_list(f"{EVENTS_PATH}/search", "event search", params, timeout)

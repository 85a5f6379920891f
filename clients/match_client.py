"""
Client for the `/api/matches` endpoints.

Each method performs one GET through the shared `ApiTransport` and returns
normalized `Match` records (list endpoints return `[]` when the body is not a
list). Errors are logged and re-raised unchanged: `RequestError` for non-2xx
statuses, `requests.RequestException` for transport failures.

Every method accepts an optional `timeout` that overrides the transport
default for that call. With `check_payloads=True` each match is also run
through `models.schema.decode_match` and type problems are logged.
"""

from __future__ import annotations
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Union

from common.constants import MATCHES_PATH
from common.utils import ApiTransport, Timeout, as_list, format_day
from models.match_model import Match
from models.schema import decode_match

logger = logging.getLogger(__name__)


class MatchClient:
    def __init__(self, transport: ApiTransport, check_payloads: bool = False):
        self.transport = transport
        self.check_payloads = check_payloads

    def _to_match(self, data: Any) -> Match:
        if not self.check_payloads:
            return Match.from_json(data)
        result = decode_match(data)
        if not result.ok:
            logger.warning("Match %s payload has unexpected fields: %s", result.record.id, "; ".join(result.errors))
        return result.record

    def _fetch_list(self, path: str, what: str, params: Optional[Dict[str, Any]] = None,
                    timeout: Optional[Timeout] = None) -> List[Match]:
        try:
            data = self.transport.get(path, params=params, timeout=timeout)
        except Exception as exc:
            logger.error("Error fetching %s: %s", what, exc)
            raise
        return [self._to_match(m) for m in as_list(data)]

    def get_matches(self, timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(MATCHES_PATH, "matches", timeout=timeout)

    def get_match_by_id(self, match_id: int, timeout: Optional[Timeout] = None) -> Match:
        try:
            data = self.transport.get(f"{MATCHES_PATH}/{match_id}", timeout=timeout)
        except Exception as exc:
            logger.error("Error fetching match %s: %s", match_id, exc)
            raise
        return self._to_match(data)

    def get_matches_by_date_range(self, start_date: Union[date, str], end_date: Union[date, str],
                                  timeout: Optional[Timeout] = None) -> List[Match]:
        params = {"startDate": format_day(start_date), "endDate": format_day(end_date)}
        return self._fetch_list(f"{MATCHES_PATH}/date-range", "matches by date range", params, timeout)

    def get_matches_by_team_id(self, team_id: int, timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(f"{MATCHES_PATH}/team/{team_id}", "matches by team", timeout=timeout)

    def get_matches_by_competition(self, competition_id: int, timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(f"{MATCHES_PATH}/competition/{competition_id}", "matches by competition",
                                timeout=timeout)

    def get_matches_by_competition_code(self, code: str, timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(f"{MATCHES_PATH}/competition/code/{code}", "matches by competition code",
                                timeout=timeout)

    def get_matches_by_competition_and_matchday(self, competition_id: int, matchday: int,
                                                timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(
            f"{MATCHES_PATH}/competition/{competition_id}/matchday/{matchday}",
            "matches by competition and matchday",
            timeout=timeout,
        )

    def get_matches_by_status(self, status: str, timeout: Optional[Timeout] = None) -> List[Match]:
        status = getattr(status, "value", status)
        return self._fetch_list(f"{MATCHES_PATH}/status/{status}", "matches by status", timeout=timeout)

    def get_today_matches(self, timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(f"{MATCHES_PATH}/today", "today matches", timeout=timeout)

    def get_upcoming_matches(self, timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(f"{MATCHES_PATH}/upcoming", "upcoming matches", timeout=timeout)

    def get_finished_matches(self, timeout: Optional[Timeout] = None) -> List[Match]:
        return self._fetch_list(f"{MATCHES_PATH}/finished", "finished matches", timeout=timeout)

    def get_match_stats(self, timeout: Optional[Timeout] = None) -> Dict[str, Any]:
        """Raw stats object; the backend decides the keys."""
        try:
            data = self.transport.get(f"{MATCHES_PATH}/stats", timeout=timeout)
        except Exception as exc:
            logger.error("Error fetching match stats: %s", exc)
            raise
        return data if isinstance(data, dict) else {}

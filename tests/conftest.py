import json
from types import SimpleNamespace

import pytest
import requests

from clients.api import build_clients
from common.config import Settings
from store.key_value import MemoryKeyValueStore
from store.session_store import SessionPersistence, SessionStore


def _make_response(status=200, json_body=None, text=None, reason="OK", url="http://api.test/x"):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp.url = url
    resp.encoding = "utf-8"
    if json_body is not None:
        resp._content = json.dumps(json_body).encode("utf-8")
    elif text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = b""
    return resp


class FakeSession:
    """Stands in for requests.Session: records calls, replays queued responses."""

    def __init__(self):
        self.headers = {}
        self.calls = []
        self.responses = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def request(self, method, url, **kwargs):
        self.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture(name="make_response")
def make_response_fixture():
    return _make_response


@pytest.fixture(name="fake_session")
def fake_session_fixture():
    return FakeSession()


@pytest.fixture(name="kv")
def kv_fixture():
    return MemoryKeyValueStore()


@pytest.fixture(name="persistence")
def persistence_fixture(kv):
    return SessionPersistence(kv)


@pytest.fixture(name="store")
def store_fixture(persistence):
    return SessionStore(persistence)


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(
        api_base_url="http://api.test",
        connect_timeout=1.0,
        read_timeout=2.0,
        cookie_days=7,
        verify_on_boot=False,
        log_level="INFO",
    )


@pytest.fixture(name="clients")
def clients_fixture(settings, persistence, fake_session):
    return build_clients(settings, persistence, session=fake_session)


@pytest.fixture(name="match_json")
def match_json_fixture():
    return {
        "id": 436001,
        "utcDate": "2024-05-01T18:30:00Z",
        "status": "FINISHED",
        "matchday": 35,
        "stage": "REGULAR_SEASON",
        "group": None,
        "lastUpdated": "2024-05-02T08:00:00Z",
        "area": {"id": 2072, "name": "England", "code": "ENG", "flag": "https://crests.test/770.svg"},
        "competition": {"id": 2021, "name": "Premier League", "code": "PL", "type": "LEAGUE",
                        "emblem": "https://crests.test/PL.png"},
        "season": {"id": 1564, "startDate": "2023-08-11", "endDate": "2024-05-19", "currentMatchday": 38,
                   "winner": None},
        "homeTeam": {"id": 61, "name": "Chelsea FC", "shortName": "Chelsea", "tla": "CHE",
                     "crest": "https://crests.test/61.png"},
        "awayTeam": {"id": 73, "name": "Tottenham Hotspur FC", "shortName": "Tottenham", "tla": "TOT",
                     "crest": "https://crests.test/73.png"},
        "score": {"winner": "HOME_TEAM", "duration": "REGULAR",
                  "fullTime": {"home": 2, "away": 0}, "halfTime": {"home": 1, "away": 0}},
        "comments": [
            {"id": "c1", "text": "Great game", "createdAt": "2024-05-01T21:00:00Z",
             "userId": "u1", "username": "bob"},
        ],
    }

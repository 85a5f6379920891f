from datetime import date, datetime, timezone

import pytest
import requests

from common.errors import RequestError
from common.utils import ApiTransport, format_day, handle_response, parse_timestamp, to_iso


# ----- dates -----
def test_parse_timestamp_variants():
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("nonsense") is None
    assert parse_timestamp({"a": 1}) is None
    assert parse_timestamp("2024-05-01T18:30:00Z") == datetime(2024, 5, 1, 18, 30, tzinfo=timezone.utc)
    assert parse_timestamp(1714588200000) == datetime(2024, 5, 1, 18, 30, tzinfo=timezone.utc)


def test_to_iso():
    assert to_iso(None) is None
    assert to_iso(datetime(2024, 5, 1, 18, 30, tzinfo=timezone.utc)) == "2024-05-01T18:30:00.000Z"
    # naive datetimes are taken as UTC
    assert to_iso(datetime(2024, 5, 1, 18, 30)) == "2024-05-01T18:30:00.000Z"


def test_format_day():
    assert format_day(date(2024, 3, 7)) == "2024-03-07"
    assert format_day(datetime(2024, 3, 7, 12, 0)) == "2024-03-07"
    assert format_day("2024-03-07") == "2024-03-07"


# ----- responses -----
def test_handle_response_returns_json(make_response):
    assert handle_response(make_response(200, {"a": 1})) == {"a": 1}


def test_handle_response_empty_body(make_response):
    assert handle_response(make_response(204, reason="No Content")) is None


def test_handle_response_malformed_success_body(make_response):
    assert handle_response(make_response(200, text="<html>")) is None


def test_error_uses_message_field(make_response):
    resp = make_response(400, {"message": "Username already taken"}, reason="Bad Request")
    with pytest.raises(RequestError) as info:
        handle_response(resp)

    err = info.value
    assert err.status == 400
    assert err.status_text == "Bad Request"
    assert str(err) == "Username already taken"
    assert "Username already taken" in err.body


def test_error_falls_back_to_raw_text(make_response):
    with pytest.raises(RequestError) as info:
        handle_response(make_response(500, text="Internal kaboom", reason="Server Error"))
    assert info.value.message == "Internal kaboom"


def test_error_without_body_uses_status_line(make_response):
    with pytest.raises(RequestError) as info:
        handle_response(make_response(404, reason="Not Found"))
    assert info.value.message == "API Error: 404 Not Found"
    assert not info.value.is_authorization_error


def test_error_json_without_message_uses_status_line(make_response):
    with pytest.raises(RequestError) as info:
        handle_response(make_response(403, {"error": "nope"}, reason="Forbidden"))
    assert info.value.message == "API Error: 403 Forbidden"
    assert info.value.is_authorization_error


# ----- transport -----
def test_transport_headers_with_and_without_token(fake_session, make_response):
    token = {"value": None}
    transport = ApiTransport("http://api.test/", token_provider=lambda: token["value"], session=fake_session)
    fake_session.queue(make_response(200, []), make_response(200, []))

    transport.get("/api/matches")
    token["value"] = "abc"
    transport.get("api/matches", params={"x": 1}, timeout=3)

    first, second = fake_session.calls
    assert first.url == "http://api.test/api/matches"
    assert first.headers == {"Content-Type": "application/json"}
    assert second.headers["Authorization"] == "Bearer abc"
    assert second.params == {"x": 1}
    assert second.timeout == 3


def test_transport_default_timeout(fake_session, make_response):
    transport = ApiTransport("http://api.test", session=fake_session, timeout=(1, 2))
    fake_session.queue(make_response(200, {}))
    transport.get("/x")
    assert fake_session.calls[0].timeout == (1, 2)


def test_transport_unauthenticated_call_skips_token(fake_session, make_response):
    transport = ApiTransport("http://api.test", token_provider=lambda: "abc", session=fake_session)
    fake_session.queue(make_response(200, {}))
    transport.post("/api/auth/login", json={"username": "bob"}, authenticated=False)
    assert "Authorization" not in fake_session.calls[0].headers
    assert fake_session.calls[0].json == {"username": "bob"}


def test_transport_error_propagates_unchanged(fake_session):
    transport = ApiTransport("http://api.test", session=fake_session)
    boom = requests.ConnectionError("refused")
    fake_session.queue(boom)

    with pytest.raises(requests.ConnectionError) as info:
        transport.get("/api/matches")
    assert info.value is boom

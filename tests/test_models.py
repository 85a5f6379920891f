from datetime import datetime, timezone

from models.comment_model import Comment
from models.event_model import Event
from models.schema import decode_match, decode_matches
from models.user_model import User


# ----- Comment -----
def test_comment_defaults():
    c = Comment.from_json(None)
    assert c.id == ""
    assert c.text == ""
    assert c.created_at is None
    assert c.event_id is None


def test_comment_create_payload_keeps_wire_fields():
    c = Comment.from_json({
        "id": "c9", "text": "What a goal", "createdAt": "2024-05-01T21:00:00Z",
        "userId": "u1", "username": "bob", "userEmail": "b@x.com", "eventId": 436001,
    })

    assert c.create_payload() == {"text": "What a goal", "userId": "u1", "eventId": 436001}
    assert c.to_json()["createdAt"] == "2024-05-01T21:00:00.000Z"


def test_comment_to_json_omits_missing_date():
    assert "createdAt" not in Comment.from_json({"text": "hi"}).to_json()


# ----- User -----
def test_user_defaults_to_user_role():
    u = User.from_json({"id": "u1", "username": "bob"})
    assert u.roles == ["USER"]
    assert u.profile_picture is None
    assert not u.is_admin()


def test_user_roles():
    u = User.from_json({"roles": ["USER", "MODERATOR"]})
    assert u.has_role("USER")
    assert u.is_moderator()
    assert not u.is_admin()
    assert User.from_json({"roles": ["ADMIN"]}).is_admin()


def test_user_display_helpers():
    assert User.from_json({"username": "john smith"}).initials() == "JS"
    assert User.from_json({"username": "bob"}).initials() == "BO"
    assert User.from_json({"email": "x@y.z"}).initials() == "X"
    assert User.from_json({}).initials() == "U"
    assert User.from_json({"email": "x@y.z"}).display_name() == "x@y.z"


def test_user_json_round_trip():
    u = User.from_json({"id": "u1", "username": "bob", "email": "b@x.com", "roles": ["USER"],
                        "createdAt": "2024-01-01T00:00:00Z"})
    again = User.from_json(u.to_json())
    assert again == u
    assert again.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)


# ----- Legacy events -----
def test_event_from_json():
    e = Event.from_json({
        "id": 7,
        "eventType": "MATCH",
        "match": {"id": 99, "home": {"id": 1, "name": "Arsenal"}, "away": None},
        "date": "2024-03-03T15:00:00Z",
        "comments": [{"id": "c1", "text": "hi", "eventId": 7}],
        "commentCount": 1,
    })

    assert e.match.home.name == "Arsenal"
    assert e.match.away is None
    assert e.comments[0].event_id == 7
    assert e.comment_count == 1
    assert e.description() == "Arsenal vs TBD"


def test_event_defaults():
    e = Event.from_json({})
    assert e.match is None
    assert e.comments == []
    assert e.comment_count == 0


# ----- Strict decoding -----
def test_decode_match_valid_payload(match_json):
    result = decode_match(match_json)
    assert result.ok
    assert result.record.id == 436001


def test_decode_match_reports_wrong_types():
    result = decode_match({"id": "abc", "homeTeam": "Chelsea", "score": {"fullTime": {"home": "2"}}})

    assert not result.ok
    assert "id: Input should be a valid integer" in result.errors
    assert "score.fullTime.home: Input should be a valid integer" in result.errors
    assert [e for e in result.errors if e.startswith("homeTeam: ")]
    # the lenient record is still produced
    assert result.record.home_team_name() == "TBD"


def test_decode_matches_indexes_errors(match_json):
    records, errors = decode_matches([match_json, {"comments": 3}])
    assert len(records) == 2
    assert errors == ["[1].comments: Input should be a valid list"]
    assert decode_matches({"not": "a list"}) == ([], ["matches: Input should be a valid list"])


def test_decode_match_checks_dates_and_nested_lists():
    result = decode_match({"utcDate": "not a date", "comments": [{"id": "c1"}, {"text": 5}]})

    assert [e.split(":")[0] for e in result.errors] == ["utcDate", "comments[1].text"]
    assert result.record.utc_date is None
    assert result.record.comments[1].text == "5"


def test_decode_match_allows_unknown_fields_and_nulls():
    assert decode_match({"id": 1, "homeTeam": None, "venue": "Stamford Bridge"}).ok
    assert decode_match("nope").errors[0].startswith("match: ")

import pandas as pd
import pytest

from common.errors import RequestError, ValidationError
from controllers.comment_controller import CommentController
from controllers.data_controller import FRAME_COLUMNS, load_match, load_matches, matches_frame, submit_comment_and_refresh
from controllers.stats_controller import competition_counts, stats_frame, status_counts
from models.match_model import Match
from models.user_model import User
from store.session_store import RequestState


@pytest.fixture(name="signed_in")
def signed_in_fixture(store, persistence):
    persistence.store_token("abc")
    store.set_user(User.from_json({"id": "u1", "username": "bob", "roles": ["USER"]}))
    return store


@pytest.fixture(name="comment_controller")
def comment_controller_fixture(clients, store):
    return CommentController(clients.comments, store)


# ----- data controller -----
@pytest.mark.parametrize("view, path", [
    ("All", "/api/matches"),
    ("Today", "/api/matches/today"),
    ("Upcoming", "/api/matches/upcoming"),
    ("Finished", "/api/matches/finished"),
    ("Nope", "/api/matches"),
])
def test_load_matches_views(clients, fake_session, make_response, view, path):
    fake_session.queue(make_response(200, []))
    state = RequestState()
    assert load_matches(clients, state, view) == []
    assert fake_session.calls[0].url == "http://api.test" + path
    assert state.is_loading is False


def test_load_match_failure_sets_state_error(clients, fake_session, make_response):
    fake_session.queue(make_response(404, {"message": "Match not found"}, reason="Not Found"))
    state = RequestState()
    with pytest.raises(RequestError):
        load_match(clients, state, 9)
    assert state.error == "Match not found"


def test_submit_comment_then_refetch(signed_in, comment_controller, clients, fake_session, make_response,
                                     match_json):
    fake_session.queue(
        make_response(201, {"id": "c2", "text": "Nice", "userId": "u1", "eventId": 436001}, reason="Created"),
        make_response(200, match_json),
    )
    state = RequestState()

    comment, match = submit_comment_and_refresh(comment_controller, clients, state, 436001, "  Nice ")

    post, get = fake_session.calls
    assert post.method == "POST"
    assert post.json == {"text": "Nice", "userId": "u1", "eventId": 436001}
    assert get.method == "GET"
    assert get.url == "http://api.test/api/matches/436001"
    assert comment.id == "c2"
    assert match.id == 436001


def test_submit_comment_failure_skips_refetch(signed_in, comment_controller, clients, fake_session,
                                              make_response):
    fake_session.queue(make_response(401, {"message": "Unauthorized"}, reason="Unauthorized"))
    state = RequestState()

    with pytest.raises(RequestError):
        submit_comment_and_refresh(comment_controller, clients, state, 436001, "Nice")

    assert len(fake_session.calls) == 1
    assert state.error == "Unauthorized"


def test_matches_frame(match_json):
    df = matches_frame([Match.from_json(match_json), Match.from_json({})])

    assert list(df.columns) == FRAME_COLUMNS
    assert pd.api.types.is_datetime64_any_dtype(df["Date"])
    assert df.loc[0, "Home"] == "Chelsea FC"
    assert df.loc[0, "Comments"] == 1
    assert pd.isna(df.loc[1, "Date"])
    assert df.loc[1, "Away"] == "TBD"


def test_matches_frame_empty():
    df = matches_frame([])
    assert list(df.columns) == FRAME_COLUMNS
    assert df.empty


# ----- comment controller -----
def test_comment_requires_login(comment_controller, fake_session):
    with pytest.raises(ValidationError, match="must be logged in"):
        comment_controller.create_authenticated_comment("hi", 1)
    assert fake_session.calls == []


def test_comment_validation_runs_first(signed_in, comment_controller, fake_session):
    with pytest.raises(ValidationError, match="Comment cannot be empty."):
        comment_controller.create_authenticated_comment("   ", 1)
    assert fake_session.calls == []


def test_can_modify_comment(store, comment_controller):
    assert not comment_controller.can_modify_comment("u1")

    store.set_user(User.from_json({"id": "u1", "roles": ["USER"]}))
    assert comment_controller.can_modify_comment("u1")
    assert not comment_controller.can_modify_comment("u2")

    store.set_user(User.from_json({"id": "a1", "roles": ["ADMIN"]}))
    assert comment_controller.can_modify_comment("u2")


# ----- stats -----
def test_stats_frame_flattens_nested_keys():
    df = stats_frame({"total": 10, "byStatus": {"FINISHED": 7}})
    assert df.to_dict("records") == [
        {"Metric": "total", "Value": "10"},
        {"Metric": "byStatus.FINISHED", "Value": "7"},
    ]
    assert stats_frame({}).empty


def test_status_counts_orders_known_first():
    matches = [Match.from_json({"status": s}) for s in ["FINISHED", "FINISHED", "TIMED", "ABANDONED"]]
    df = status_counts(matches)

    counts = dict(zip(df["Status"], df["Matches"]))
    assert counts["FINISHED"] == 2
    assert counts["TIMED"] == 1
    assert counts["IN_PLAY"] == 0
    assert df["Status"].iloc[-1] == "ABANDONED"
    assert counts["ABANDONED"] == 1


def test_status_counts_empty():
    df = status_counts([])
    assert df["Matches"].sum() == 0


def test_competition_counts(match_json):
    matches = [Match.from_json(match_json), Match.from_json(match_json), Match.from_json({})]
    df = competition_counts(matches)
    assert df.to_dict("records") == [
        {"Competition": "Premier League", "Matches": 2},
        {"Competition": "Unknown", "Matches": 1},
    ]
    assert competition_counts([]).empty

"""
Data controller helpers that glue the API clients to the Streamlit pages.

This module exposes the calls pages make:
    - `load_matches(clients, state, view)` fetches one of the match lists
        shown as tabs on Home.
    - `load_match(clients, state, match_id)` fetches a single match.
    - `submit_comment_and_refresh(...)` posts a comment and, once the backend
        has answered, fetches the match again so the new comment shows.
    - `matches_frame(matches)` turns match records into the DataFrame the
        Home table renders.

Every network call goes through `execute_with_loading`, so `state` always
reflects the last call (loading flag, error message).
"""

import pandas as pd
from typing import Dict, List, Sequence, Tuple

from clients.api import ApiClients
from controllers.comment_controller import CommentController
from models.comment_model import Comment
from models.match_model import Match
from store.session_store import RequestState, execute_with_loading

# Home tab label -> MatchClient method
MATCH_VIEWS: Dict[str, str] = {
    "All": "get_matches",
    "Today": "get_today_matches",
    "Upcoming": "get_upcoming_matches",
    "Finished": "get_finished_matches",
}

FRAME_COLUMNS = ["MatchId", "Date", "Competition", "Home", "Score", "Away", "Status", "Comments"]


def load_matches(clients: ApiClients, state: RequestState, view: str = "All") -> List[Match]:
    method = getattr(clients.matches, MATCH_VIEWS.get(view, "get_matches"))
    return execute_with_loading(state, method)


def load_match(clients: ApiClients, state: RequestState, match_id: int) -> Match:
    return execute_with_loading(state, clients.matches.get_match_by_id, match_id)


def submit_comment_and_refresh(
    comments: CommentController,
    clients: ApiClients,
    state: RequestState,
    match_id: int,
    text: str,
) -> Tuple[Comment, Match]:
    comment = execute_with_loading(state, comments.create_authenticated_comment, text, match_id)
    match = load_match(clients, state, match_id)
    return comment, match


def matches_frame(matches: Sequence[Match]) -> pd.DataFrame:
    rows = []
    for m in matches:
        rows.append({
            "MatchId": m.id,
            "Date": m.utc_date,
            "Competition": m.competition_name(),
            "Home": m.home_team_name(),
            "Score": m.score_display(),
            "Away": m.away_team_name(),
            "Status": m.status,
            "Comments": m.comment_count(),
        })

    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    # Missing kickoff dates become NaT so the column keeps a datetime dtype.
    df["Date"] = pd.to_datetime(df["Date"], errors="coerce", utc=True)
    return df

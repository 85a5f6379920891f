import requests
import streamlit as st

from clients.api import ApiClients
from common.errors import RequestError, ValidationError
from common.ui import get_clients, get_request_state, guard_page, selected_match_id, show_error, sidebar_header
from controllers.access_controller import Requirement
from controllers.comment_controller import CommentController
from controllers.data_controller import load_match, submit_comment_and_refresh
from models.match_model import Match

st.set_page_config(page_title="Matchlog — Match", layout="wide")


def _ensure_match_selected() -> int:
    match_id = selected_match_id()
    if match_id is None:
        st.info("Go to **Matches** to select a match first.")
        st.stop()
    return match_id


def _render_header(match: Match):
    st.header(match.description())
    cols = st.columns([1, 2, 1])
    with cols[0]:
        if match.home_team and match.home_team.crest:
            st.image(match.home_team.crest, width=64)
        st.markdown(f"**{match.home_team_name()}**")
    with cols[1]:
        st.markdown(f"<h2 style='text-align:center'>{match.score_display()}</h2>", unsafe_allow_html=True)
        if match.score and match.score.half_time and match.score.half_time.home is not None:
            ht = match.score.half_time
            st.caption(f"Half time: {ht.home} - {ht.away}")
    with cols[2]:
        if match.away_team and match.away_team.crest:
            st.image(match.away_team.crest, width=64)
        st.markdown(f"**{match.away_team_name()}**")

    details = [
        f"**Status:** {match.status}",
        f"**Date:** {match.formatted_date() or 'TBD'}",
    ]
    if match.competition:
        details.append(f"**Competition:** {match.competition.name}")
    if match.matchday:
        details.append(f"**Matchday:** {match.matchday}")
    if match.stage:
        details.append(f"**Stage:** {match.stage}")
    if match.group:
        details.append(f"**Group:** {match.group}")
    st.caption("  |  ".join(details))


def _render_comments(match: Match, comments: CommentController, clients: ApiClients):
    st.subheader(f"Comments ({match.comment_count()})")
    for c in match.comments:
        with st.container(border=True):
            st.markdown(f"**{c.username or 'anonymous'}** · {c.formatted_date()}")
            st.write(c.text)

    state = get_request_state("comment_form")
    with st.form("comment_form", clear_on_submit=True):
        text = st.text_area("Add a comment", max_chars=1000)
        ok = st.form_submit_button("Post comment")

    if ok:
        try:
            submit_comment_and_refresh(comments, clients, state, match.id, text)
        except (ValidationError, RequestError, requests.RequestException):
            show_error(state)
        else:
            st.rerun()


def main():
    store = guard_page(Requirement.AUTHENTICATED, f"/match/{st.session_state.get('selected_match_id', '')}")
    sidebar_header(store)
    match_id = _ensure_match_selected()
    clients = get_clients()
    state = get_request_state("match_detail")

    with st.spinner("Loading match..."):
        try:
            match = load_match(clients, state, match_id)
        except (RequestError, requests.RequestException):
            match = None
    show_error(state)
    if match is None:
        st.stop()

    _render_header(match)
    st.divider()
    _render_comments(match, CommentController(clients.comments, store), clients)


if __name__ == "__main__":
    main()

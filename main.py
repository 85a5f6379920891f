"""
Main application entry for the Matchlog Streamlit app.

This module defines the Home page users see when they open the app. It
handles:
    - application configuration (`st.set_page_config`),
    - environment variable loading via `python-dotenv` and logging setup,
    - the session (cookie-backed token and user) and the sidebar, delegated
        to `common.ui`,
    - loading match lists from the API (via `controllers.data_controller`)
        and filtering them locally with the search box.

Selecting a match stores its id in `st.session_state["selected_match_id"]`
and opens the Match page, which requires a signed-in user; anonymous users
are sent to Login first and brought back afterwards.
"""

# Import libraries
import requests
import streamlit as st
from dotenv import load_dotenv

from common.config import get_settings
from common.errors import RequestError
from common.logging_config import setup_logging
from common.ui import get_clients, get_request_state, go_to, guard_page, show_error, sidebar_header
from common.utils import filter_matches, sort_matches
from controllers.access_controller import Requirement
from controllers.data_controller import MATCH_VIEWS, load_matches, matches_frame

# Configure Streamlit page and load environment variables from `.env`.
st.set_page_config(page_title="Matchlog — Matches", layout="wide")
load_dotenv(override=False)
setup_logging(get_settings().log_level)


def main():
    store = guard_page(Requirement.NONE, "/")
    sidebar_header(store)
    clients = get_clients()
    state = get_request_state("home")

    st.title("⚽ Matchlog — Matches")
    st.caption("Browse fixtures and results. Open a match to read and post comments.")

    view = st.radio("Show", list(MATCH_VIEWS.keys()), horizontal=True, key="home_view")
    query = st.text_input("Search teams or competitions", key="home_query",
                          placeholder="e.g. Chelsea, Premier League, PL")

    with st.spinner("Loading matches..."):
        try:
            matches = load_matches(clients, state, view)
        except (RequestError, requests.RequestException):
            matches = []
    show_error(state)

    if not matches:
        if not state.error:
            st.info("No matches retrieved from the API.")
        return

    shown = sort_matches(filter_matches(matches, query), descending=(view == "Finished"))
    st.caption(f"{len(shown)} of {len(matches)} matches")
    if not shown:
        st.info("No matches match your search.")
        return

    df = matches_frame(shown)
    st.dataframe(df.drop(columns=["MatchId"]), use_container_width=True, hide_index=True)

    # Match picker below the table
    labels = {f'{m.description()} | {m.formatted_date() or "date TBD"} (#{m.id})': m.id for m in shown if m.id is not None}
    choice = st.selectbox("Open a match", options=list(labels.keys()), index=None,
                          placeholder="Choose a match to see its details and comments")
    if choice and st.button("Open match", type="primary"):
        go_to(f"/match/{labels[choice]}")


if __name__ == "__main__":
    main()

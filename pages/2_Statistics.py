import requests
import streamlit as st

from common.errors import RequestError
from common.plots import plot_counts
from common.ui import get_clients, get_request_state, guard_page, show_error, sidebar_header
from controllers.access_controller import Requirement
from controllers.data_controller import load_matches
from controllers.stats_controller import competition_counts, stats_frame, status_counts
from store.session_store import execute_with_loading

st.set_page_config(page_title="Matchlog — Statistics", layout="wide")


def main():
    store = guard_page(Requirement.NONE, "/stats")
    sidebar_header(store)
    clients = get_clients()
    state = get_request_state("stats")

    st.header("📊 Match statistics")

    with st.spinner("Loading statistics..."):
        try:
            stats = execute_with_loading(state, clients.matches.get_match_stats)
            matches = load_matches(clients, state, "All")
        except (RequestError, requests.RequestException):
            stats, matches = {}, []
    show_error(state)

    left, right = st.columns(2)
    with left:
        st.subheader("By status")
        st.pyplot(plot_counts(status_counts(matches), "Status", title="Matches per status"))
    with right:
        st.subheader("By competition")
        st.pyplot(plot_counts(competition_counts(matches).head(10), "Competition", title="Top competitions"))

    st.subheader("Backend summary")
    df = stats_frame(stats)
    if df.empty:
        st.info("The backend returned no statistics.")
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)


if __name__ == "__main__":
    main()

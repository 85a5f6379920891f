# common/ui.py
from __future__ import annotations
from typing import Optional

import extra_streamlit_components as stx
import streamlit as st
from dotenv import load_dotenv

from clients.api import ApiClients, build_clients
from common.config import get_settings
from common.logging_config import setup_logging
from controllers.access_controller import Outcome, Requirement, decide
from controllers.auth_controller import AuthController
from store.key_value import CookieKeyValueStore
from store.session_store import RequestState, SessionPersistence, SessionStore


# Unique key for the cookie component (must not collide in one run)
CM_KEY = "matchlog_cookie_component"

PAGES = {
    "/": "main.py",
    "/match": "pages/1_Match_Detail.py",
    "/stats": "pages/2_Statistics.py",
    "/login": "pages/3_Login.py",
    "/register": "pages/4_Register.py",
}


def safe_rerun() -> None:
    if hasattr(st, "rerun"): st.rerun()
    elif hasattr(st, "experimental_rerun"): st.experimental_rerun()
    else: st.stop()


def get_session_store() -> SessionStore:
    """
    One SessionStore (and one set of API clients) per browser session.

    The CookieManager has to be rendered on every run, so the cookie store is
    re-attached to the fresh component each time. Cookies usually arrive one
    run after the component loads; until the user is signed in we retry the
    restore from cookies.

    Call it once per script run: each call renders the component, and a
    second render with the same key is rejected by Streamlit.
    """
    cm = stx.CookieManager(key=CM_KEY)
    if "session_store" not in st.session_state:
        load_dotenv(override=False)  # pages can be opened directly, before main.py runs
        settings = get_settings()
        setup_logging(settings.log_level)
        persistence = SessionPersistence(CookieKeyValueStore(cm, settings.cookie_days))
        st.session_state["session_store"] = SessionStore(persistence)
        st.session_state["api_clients"] = build_clients(settings, persistence)
        st.session_state["verify_pending"] = settings.verify_on_boot

    store: SessionStore = st.session_state["session_store"]
    store.persistence.store.attach(cm)
    if not store.check_auth():
        store.restore()

    if st.session_state.pop("verify_pending", False) and store.check_auth():
        get_auth_controller().verify_session()
    return store


def get_clients() -> ApiClients:
    # The CookieManager may be rendered only once per run; `guard_page` has
    # normally done that already.
    if "api_clients" not in st.session_state:
        get_session_store()
    return st.session_state["api_clients"]


def get_auth_controller() -> AuthController:
    store = st.session_state["session_store"]
    return AuthController(st.session_state["api_clients"].auth, store)


def get_request_state(page_key: str) -> RequestState:
    """Per-page loading/error holder kept across reruns."""
    key = f"request_state_{page_key}"
    if key not in st.session_state:
        st.session_state[key] = RequestState()
    return st.session_state[key]


def go_to(path: str) -> None:
    """Switch to the page serving `path` ('/match/12' selects match 12)."""
    parts = [p for p in path.split("?", 1)[0].split("/") if p]
    if len(parts) == 2 and parts[0] == "match":
        st.session_state["selected_match_id"] = parts[1]
        st.switch_page(PAGES["/match"])
    st.switch_page(PAGES.get("/" + "/".join(parts), PAGES["/"]))


def guard_page(requirement: Requirement, path: str) -> SessionStore:
    """Run the access rules for this page; redirects stop the current run."""
    store = get_session_store()
    decision = decide(requirement, store.check_auth(), path)
    if decision.outcome is Outcome.REDIRECT_LOGIN:
        st.session_state["login_redirect"] = decision.query["redirect"]
        st.switch_page(PAGES["/login"])
    elif decision.outcome is Outcome.REDIRECT_HOME:
        st.switch_page(PAGES["/"])
    return store


def show_error(state: RequestState) -> None:
    if state.error:
        st.error(state.error)


def sidebar_header(store: SessionStore, show_custom_nav: bool = True):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    user = store.get_user()
    with st.sidebar:
        st.markdown("**Signed in as:** " + (user.display_name() if user else "—"))
        if store.check_auth():
            if st.button("Logout", key="logout_btn"):
                get_auth_controller().logout()
                for k in ("selected_match_id", "login_redirect"):
                    st.session_state.pop(k, None)
                safe_rerun()

        if show_custom_nav:
            st.divider()
            st.markdown("#### Pages")
            st.page_link(PAGES["/"], label="Matches", icon="🏠")
            st.page_link(PAGES["/stats"], label="Statistics", icon="📊")
            if not store.check_auth():
                st.page_link(PAGES["/login"], label="Login", icon="🔑")
                st.page_link(PAGES["/register"], label="Register", icon="📝")


def selected_match_id() -> Optional[int]:
    raw = st.session_state.get("selected_match_id")
    try:
        return int(raw) if raw is not None else None
    except (TypeError, ValueError):
        return None

import requests
import streamlit as st

from common.errors import RequestError, ValidationError
from common.ui import PAGES, get_auth_controller, go_to, guard_page, show_error, sidebar_header
from controllers.access_controller import Requirement

st.set_page_config(page_title="Matchlog — Login", layout="centered")


def main():
    store = guard_page(Requirement.GUEST, "/login")
    sidebar_header(store)

    st.markdown("## Login")
    redirect = st.session_state.get("login_redirect")
    if redirect:
        st.caption("Please sign in to continue.")

    with st.form("login_form", clear_on_submit=False):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        ok = st.form_submit_button("Login")

    if ok:
        try:
            get_auth_controller().login(username, password)
        except ValidationError as exc:
            st.error(str(exc))
        except (RequestError, requests.RequestException):
            show_error(store)
        else:
            st.session_state.pop("login_redirect", None)
            go_to(redirect or "/")

    st.page_link(PAGES["/register"], label="No account yet? Register", icon="📝")


if __name__ == "__main__":
    main()

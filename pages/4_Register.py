import requests
import streamlit as st

from common.constants import MIN_PASSWORD_LENGTH
from common.errors import RequestError, ValidationError
from common.ui import PAGES, get_auth_controller, go_to, guard_page, show_error, sidebar_header
from controllers.access_controller import Requirement

st.set_page_config(page_title="Matchlog — Register", layout="centered")


def main():
    store = guard_page(Requirement.GUEST, "/register")
    sidebar_header(store)

    st.markdown("## Create an account")
    with st.form("register_form", clear_on_submit=False):
        username = st.text_input("Username")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password",
                                 help=f"At least {MIN_PASSWORD_LENGTH} characters.")
        confirm = st.text_input("Confirm password", type="password")
        ok = st.form_submit_button("Register")

    if ok:
        try:
            get_auth_controller().register(username, email, password, confirm)
        except ValidationError as exc:
            st.error(str(exc))
        except (RequestError, requests.RequestException):
            show_error(store)
        else:
            go_to(st.session_state.pop("login_redirect", None) or "/")

    st.page_link(PAGES["/login"], label="Already registered? Login", icon="🔑")


if __name__ == "__main__":
    main()

"""
Login, registration and logout flows used by the pages.

The controller composes `AuthClient` calls with the `SessionStore`:

    - `login()` runs two steps, each wrapped by `execute_with_loading`:
        1) POST credentials (the token is stored by the client),
        2) GET the profile and put the user in the session.
      If step 2 fails the token stays stored and `load_profile()` can be
      retried on its own.
    - `register()` creates the account and then runs `login()`.
    - `logout()` clears the stored token/user and the session; no request.
    - `refresh_user()` / `verify_session()` re-read the profile; any failure
      ends the session (full logout) instead of leaving it half valid.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from clients.auth_client import AuthClient
from common.validation import validate_login, validate_registration
from models.user_model import User
from store.session_store import SessionStore, execute_with_loading

logger = logging.getLogger(__name__)


class AuthController:
    def __init__(self, auth_client: AuthClient, store: SessionStore):
        self.auth = auth_client
        self.store = store

    def login(self, username: str, password: str) -> dict:
        username, password = validate_login(username, password)
        result = execute_with_loading(self.store, self.auth.login, username, password)
        self.load_profile()
        logger.info("User %s logged in", username)
        return result

    def load_profile(self) -> User:
        user = execute_with_loading(self.store, self.auth.get_current_user)
        self.store.set_user(user)
        return user

    def register(self, username: str, email: str, password: str, confirm_password: str,
                 roles: Optional[List[str]] = None) -> User:
        username, email, password = validate_registration(username, email, password, confirm_password)
        new_user = execute_with_loading(self.store, self.auth.register, username, email, password, roles)
        self.login(username, password)
        return new_user

    def logout(self) -> None:
        self.auth.logout()
        self.store.clear_user()

    def refresh_user(self) -> Optional[User]:
        if not self.store.check_auth():
            return None
        try:
            return self.load_profile()
        except Exception:
            logger.info("Profile refresh failed; logging out")
            self.logout()
            return None

    def verify_session(self) -> bool:
        """Validate the boot-time session against the backend."""
        if not self.auth.is_authenticated():
            self.store.clear_user()
            return False
        return self.refresh_user() is not None

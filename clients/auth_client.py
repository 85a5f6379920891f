"""
Client for the `/api/auth` endpoints.

    - `register()` creates an account; no token is issued and the session is
        left untouched.
    - `login()` exchanges credentials for a bearer token and stores it.
    - `get_current_user()` reads the profile for the stored token and stores
        the user next to it.
    - `logout()` is local only: it forgets the token and user.

Fetching the profile after `login()` is the caller's job
(`AuthController.login`), so the two steps can fail and be retried
independently.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from common.constants import AUTH_PATH, DEFAULT_ROLES
from common.utils import ApiTransport, Timeout, as_dict
from models.user_model import User
from store.session_store import SessionPersistence

logger = logging.getLogger(__name__)


class AuthClient:
    def __init__(self, transport: ApiTransport, persistence: SessionPersistence):
        self.transport = transport
        self.persistence = persistence

    def register(self, username: str, email: str, password: str, roles: Optional[List[str]] = None,
                 timeout: Optional[Timeout] = None) -> User:
        payload = {
            "username": username,
            "email": email,
            "password": password,
            "roles": roles or list(DEFAULT_ROLES),
        }
        try:
            data = self.transport.post(f"{AUTH_PATH}/register", json=payload, timeout=timeout,
                                       authenticated=False)
        except Exception as exc:
            logger.error("Registration error: %s", exc)
            raise
        return User.from_json(data)

    def login(self, username: str, password: str, timeout: Optional[Timeout] = None) -> Dict[str, Optional[str]]:
        payload = {"username": username, "password": password}
        try:
            data = self.transport.post(f"{AUTH_PATH}/login", json=payload, timeout=timeout,
                                       authenticated=False)
        except Exception as exc:
            logger.error("Login error: %s", exc)
            raise

        token = as_dict(data).get("token") or None
        if token:
            self.persistence.store_token(token)
        else:
            logger.warning("Login response carried no token")
        return {"token": token}

    def get_current_user(self, timeout: Optional[Timeout] = None) -> User:
        try:
            data = self.transport.get(f"{AUTH_PATH}/me", timeout=timeout)
        except Exception as exc:
            logger.error("Error fetching current user: %s", exc)
            raise
        user = User.from_json(data)
        self.persistence.store_user(user)
        return user

    def logout(self) -> None:
        self.persistence.clear()

    def is_authenticated(self) -> bool:
        """True when a token is stored; the backend is not consulted."""
        return bool(self.persistence.get_token())

    def verify_token(self, timeout: Optional[Timeout] = None) -> bool:
        """Check the stored token against `/me`; on any failure log out."""
        if not self.is_authenticated():
            return False
        try:
            self.get_current_user(timeout=timeout)
        except Exception:
            logger.info("Stored token rejected; clearing session")
            self.logout()
            return False
        return True

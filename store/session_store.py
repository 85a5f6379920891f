"""
Authenticated-session state for one browser session.

Two pieces live here:
    - `SessionPersistence`: reads and writes the bearer token and the
        serialized user in a key-value store (cookies in the app).
    - `SessionStore`: the in-memory record `{user, is_authenticated,
        is_loading, error}` that pages read. It is built explicitly and passed
        to whoever needs it; `common.ui.get_session_store()` keeps one per
        browser session in `st.session_state`.

Boot behaviour: when both a token and a stored user are present, the store
starts authenticated without asking the backend. A stale token therefore
looks valid until the first protected call fails, or until
`AuthController.verify_session()` runs.

`execute_with_loading` is the wrapper pages use around API calls so the
loading flag and error message stay in sync with the call.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from common.constants import TOKEN_KEY, USER_KEY
from models.user_model import User
from .key_value import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SessionPersistence:
    def __init__(self, store: KeyValueStore):
        self.store = store

    # ----- token -----
    def store_token(self, token: str) -> None:
        self.store.set(TOKEN_KEY, token)

    def get_token(self) -> Optional[str]:
        return self.store.get(TOKEN_KEY) or None

    def remove_token(self) -> None:
        self.store.delete(TOKEN_KEY)

    # ----- user -----
    def store_user(self, user: User) -> None:
        self.store.set(USER_KEY, json.dumps(user.to_json()))

    def get_stored_user(self) -> Optional[User]:
        raw = self.store.get(USER_KEY)
        if not raw:
            return None
        try:
            # Some cookie backends hand back already-decoded JSON.
            data = raw if isinstance(raw, dict) else json.loads(raw)
        except (TypeError, ValueError):
            logger.error("Error parsing stored user data", exc_info=True)
            return None
        if not isinstance(data, dict):
            logger.error("Stored user data is not an object: %r", type(data).__name__)
            return None
        return User.from_json(data)

    def remove_user(self) -> None:
        self.store.delete(USER_KEY)

    def clear(self) -> None:
        self.remove_token()
        self.remove_user()


@dataclass(frozen=True)
class SessionSnapshot:
    user: Optional[User]
    is_authenticated: bool
    is_loading: bool
    error: Optional[str]


class RequestState:
    """Loading flag and error message for one screen."""

    def __init__(self):
        self.is_loading = False
        self.error: Optional[str] = None

    def set_loading(self, loading: bool) -> None:
        self.is_loading = bool(loading)

    def set_error(self, error: Optional[str]) -> None:
        self.error = error

    def clear_error(self) -> None:
        self.error = None


class SessionStore(RequestState):
    def __init__(self, persistence: SessionPersistence):
        super().__init__()
        self.persistence = persistence
        self.user: Optional[User] = None
        self.is_authenticated = False
        self.restore()

    def restore(self) -> bool:
        """Seed the session from persisted token + user; no network call."""
        token = self.persistence.get_token()
        user = self.persistence.get_stored_user()
        if token and user is not None:
            self.set_user(user)
            return True
        return False

    # ----- mutations -----
    def set_user(self, user: Optional[User]) -> None:
        self.user = user
        self.is_authenticated = user is not None

    def clear_user(self) -> None:
        self.user = None
        self.is_authenticated = False

    # ----- reads -----
    def get_user(self) -> Optional[User]:
        return self.user

    def check_auth(self) -> bool:
        return self.is_authenticated

    def get_user_id(self) -> Optional[str]:
        return (self.user.id if self.user else None) or None

    def get_username(self) -> Optional[str]:
        return (self.user.username if self.user else None) or None

    def get_user_email(self) -> Optional[str]:
        return (self.user.email if self.user else None) or None

    def has_role(self, role: str) -> bool:
        return bool(self.user and self.user.has_role(role))

    def is_admin(self) -> bool:
        return bool(self.user and self.user.is_admin())

    def is_moderator(self) -> bool:
        return bool(self.user and self.user.is_moderator())

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            user=self.user,
            is_authenticated=self.is_authenticated,
            is_loading=self.is_loading,
            error=self.error,
        )


def execute_with_loading(state: RequestState, call: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run `call` with the loading flag raised.

    The previous error is cleared first; a failure stores its message on
    `state` and is re-raised so the caller can react too. The loading flag is
    always reset.
    """
    state.set_loading(True)
    state.clear_error()
    try:
        return call(*args, **kwargs)
    except Exception as exc:
        state.set_error(str(exc) or "An error occurred")
        raise
    finally:
        state.set_loading(False)

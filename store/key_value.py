"""
Key-value backends for persisted session state.

The session keeps two string entries (bearer token and serialized user).
In the app they live in browser cookies through the
`extra_streamlit_components.CookieManager` component; tests and scripts use
the in-memory store.
"""

from __future__ import annotations
import logging
from datetime import timedelta
from typing import Any, Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class CookieKeyValueStore:
    """
    Cookie-backed store.

    `cookie_manager` is an `extra_streamlit_components.CookieManager`. Writes
    only reach the browser after the current Streamlit run, so they are also
    kept in a local overlay that `get` reads first.
    """

    def __init__(self, cookie_manager: Any, max_age_days: int = 7):
        self._cm = cookie_manager
        self._max_age = int(timedelta(days=max_age_days).total_seconds())
        self._overlay: Dict[str, Optional[str]] = {}

    def attach(self, cookie_manager: Any) -> None:
        """Swap in the CookieManager rendered by the current Streamlit run."""
        self._cm = cookie_manager

    def get(self, key: str) -> Optional[str]:
        if key in self._overlay:
            return self._overlay[key]
        try:
            value = self._cm.get(key)
        except Exception:
            logger.warning("Could not read cookie %s", key, exc_info=True)
            return None
        return value if value not in ("", None) else None

    def set(self, key: str, value: str) -> None:
        self._overlay[key] = value
        # Each component call needs its own widget key within one run.
        self._cm.set(key, value, max_age=self._max_age, key=f"set_{key}")

    def delete(self, key: str) -> None:
        self._overlay[key] = None
        try:
            self._cm.delete(key, key=f"delete_{key}")
        except KeyError:
            # CookieManager raises KeyError when the cookie was never set.
            pass

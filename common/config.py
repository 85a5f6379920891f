"""
Runtime configuration read from environment variables.

Values come from the process environment; the Streamlit entry point calls
`load_dotenv(override=False)` first so a local `.env` file can provide them.
`get_settings()` reads the environment every time it is called, which keeps
tests free to monkeypatch variables.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Tuple

from .constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return float(default)


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    connect_timeout: float
    read_timeout: float
    cookie_days: int
    verify_on_boot: bool
    log_level: str
    check_payloads: bool = False

    @property
    def timeout(self) -> Tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)


def get_settings() -> Settings:
    base_url = (
        os.getenv("MATCHLOG_API_BASE_URL")
        or os.getenv("VITE_API_BASE_URL")
        or DEFAULT_API_BASE_URL
    )
    return Settings(
        api_base_url=base_url.rstrip("/"),
        connect_timeout=_env_float("MATCHLOG_CONNECT_TIMEOUT", DEFAULT_TIMEOUT[0]),
        read_timeout=_env_float("MATCHLOG_READ_TIMEOUT", DEFAULT_TIMEOUT[1]),
        cookie_days=int(_env_float("MATCHLOG_COOKIE_DAYS", 7)),
        verify_on_boot=_env_bool("MATCHLOG_VERIFY_ON_BOOT"),
        log_level=os.getenv("MATCHLOG_LOG_LEVEL", "INFO").upper(),
        check_payloads=_env_bool("MATCHLOG_CHECK_PAYLOADS"),
    )

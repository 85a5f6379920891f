"""
Form checks run before any request is sent.

Each function returns the cleaned value(s) or raises `ValidationError` with
the message the page shows under the form.
"""

from __future__ import annotations
import re
from typing import Tuple

from .constants import MAX_COMMENT_LENGTH, MIN_PASSWORD_LENGTH
from .errors import ValidationError

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_comment_text(text: str) -> str:
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValidationError("Comment cannot be empty.")
    if len(cleaned) > MAX_COMMENT_LENGTH:
        raise ValidationError(f"Comment must be at most {MAX_COMMENT_LENGTH} characters.")
    return cleaned


def validate_login(username: str, password: str) -> Tuple[str, str]:
    username = (username or "").strip()
    if not username or not password:
        raise ValidationError("Please enter both username and password.")
    return username, password


def validate_registration(username: str, email: str, password: str, confirm_password: str) -> Tuple[str, str, str]:
    username = (username or "").strip()
    email = (email or "").strip()
    if not username:
        raise ValidationError("Username is required.")
    if not EMAIL_RE.match(email):
        raise ValidationError("Please enter a valid email address.")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
    if password != confirm_password:
        raise ValidationError("Passwords do not match.")
    return username, email, password

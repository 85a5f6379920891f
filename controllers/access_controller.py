"""
Page access rules.

`decide()` is called before a page renders. It only looks at the page's
requirement and the session's `is_authenticated` flag; it never calls the
backend. `common.ui.guard_page()` turns the decision into a Streamlit page
switch.

    requirement      authenticated   outcome
    NONE             any             ALLOWED
    AUTHENTICATED    False           REDIRECT_LOGIN (?redirect=<path>)
    AUTHENTICATED    True            ALLOWED
    GUEST            True            REDIRECT_HOME
    GUEST            False           ALLOWED
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

LOGIN_PATH = "/login"
HOME_PATH = "/"


class Requirement(str, Enum):
    NONE = "none"
    AUTHENTICATED = "requires_auth"
    GUEST = "requires_guest"


class Outcome(str, Enum):
    ALLOWED = "allowed"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_HOME = "redirect_home"


@dataclass(frozen=True)
class AccessDecision:
    outcome: Outcome
    path: Optional[str] = None                  # where to go when redirecting
    query: Optional[Dict[str, str]] = None      # e.g. {"redirect": "/match/12"}

    @property
    def allowed(self) -> bool:
        return self.outcome is Outcome.ALLOWED


def decide(requirement: Requirement, is_authenticated: bool, target_path: str) -> AccessDecision:
    if requirement is Requirement.AUTHENTICATED and not is_authenticated:
        return AccessDecision(Outcome.REDIRECT_LOGIN, LOGIN_PATH, {"redirect": target_path})
    if requirement is Requirement.GUEST and is_authenticated:
        return AccessDecision(Outcome.REDIRECT_HOME, HOME_PATH)
    return AccessDecision(Outcome.ALLOWED)


# (path pattern, page name, requirement)
ROUTES: List[Tuple[str, str, Requirement]] = [
    (r"/", "Home", Requirement.NONE),
    (r"/about", "About", Requirement.NONE),
    (r"/stats", "Statistics", Requirement.NONE),
    (r"/login", "Login", Requirement.GUEST),
    (r"/register", "Register", Requirement.GUEST),
    (r"/match/[^/]+", "MatchDetail", Requirement.AUTHENTICATED),
]


def requirement_for(path: str) -> Requirement:
    """Requirement of the first route matching `path`; unknown paths need nothing."""
    clean = (path or "/").split("?", 1)[0]
    if len(clean) > 1:
        clean = clean.rstrip("/")
    for pattern, _name, requirement in ROUTES:
        if re.fullmatch(pattern, clean):
            return requirement
    return Requirement.NONE


def decide_for_path(path: str, is_authenticated: bool) -> AccessDecision:
    return decide(requirement_for(path), is_authenticated, path)

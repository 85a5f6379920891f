from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import requests

from common.config import Settings
from common.utils import ApiTransport
from store.session_store import SessionPersistence
from .auth_client import AuthClient
from .comment_client import CommentClient
from .event_client import EventClient
from .match_client import MatchClient


@dataclass(frozen=True)
class ApiClients:
    matches: MatchClient
    events: EventClient
    comments: CommentClient
    auth: AuthClient


def build_clients(settings: Settings, persistence: SessionPersistence,
                  session: Optional[requests.Session] = None) -> ApiClients:
    """Wire every client onto one transport that reads the token from `persistence`."""
    transport = ApiTransport(
        settings.api_base_url,
        token_provider=persistence.get_token,
        timeout=settings.timeout,
        session=session,
    )
    return ApiClients(
        matches=MatchClient(transport, check_payloads=settings.check_payloads),
        events=EventClient(transport),
        comments=CommentClient(transport),
        auth=AuthClient(transport, persistence),
    )

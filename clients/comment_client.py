from __future__ import annotations
import logging
from typing import Optional

from common.constants import COMMENTS_PATH
from common.utils import ApiTransport, Timeout
from models.comment_model import Comment

logger = logging.getLogger(__name__)


class CommentClient:
    def __init__(self, transport: ApiTransport):
        self.transport = transport

    def create_comment(self, text: str, user_id: str, event_id: int,
                       timeout: Optional[Timeout] = None) -> Comment:
        """
        POST a new comment on match `event_id`.

        The bearer token is attached when one is stored. Nothing is checked
        client-side: without a token the backend's 401 comes back as a
        `RequestError`.
        """
        payload = Comment(text=text, user_id=user_id, event_id=event_id).create_payload()
        try:
            data = self.transport.post(COMMENTS_PATH, json=payload, timeout=timeout)
        except Exception as exc:
            logger.error("Error creating comment: %s", exc)
            raise
        return Comment.from_json(data)

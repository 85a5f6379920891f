from __future__ import annotations
from typing import Optional

from clients.comment_client import CommentClient
from common.errors import ValidationError
from common.validation import validate_comment_text
from models.comment_model import Comment
from store.session_store import SessionStore


class CommentController:
    """Comment actions for the signed-in user held by `store`."""

    def __init__(self, comment_client: CommentClient, store: SessionStore):
        self.comments = comment_client
        self.store = store

    def create_authenticated_comment(self, text: str, match_id: int) -> Comment:
        text = validate_comment_text(text)
        user_id = self.store.get_user_id()
        if not self.store.check_auth() or not user_id:
            raise ValidationError("You must be logged in to create a comment")
        return self.comments.create_comment(text=text, user_id=user_id, event_id=match_id)

    def can_modify_comment(self, comment_user_id: Optional[str]) -> bool:
        """Authors can edit their own comments; admins can edit any."""
        user_id = self.store.get_user_id()
        if not self.store.check_auth() or not user_id:
            return False
        return user_id == comment_user_id or self.store.is_admin()

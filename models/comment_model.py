"""
Standalone comment record returned by `POST /api/comments`.

`event_id` is the owning match id. The backend still calls the field
`eventId`, so that is the name used on the wire in both directions.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from common.utils import as_dict, as_text, format_display_date, parse_timestamp, to_iso


@dataclass(frozen=True)
class Comment:
    id: str = ""
    text: str = ""
    created_at: Optional[datetime] = None
    user_id: str = ""
    username: str = ""
    user_email: str = ""
    event_id: Optional[int] = None

    @classmethod
    def from_json(cls, data: Any) -> "Comment":
        d = as_dict(data)
        return cls(
            id=as_text(d.get("id")),
            text=as_text(d.get("text")),
            created_at=parse_timestamp(d.get("createdAt")),
            user_id=as_text(d.get("userId")),
            username=as_text(d.get("username")),
            user_email=as_text(d.get("userEmail")),
            event_id=d.get("eventId") or None,
        )

    def formatted_date(self) -> str:
        return format_display_date(self.created_at)

    def to_json(self) -> dict:
        out = {
            "id": self.id,
            "text": self.text,
            "userId": self.user_id,
            "username": self.username,
            "userEmail": self.user_email,
            "eventId": self.event_id,
        }
        # createdAt is left out entirely when unknown
        if self.created_at is not None:
            out["createdAt"] = to_iso(self.created_at)
        return out

    def create_payload(self) -> dict:
        """Body for `POST /api/comments`; server-assigned fields are left out."""
        return {"text": self.text, "userId": self.user_id, "eventId": self.event_id}

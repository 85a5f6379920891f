from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from common.constants import DEFAULT_ROLES
from common.utils import as_dict, as_text, parse_timestamp, to_iso


@dataclass(frozen=True)
class User:
    id: str = ""
    username: str = ""
    email: str = ""
    roles: List[str] = field(default_factory=lambda: list(DEFAULT_ROLES))
    profile_picture: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_json(cls, data: Any) -> "User":
        d = as_dict(data)
        roles = d.get("roles")
        return cls(
            id=as_text(d.get("id")),
            username=as_text(d.get("username")),
            email=as_text(d.get("email")),
            roles=[str(r) for r in roles] if isinstance(roles, list) else list(DEFAULT_ROLES),
            profile_picture=d.get("profilePicture") or None,
            created_at=parse_timestamp(d.get("createdAt")),
        )

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def is_admin(self) -> bool:
        return self.has_role("ADMIN")

    def is_moderator(self) -> bool:
        return self.has_role("MODERATOR")

    def display_name(self) -> str:
        return self.username or self.email

    def initials(self) -> str:
        """Two letters for the avatar: 'John Smith' -> 'JS', 'bob' -> 'BO'."""
        if self.username:
            parts = self.username.split()
            if len(parts) > 1:
                return (parts[0][0] + parts[-1][0]).upper()
            return self.username[:2].upper()
        return self.email[0].upper() if self.email else "U"

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "roles": list(self.roles),
            "profilePicture": self.profile_picture,
            "createdAt": to_iso(self.created_at),
        }

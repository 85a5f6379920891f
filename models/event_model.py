"""
Legacy event payloads served by `/api/events/*`.

Older backends expose the same fixtures as a flatter "event" shape: a match
with just team ids and names, a date, and the full comment records.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from common.constants import TBD
from common.utils import as_dict, as_list, as_text, parse_timestamp
from .comment_model import Comment


@dataclass(frozen=True)
class EventTeam:
    id: Optional[int] = None
    name: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "EventTeam":
        d = as_dict(data)
        return cls(id=d.get("id") or None, name=as_text(d.get("name")))


@dataclass(frozen=True)
class EventMatch:
    id: Optional[int] = None
    home: Optional[EventTeam] = None
    away: Optional[EventTeam] = None

    @classmethod
    def from_json(cls, data: Any) -> "EventMatch":
        d = as_dict(data)
        return cls(
            id=d.get("id") or None,
            home=EventTeam.from_json(d["home"]) if d.get("home") else None,
            away=EventTeam.from_json(d["away"]) if d.get("away") else None,
        )


@dataclass(frozen=True)
class Event:
    id: Optional[int] = None
    event_type: str = ""
    match: Optional[EventMatch] = None
    date: Optional[datetime] = None
    comments: List[Comment] = field(default_factory=list)
    comment_count: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "Event":
        d = as_dict(data)
        return cls(
            id=d.get("id") or None,
            event_type=as_text(d.get("eventType")),
            match=EventMatch.from_json(d["match"]) if d.get("match") else None,
            date=parse_timestamp(d.get("date")),
            comments=[Comment.from_json(c) for c in as_list(d.get("comments"))],
            comment_count=d.get("commentCount") or 0,
        )

    def description(self) -> str:
        home = self.match.home if self.match else None
        away = self.match.away if self.match else None
        return f"{(home.name if home else '') or TBD} vs {(away.name if away else '') or TBD}"

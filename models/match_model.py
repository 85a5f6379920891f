"""
Match records built from the `/api/matches` payloads.

Every class exposes `from_json(data)`, which accepts whatever the API sent
(missing keys, nulls, wrong types) and fills each field with a safe default,
and `to_json()`, which renders the record back with ISO-8601 dates.

Defaults worth knowing:
    - nested objects (`area`, `competition`, `home_team`, ...) are `None`
        when absent, never an empty object;
    - `comments` is always a list;
    - `TimeScore.home` / `TimeScore.away` are `None` when missing so a real
        0 stays distinguishable;
    - `status` keeps unknown values as-is (the backend may add statuses).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from common.constants import LIVE_STATUSES, TBD, UPCOMING_STATUSES, VS
from common.utils import as_dict, as_list, as_text, format_display_date, parse_timestamp, to_iso


class MatchStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    TIMED = "TIMED"
    IN_PLAY = "IN_PLAY"
    PAUSED = "PAUSED"
    FINISHED = "FINISHED"
    SUSPENDED = "SUSPENDED"
    POSTPONED = "POSTPONED"
    CANCELLED = "CANCELLED"
    AWARDED = "AWARDED"


class ScoreWinner(str, Enum):
    HOME_TEAM = "HOME_TEAM"
    AWAY_TEAM = "AWAY_TEAM"
    DRAW = "DRAW"


class ScoreDuration(str, Enum):
    REGULAR = "REGULAR"
    EXTRA_TIME = "EXTRA_TIME"
    PENALTY_SHOOTOUT = "PENALTY_SHOOTOUT"


def _status_value(raw: Any) -> str:
    if isinstance(raw, Enum):
        return str(raw.value)
    return str(raw) if raw else MatchStatus.SCHEDULED.value


@dataclass(frozen=True)
class Area:
    id: Optional[int] = None
    name: str = ""
    code: str = ""
    flag: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "Area":
        d = as_dict(data)
        return cls(
            id=d.get("id") or None,
            name=as_text(d.get("name")),
            code=as_text(d.get("code")),
            flag=as_text(d.get("flag")),
        )

    def to_json(self) -> dict:
        return {"id": self.id, "name": self.name, "code": self.code, "flag": self.flag}


@dataclass(frozen=True)
class Competition:
    id: Optional[int] = None
    name: str = ""
    code: str = ""
    type: str = ""
    emblem: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "Competition":
        d = as_dict(data)
        return cls(
            id=d.get("id") or None,
            name=as_text(d.get("name")),
            code=as_text(d.get("code")),
            type=as_text(d.get("type")),
            emblem=as_text(d.get("emblem")),
        )

    def to_json(self) -> dict:
        return {"id": self.id, "name": self.name, "code": self.code, "type": self.type, "emblem": self.emblem}


@dataclass(frozen=True)
class TeamInfo:
    id: Optional[int] = None
    name: str = ""
    short_name: str = ""
    tla: str = ""
    crest: str = ""
    address: str = ""
    website: str = ""
    founded: Optional[int] = None
    club_colors: str = ""
    venue: str = ""
    last_updated: Optional[datetime] = None

    @classmethod
    def from_json(cls, data: Any) -> "TeamInfo":
        d = as_dict(data)
        return cls(
            id=d.get("id") or None,
            name=as_text(d.get("name")),
            short_name=as_text(d.get("shortName")),
            tla=as_text(d.get("tla")),
            crest=as_text(d.get("crest")),
            address=as_text(d.get("address")),
            website=as_text(d.get("website")),
            founded=d.get("founded") or None,
            club_colors=as_text(d.get("clubColors")),
            venue=as_text(d.get("venue")),
            last_updated=parse_timestamp(d.get("lastUpdated")),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "shortName": self.short_name,
            "tla": self.tla,
            "crest": self.crest,
            "address": self.address,
            "website": self.website,
            "founded": self.founded,
            "clubColors": self.club_colors,
            "venue": self.venue,
            "lastUpdated": to_iso(self.last_updated),
        }


@dataclass(frozen=True)
class Season:
    id: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    current_matchday: Optional[int] = None
    winner: Optional[TeamInfo] = None

    @classmethod
    def from_json(cls, data: Any) -> "Season":
        d = as_dict(data)
        return cls(
            id=d.get("id") or None,
            start_date=parse_timestamp(d.get("startDate")),
            end_date=parse_timestamp(d.get("endDate")),
            current_matchday=d.get("currentMatchday") or None,
            winner=TeamInfo.from_json(d["winner"]) if d.get("winner") else None,
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "startDate": to_iso(self.start_date),
            "endDate": to_iso(self.end_date),
            "currentMatchday": self.current_matchday,
            "winner": self.winner.to_json() if self.winner else None,
        }


@dataclass(frozen=True)
class TimeScore:
    home: Optional[int] = None
    away: Optional[int] = None

    @classmethod
    def from_json(cls, data: Any) -> "TimeScore":
        d = as_dict(data)
        return cls(home=d.get("home"), away=d.get("away"))

    def to_json(self) -> dict:
        return {"home": self.home, "away": self.away}


@dataclass(frozen=True)
class Score:
    winner: Optional[str] = None
    duration: str = ScoreDuration.REGULAR.value
    full_time: Optional[TimeScore] = None
    half_time: Optional[TimeScore] = None

    @classmethod
    def from_json(cls, data: Any) -> "Score":
        d = as_dict(data)
        return cls(
            winner=d.get("winner") or None,
            duration=d.get("duration") or ScoreDuration.REGULAR.value,
            full_time=TimeScore.from_json(d["fullTime"]) if d.get("fullTime") else None,
            half_time=TimeScore.from_json(d["halfTime"]) if d.get("halfTime") else None,
        )

    def display(self) -> str:
        """'2 - 1', '2 - -' when one side is unknown, 'vs' when nothing is known."""
        ft = self.full_time
        if ft is None or (ft.home is None and ft.away is None):
            return VS
        home = "-" if ft.home is None else ft.home
        away = "-" if ft.away is None else ft.away
        return f"{home} - {away}"

    def to_json(self) -> dict:
        return {
            "winner": self.winner,
            "duration": self.duration,
            "fullTime": self.full_time.to_json() if self.full_time else None,
            "halfTime": self.half_time.to_json() if self.half_time else None,
        }


@dataclass(frozen=True)
class CommentRef:
    """Comment copy embedded in a match payload (not the authoritative record)."""
    id: str = ""
    text: str = ""
    created_at: Optional[datetime] = None
    user_id: str = ""
    username: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "CommentRef":
        d = as_dict(data)
        return cls(
            id=as_text(d.get("id")),
            text=as_text(d.get("text")),
            created_at=parse_timestamp(d.get("createdAt")),
            user_id=as_text(d.get("userId")),
            username=as_text(d.get("username")),
        )

    def formatted_date(self) -> str:
        return format_display_date(self.created_at)

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "createdAt": to_iso(self.created_at),
            "userId": self.user_id,
            "username": self.username,
        }


@dataclass(frozen=True)
class Match:
    id: Optional[int] = None
    utc_date: Optional[datetime] = None
    status: str = MatchStatus.SCHEDULED.value
    matchday: Optional[int] = None
    stage: Optional[str] = None
    group: Optional[str] = None
    last_updated: Optional[datetime] = None
    area: Optional[Area] = None
    competition: Optional[Competition] = None
    season: Optional[Season] = None
    home_team: Optional[TeamInfo] = None
    away_team: Optional[TeamInfo] = None
    score: Optional[Score] = None
    comments: List[CommentRef] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "Match":
        d = as_dict(data)
        return cls(
            id=d.get("id") or None,
            utc_date=parse_timestamp(d.get("utcDate")),
            status=_status_value(d.get("status")),
            matchday=d.get("matchday") or None,
            stage=d.get("stage") or None,
            group=d.get("group") or None,
            last_updated=parse_timestamp(d.get("lastUpdated")),
            area=Area.from_json(d["area"]) if d.get("area") else None,
            competition=Competition.from_json(d["competition"]) if d.get("competition") else None,
            season=Season.from_json(d["season"]) if d.get("season") else None,
            home_team=TeamInfo.from_json(d["homeTeam"]) if d.get("homeTeam") else None,
            away_team=TeamInfo.from_json(d["awayTeam"]) if d.get("awayTeam") else None,
            score=Score.from_json(d["score"]) if d.get("score") else None,
            comments=[CommentRef.from_json(c) for c in as_list(d.get("comments"))],
        )

    # ----- display helpers -----
    def home_team_name(self) -> str:
        return (self.home_team.name if self.home_team else "") or TBD

    def away_team_name(self) -> str:
        return (self.away_team.name if self.away_team else "") or TBD

    def description(self) -> str:
        return f"{self.home_team_name()} vs {self.away_team_name()}"

    def score_display(self) -> str:
        return self.score.display() if self.score else VS

    def competition_name(self) -> str:
        return self.competition.name if self.competition else ""

    def formatted_date(self) -> str:
        return format_display_date(self.utc_date, with_weekday=True)

    def is_finished(self) -> bool:
        return self.status == MatchStatus.FINISHED.value

    def is_upcoming(self) -> bool:
        return self.status in UPCOMING_STATUSES

    def is_live(self) -> bool:
        return self.status in LIVE_STATUSES

    def comment_count(self) -> int:
        return len(self.comments)

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "utcDate": to_iso(self.utc_date),
            "status": self.status,
            "matchday": self.matchday,
            "stage": self.stage,
            "group": self.group,
            "lastUpdated": to_iso(self.last_updated),
            "area": self.area.to_json() if self.area else None,
            "competition": self.competition.to_json() if self.competition else None,
            "season": self.season.to_json() if self.season else None,
            "homeTeam": self.home_team.to_json() if self.home_team else None,
            "awayTeam": self.away_team.to_json() if self.away_team else None,
            "score": self.score.to_json() if self.score else None,
            "comments": [c.to_json() for c in self.comments],
        }

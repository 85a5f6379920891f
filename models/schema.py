"""
Opt-in strict decoding for match payloads.

`Match.from_json` never fails: wrong types silently become defaults. When a
caller wants to know that happened, it can use `decode_match` instead, which
returns the same record together with the list of fields pydantic rejected.
An empty `errors` list means the payload matched the expected shape.

`MatchClient(check_payloads=True)` (env `MATCHLOG_CHECK_PAYLOADS`) runs every
fetched match through here and logs the problems.

Every field is optional and unknown fields are allowed; only the type of a
field that is present (and not null) is checked.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Annotated, Any, List, Optional, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from common.utils import parse_timestamp
from .match_model import Match


def _check_date(value: Any) -> Any:
    if value is not None and parse_timestamp(value) is None:
        raise ValueError("expected an ISO-8601 date or epoch milliseconds")
    return value


ApiDate = Annotated[Any, AfterValidator(_check_date)]


class AreaPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[StrictInt] = None
    name: Optional[StrictStr] = None
    code: Optional[StrictStr] = None
    flag: Optional[StrictStr] = None


class CompetitionPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[StrictInt] = None
    name: Optional[StrictStr] = None
    code: Optional[StrictStr] = None
    type: Optional[StrictStr] = None
    emblem: Optional[StrictStr] = None


class TeamPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[StrictInt] = None
    name: Optional[StrictStr] = None
    shortName: Optional[StrictStr] = None
    tla: Optional[StrictStr] = None
    crest: Optional[StrictStr] = None
    founded: Optional[StrictInt] = None
    lastUpdated: Optional[ApiDate] = None


class SeasonPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[StrictInt] = None
    startDate: Optional[ApiDate] = None
    endDate: Optional[ApiDate] = None
    currentMatchday: Optional[StrictInt] = None
    winner: Optional[TeamPayload] = None


class TimeScorePayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    home: Optional[StrictInt] = None
    away: Optional[StrictInt] = None


class ScorePayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    winner: Optional[StrictStr] = None
    duration: Optional[StrictStr] = None
    fullTime: Optional[TimeScorePayload] = None
    halfTime: Optional[TimeScorePayload] = None


class CommentPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[StrictStr] = None
    text: Optional[StrictStr] = None
    createdAt: Optional[ApiDate] = None
    userId: Optional[StrictStr] = None
    username: Optional[StrictStr] = None


class MatchPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[StrictInt] = None
    utcDate: Optional[ApiDate] = None
    status: Optional[StrictStr] = None
    matchday: Optional[StrictInt] = None
    stage: Optional[StrictStr] = None
    group: Optional[StrictStr] = None
    lastUpdated: Optional[ApiDate] = None
    area: Optional[AreaPayload] = None
    competition: Optional[CompetitionPayload] = None
    season: Optional[SeasonPayload] = None
    homeTeam: Optional[TeamPayload] = None
    awayTeam: Optional[TeamPayload] = None
    score: Optional[ScorePayload] = None
    comments: Optional[List[CommentPayload]] = None


_MATCH_LIST = TypeAdapter(List[Any])


@dataclass(frozen=True)
class DecodeResult:
    record: Match
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _loc(parts: Tuple[Any, ...], root: str) -> str:
    """('score', 'fullTime', 'home') -> 'score.fullTime.home'; indices as [i]."""
    out = ""
    for p in parts:
        if isinstance(p, int):
            out += f"[{p}]"
        else:
            out += f".{p}" if out else str(p)
    return out or root


def _format(exc: PydanticValidationError, root: str) -> List[str]:
    return [f"{_loc(err['loc'], root)}: {err['msg']}" for err in exc.errors()]


def validate_match_payload(data: Any) -> List[str]:
    try:
        MatchPayload.model_validate(data)
    except PydanticValidationError as exc:
        return _format(exc, "match")
    return []


def decode_match(data: Any) -> DecodeResult:
    return DecodeResult(record=Match.from_json(data), errors=validate_match_payload(data))


def decode_matches(data: Any) -> Tuple[List[Match], List[str]]:
    """Decode a list payload; error paths are prefixed with the item index."""
    try:
        items = _MATCH_LIST.validate_python(data, strict=True)
    except PydanticValidationError as exc:
        return [], _format(exc, "matches")
    records, errors = [], []
    for i, item in enumerate(items):
        result = decode_match(item)
        records.append(result.record)
        errors.extend(f"[{i}].{e}" for e in result.errors)
    return records, errors

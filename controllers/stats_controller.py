import pandas as pd
from typing import Any, Dict, Sequence

from common.constants import MATCH_STATUSES
from models.match_model import Match


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            out.update(_flatten(value, f"{name}."))
        else:
            out[name] = value
    return out


def stats_frame(stats: Dict[str, Any]) -> pd.DataFrame:
    """Backend stats object -> two-column table (nested keys joined with '.')."""
    flat = _flatten(stats or {})
    return pd.DataFrame({"Metric": list(flat.keys()), "Value": [str(v) for v in flat.values()]})


def status_counts(matches: Sequence[Match]) -> pd.DataFrame:
    """
    Number of matches per status, known statuses first in their usual order.
    Unknown statuses reported by the backend are appended after them.
    """
    df = pd.DataFrame({"Status": [m.status for m in matches]})
    counts = df.groupby("Status").size() if not df.empty else pd.Series(dtype="int64")

    extra = sorted(s for s in counts.index if s not in MATCH_STATUSES)
    order = MATCH_STATUSES + extra
    counts = counts.reindex(order, fill_value=0).astype("int64")
    return pd.DataFrame({"Status": order, "Matches": counts.to_list()})


def competition_counts(matches: Sequence[Match]) -> pd.DataFrame:
    df = pd.DataFrame({"Competition": [m.competition_name() or "Unknown" for m in matches]})
    if df.empty:
        return pd.DataFrame(columns=["Competition", "Matches"])
    return (
        df.groupby("Competition")
        .size()
        .reset_index(name="Matches")
        .sort_values("Matches", ascending=False, kind="mergesort")
        .reset_index(drop=True)
    )

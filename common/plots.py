# common/plots.py
from __future__ import annotations

import pandas as pd
import matplotlib.pyplot as plt

DEFAULT_FIGSIZE = (6.6, 2.6)

STATUS_COLORS = {
    "FINISHED": "#2E7D32",
    "IN_PLAY": "#C62828",
    "PAUSED": "#EF6C00",
    "SCHEDULED": "#1565C0",
    "TIMED": "#1E88E5",
}
DEFAULT_COLOR = "#9E9E9E"


def _new_ax(ax=None):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


def plot_counts(df: pd.DataFrame, label_col: str, value_col: str = "Matches", title: str = "", ax=None):
    """Horizontal bar chart of counts; zero rows are dropped."""
    fig, ax = _new_ax(ax)
    data = df[df[value_col] > 0]
    if data.empty:
        ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
        return fig

    colors = [STATUS_COLORS.get(str(lab), DEFAULT_COLOR) for lab in data[label_col]]
    ax.barh(data[label_col].astype(str), data[value_col], color=colors)
    ax.invert_yaxis()  # first row on top
    ax.set_xlabel(value_col)
    if title:
        ax.set_title(title, fontsize=10)
    for spine in ("top", "right"):
        ax.spines[spine].set_visible(False)
    return fig

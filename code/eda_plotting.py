# -*- coding: utf-8 -*-
"""
EDA plotting for the cleaned Uber trip table and its summaries.

Each plot_* function either saves a PNG (save=True) into out_dir, which
defaults to <PROJECT_ROOT>/plots, or calls plt.show(). The figure is closed
afterwards and returned so callers can inspect axes/titles.
"""

from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from eda_config import PLOTS_DIR
from fare_models import fit_fare_distance_ols, regression_line
from trip_errors import EmptyResultError
from trip_features import DISTANCE_COL
from trip_loader import FARE_COL

# ---------------------------------------------------------------------------
# Titles / labels
# ---------------------------------------------------------------------------

FARE_DISTANCE_TITLE = "Fare Amount vs Distance Traveled (Up to 20 Miles)"
FARE_DISTANCE_XLABEL = "Distance (miles)"
FARE_DISTANCE_YLABEL = "Fare Amount ($)"

SLOT_COUNT_TITLE = "Total Number of Trips per Time Slot"
SLOT_FARE_TITLE = "Average Fare per Time Slot"
MONTH_COUNT_TITLE = "Total Number of Trips per Month"

SLOT_COLORS = {
    "Night": "tab:purple",
    "Morning": "tab:orange",
    "Afternoon": "tab:green",
    "Evening": "tab:blue",
}

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _ensure_out_dir(out_dir: Path | str) -> Path:
    """
    Ensure output directory exists; accept either Path or string.
    """
    if isinstance(out_dir, str):
        out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def _finish(fig, filename: str, save: bool, out_dir: Path | None) -> None:
    if save:
        if out_dir is None:
            out_dir = PLOTS_DIR
        out_dir = _ensure_out_dir(out_dir)
        out_path = out_dir / filename
        fig.savefig(out_path, dpi=150, bbox_inches="tight")
        print(f"Saved {out_path}")
    else:
        plt.show()
    plt.close(fig)


def _require_rows(df: pd.DataFrame, title: str) -> None:
    if df.empty:
        raise EmptyResultError(f"No data for '{title}'.")


# ---------------------------------------------------------------------------
# Plotting functions
# ---------------------------------------------------------------------------

def plot_fare_vs_distance(
    df: pd.DataFrame,
    save: bool = False,
    out_dir: Path | None = None,
    model=None,
):
    """
    Scatter of fare vs distance with the OLS fit drawn on top.
    If model is None the fit is computed here.
    """
    sub = df[[DISTANCE_COL, FARE_COL]].dropna()
    _require_rows(sub, FARE_DISTANCE_TITLE)

    if model is None:
        model = fit_fare_distance_ols(sub)
    intercept, slope = regression_line(model)

    x_line = np.linspace(sub[DISTANCE_COL].min(), sub[DISTANCE_COL].max(), 100)
    y_line = intercept + slope * x_line

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.scatter(sub[DISTANCE_COL], sub[FARE_COL], alpha=0.3, s=10)
    ax.plot(
        x_line,
        y_line,
        color="darkred",
        linewidth=2,
        label=f"OLS: fare = {intercept:.2f} + {slope:.2f} × miles",
    )
    ax.set_title(FARE_DISTANCE_TITLE)
    ax.set_xlabel(FARE_DISTANCE_XLABEL)
    ax.set_ylabel(FARE_DISTANCE_YLABEL)
    ax.grid(True, alpha=0.3)
    ax.legend()

    _finish(fig, "scatter_fare_vs_distance.png", save, out_dir)
    return fig


def plot_trips_per_time_slot(
    slot_summary: pd.DataFrame,
    save: bool = False,
    out_dir: Path | None = None,
):
    """Bar chart of trip_count per time slot (expects trips_by_time_slot output)."""
    _require_rows(slot_summary, SLOT_COUNT_TITLE)

    colors = [SLOT_COLORS.get(s, "tab:gray") for s in slot_summary["time_slot"]]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(slot_summary["time_slot"], slot_summary["trip_count"], color=colors)
    ax.set_title(SLOT_COUNT_TITLE)
    ax.set_xlabel("Time Slot")
    ax.set_ylabel("Number of Trips")
    ax.grid(True, axis="y", alpha=0.3)

    _finish(fig, "bar_trips_per_time_slot.png", save, out_dir)
    return fig


def plot_avg_fare_per_time_slot(
    slot_summary: pd.DataFrame,
    save: bool = False,
    out_dir: Path | None = None,
):
    """Bar chart of avg_fare per time slot."""
    _require_rows(slot_summary, SLOT_FARE_TITLE)

    colors = [SLOT_COLORS.get(s, "tab:gray") for s in slot_summary["time_slot"]]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(slot_summary["time_slot"], slot_summary["avg_fare"], color=colors)
    ax.set_title(SLOT_FARE_TITLE)
    ax.set_xlabel("Time Slot")
    ax.set_ylabel("Average Fare ($)")
    ax.grid(True, axis="y", alpha=0.3)

    _finish(fig, "bar_avg_fare_per_time_slot.png", save, out_dir)
    return fig


def plot_trips_per_month(
    month_summary: pd.DataFrame,
    save: bool = False,
    out_dir: Path | None = None,
):
    """
    Bars + line + markers of trip_count per month, with the count written
    above each point. Rows are drawn in the order given (calendar order from
    trips_by_month).
    """
    _require_rows(month_summary, MONTH_COUNT_TITLE)

    months = list(month_summary["month"])
    counts = month_summary["trip_count"].to_numpy()
    x = np.arange(len(months))

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.bar(x, counts, color="lightsteelblue", alpha=0.7)
    ax.plot(x, counts, color="tab:blue", linewidth=1.6, marker="o")

    # headroom for the labels
    offset = max(counts.max(), 1) * 0.02
    for xi, c in zip(x, counts):
        ax.text(xi, c + offset, f"{int(c):,}", ha="center", va="bottom", fontsize=9)

    ax.set_xticks(x)
    ax.set_xticklabels(months, rotation=45, ha="right")
    ax.set_title(MONTH_COUNT_TITLE)
    ax.set_xlabel("Month")
    ax.set_ylabel("Number of Trips")
    ax.set_ylim(0, max(counts.max(), 1) * 1.12)
    ax.grid(True, axis="y", alpha=0.3)

    _finish(fig, "trips_per_month.png", save, out_dir)
    return fig

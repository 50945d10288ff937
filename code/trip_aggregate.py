# -*- coding: utf-8 -*-
"""
trip_aggregate.py

Small summary tables built from the feature table:

    trips_by_time_slot -> time_slot, trip_count, avg_fare
    trips_by_month     -> month, trip_count

Rows come out in canonical order (TIME_SLOT_ORDER / calendar order), not in
order of first appearance.
"""

import pandas as pd

from trip_errors import EmptyResultError
from trip_features import MONTH_ORDER, TIME_SLOT_ORDER
from trip_loader import FARE_COL


def _require_rows(df: pd.DataFrame, what: str) -> None:
    if df.empty:
        raise EmptyResultError(f"No trips left to aggregate {what}.")


def trips_by_time_slot(df: pd.DataFrame) -> pd.DataFrame:
    """
    Trip count and mean fare per time slot. Null fares are left out of the
    mean; slots with no trips are omitted.
    """
    _require_rows(df, "by time slot")

    grouped = df.groupby("time_slot").agg(
        trip_count=(FARE_COL, "size"),
        avg_fare=(FARE_COL, "mean"),
    )

    order = [s for s in TIME_SLOT_ORDER if s in grouped.index]
    out = grouped.reindex(order).rename_axis("time_slot").reset_index()
    out["trip_count"] = out["trip_count"].astype("int64")
    return out


def trips_by_month(df: pd.DataFrame, fill_missing: bool = False) -> pd.DataFrame:
    """
    Trip count per calendar month, January first.

    Months with no trips are dropped unless fill_missing=True, in which case
    all twelve months are returned with 0 for the empty ones.
    """
    _require_rows(df, "by month")

    counts = df.groupby("month").size()

    if fill_missing:
        order = MONTH_ORDER
    else:
        order = [m for m in MONTH_ORDER if m in counts.index]

    out = (
        counts.reindex(order, fill_value=0)
        .rename("trip_count")
        .rename_axis("month")
        .reset_index()
    )
    out["trip_count"] = out["trip_count"].astype("int64")
    return out

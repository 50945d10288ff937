# -*- coding: utf-8 -*-
"""
trip_features.py

Trip-level derived columns on a cleaned trip table:

- pickup_dt:      parsed pickup timestamp (fixed format, see PICKUP_FORMAT)
- hour:           0–23 from pickup_dt
- time_slot:      Morning / Afternoon / Evening / Night bucket of hour
- month:          calendar month name from pickup_dt
- distance_miles: haversine pickup -> dropoff, meters / 1609.34, 1 decimal

Rows whose timestamp does not parse are dropped, and so are trips longer
than MAX_DISTANCE_MILES.
"""

from __future__ import annotations

import calendar

import numpy as np
import pandas as pd

from eda_config import MAX_DISTANCE_MILES
from trip_errors import ParseError
from trip_loader import PICKUP_DATETIME_COL, PICKUP_FORMAT, parse_pickup_datetimes


# Mean Earth radius (IUGG), meters
EARTH_RADIUS_M = 6_371_008.8
METERS_PER_MILE = 1609.34

DISTANCE_COL = "distance_miles"

# (slot, start hour inclusive, end hour exclusive); Night wraps past midnight
TIME_SLOT_BREAKS = [
    ("Night", 0, 5),
    ("Morning", 5, 12),
    ("Afternoon", 12, 17),
    ("Evening", 17, 21),
    ("Night", 21, 24),
]

TIME_SLOT_ORDER = ["Night", "Morning", "Afternoon", "Evening"]

MONTH_ORDER = list(calendar.month_name)[1:]  # January..December


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------

def time_slot_for_hour(hour: int) -> str:
    """Map an hour of day (0–23) to its time slot label."""
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour out of range 0–23: {hour}")

    for slot, start, end in TIME_SLOT_BREAKS:
        if start <= hour < end:
            return slot

    # TIME_SLOT_BREAKS covers 0–23 without gaps
    raise AssertionError(f"No time slot for hour {hour}")


HOUR_TO_SLOT = {h: time_slot_for_hour(h) for h in range(24)}


def haversine_meters(lat1, lon1, lat2, lon2):
    """
    Great-circle distance in meters. Works on scalars, numpy arrays and
    pandas Series (element-wise).
    """
    lat1, lon1, lat2, lon2 = map(np.radians, (lat1, lon1, lat2, lon2))

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    c = 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))
    return EARTH_RADIUS_M * c


def haversine_miles(lat1, lon1, lat2, lon2):
    return haversine_meters(lat1, lon1, lat2, lon2) / METERS_PER_MILE


# ---------------------------------------------------------------------------
# Column builders
# ---------------------------------------------------------------------------

def add_time_features(df: pd.DataFrame, strict: bool = False) -> pd.DataFrame:
    """
    Add pickup_dt, hour, time_slot and month.

    Rows whose pickup timestamp fails to parse are dropped; with strict=True
    a ParseError is raised instead.
    """
    df = df.copy()
    parsed = parse_pickup_datetimes(df[PICKUP_DATETIME_COL])

    bad_mask = parsed.isna()
    n_bad = int(bad_mask.sum())
    if n_bad:
        if strict:
            first_bad = df.loc[bad_mask, PICKUP_DATETIME_COL].iloc[0]
            raise ParseError(
                f"{n_bad:,} pickup timestamps do not match {PICKUP_FORMAT!r}; "
                f"first: {first_bad!r}"
            )
        print(f"[WARN] Dropping {n_bad:,} rows with unparseable {PICKUP_DATETIME_COL}.")

    df["pickup_dt"] = parsed
    df = df.loc[~bad_mask].copy()

    df["hour"] = df["pickup_dt"].dt.hour.astype("int64")
    df["time_slot"] = df["hour"].map(HOUR_TO_SLOT)
    df["month"] = df["pickup_dt"].dt.month.map(lambda m: calendar.month_name[m])

    return df


def add_distance(df: pd.DataFrame) -> pd.DataFrame:
    """Add distance_miles (rounded half-to-even to 0.1 mile)."""
    df = df.copy()
    miles = haversine_miles(
        df["pickup_latitude"],
        df["pickup_longitude"],
        df["dropoff_latitude"],
        df["dropoff_longitude"],
    )
    df[DISTANCE_COL] = np.round(miles.astype("float64"), 1)
    return df


def filter_max_distance(df: pd.DataFrame, max_miles: float = MAX_DISTANCE_MILES) -> pd.DataFrame:
    """Keep trips with distance_miles <= max_miles (boundary kept)."""
    return df.loc[df[DISTANCE_COL] <= max_miles].copy()


def derive_features(
    df: pd.DataFrame,
    max_distance_miles: float = MAX_DISTANCE_MILES,
    strict: bool = False,
) -> pd.DataFrame:
    """
    Time features + distance, then drop distance outliers.
    """
    n_in = len(df)
    out = add_time_features(df, strict=strict)
    n_timed = len(out)

    out = add_distance(out)
    out = filter_max_distance(out, max_distance_miles)

    print(f"Dropped (timestamp):       {n_in - n_timed:,}")
    print(f"Dropped (> {max_distance_miles:g} miles):    {n_timed - len(out):,}")
    print(f"Rows with features:        {len(out):,}")

    return out

# -*- coding: utf-8 -*-
"""
trip_cleaner.py

Row filters applied once, right after loading. Every function returns a new
DataFrame and is idempotent.
"""

import pandas as pd

from trip_loader import COORD_COLS, FARE_COL, PICKUP_DATETIME_COL


LAT_COLS = ["pickup_latitude", "dropoff_latitude"]
LON_COLS = ["pickup_longitude", "dropoff_longitude"]

# 0 is used in the raw data to mean "no coordinate recorded"
SENTINEL_COORD = 0.0


def valid_coordinate_mask(df: pd.DataFrame) -> pd.Series:
    """
    True where all four coordinates are present, non-zero and inside the
    latitude [-90, 90] / longitude [-180, 180] ranges.
    """
    coords = df[COORD_COLS]
    mask = coords.notna().all(axis=1) & (coords != SENTINEL_COORD).all(axis=1)

    for col in LAT_COLS:
        mask &= df[col].between(-90, 90)
    for col in LON_COLS:
        mask &= df[col].between(-180, 180)

    return mask


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Drop rows with missing, sentinel or out-of-range coordinates."""
    return df.loc[valid_coordinate_mask(df)].copy()


def drop_incomplete_trips(df: pd.DataFrame) -> pd.DataFrame:
    """Drop rows without a pickup timestamp or fare."""
    mask = df[PICKUP_DATETIME_COL].notna() & df[FARE_COL].notna()
    return df.loc[mask].copy()


def clean_trips(df: pd.DataFrame) -> pd.DataFrame:
    """
    Single cleaning pass: incomplete rows first, then invalid coordinates.
    """
    n_in = len(df)
    out = drop_incomplete_trips(df)
    n_complete = len(out)
    out = clean_coordinates(out)

    print(f"Rows in:               {n_in:,}")
    print(f"Dropped (incomplete):  {n_in - n_complete:,}")
    print(f"Dropped (coordinates): {n_complete - len(out):,}")
    print(f"Rows after cleaning:   {len(out):,}")

    return out

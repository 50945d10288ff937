# -*- coding: utf-8 -*-
"""
trip_loader.py

Read the raw Uber trip file into a DataFrame.

Behavior:
1. Accept a .csv (or .parquet) path.
2. Check the required columns are present.
3. Coerce coordinates and fare to float (invalid -> NaN); the pickup
   timestamp stays a string and is parsed later by trip_features.
4. Any other column is carried through unchanged.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from trip_errors import LoadError


PICKUP_DATETIME_COL = "pickup_datetime"
FARE_COL = "fare_amount"

COORD_COLS = [
    "pickup_latitude",
    "pickup_longitude",
    "dropoff_latitude",
    "dropoff_longitude",
]

NUMERIC_COLS = COORD_COLS + [FARE_COL]

REQUIRED_COLS = [PICKUP_DATETIME_COL] + NUMERIC_COLS

PICKUP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _read_input(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise LoadError(f"Input file not found: {path}")
    if not path.is_file():
        raise LoadError(f"Input path is not a file: {path}")

    try:
        if path.suffix == ".parquet":
            df = pd.read_parquet(path)
        elif path.suffix in (".csv", ".txt"):
            df = pd.read_csv(path, low_memory=False)
        else:
            raise LoadError(f"Unsupported file extension: {path.suffix}")
    except (OSError, ValueError) as e:
        # EmptyDataError / ParserError / UnicodeDecodeError are ValueErrors
        raise LoadError(f"Could not read {path}: {e}") from e

    return df


def coerce_trip_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy with coordinates and fare as float64 and the pickup
    timestamp as string (missing values stay missing).

    Datetime columns (the usual parquet case) are written out in
    PICKUP_FORMAT; tz-aware values are converted to naive UTC first.
    """
    df = df.copy()
    for col in NUMERIC_COLS:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype("float64")

    ts = df[PICKUP_DATETIME_COL]
    if pd.api.types.is_datetime64_any_dtype(ts):
        if ts.dt.tz is not None:
            ts = ts.dt.tz_convert(None)
        df[PICKUP_DATETIME_COL] = ts.dt.strftime(PICKUP_FORMAT)
    else:
        df[PICKUP_DATETIME_COL] = ts.where(ts.isna(), ts.astype(str))
    return df


def parse_pickup_datetimes(s: pd.Series) -> pd.Series:
    """
    Parse timestamps like '2015-05-07 19:52:06' (a trailing ' UTC', as in
    the raw Uber export, is ignored). Failures become NaT.
    """
    text = s.astype("string").str.strip().str.replace(r"\s*UTC$", "", regex=True)
    return pd.to_datetime(text, format=PICKUP_FORMAT, errors="coerce")


def load_trips(path: Path | str) -> pd.DataFrame:
    """
    Load the trip file at `path`.

    Raises LoadError if the file is missing or unreadable, lacks a required
    column, or has no row where every required field parses.
    """
    path = Path(path)
    df = _read_input(path)

    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise LoadError(f"{path.name} is missing required columns: {missing}")

    if df.empty:
        raise LoadError(f"{path.name} contains no rows.")

    df = coerce_trip_columns(df)

    parseable = (
        df[NUMERIC_COLS].notna().all(axis=1)
        & parse_pickup_datetimes(df[PICKUP_DATETIME_COL]).notna()
    )
    if not parseable.any():
        raise LoadError(f"{path.name} has no parseable trip rows.")

    print(f"Loaded {len(df):,} rows from {path}")
    bad = int((~parseable).sum())
    if bad:
        print(f"[WARN] {bad:,} rows have missing, non-numeric or unparseable required fields.")

    return df

"""
Shared fixtures for the trip pipeline tests.
Run with `pytest -q` from the repo root.
"""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

# modules live in code/ and import each other by bare name
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "code"))


RAW_COLUMNS = [
    "key",
    "fare_amount",
    "pickup_datetime",
    "pickup_longitude",
    "pickup_latitude",
    "dropoff_longitude",
    "dropoff_latitude",
    "passenger_count",
]


def make_trip(
    pickup_datetime="2015-01-07 19:52:06 UTC",
    fare_amount=7.5,
    pickup_latitude=40.7128,
    pickup_longitude=-74.0060,
    dropoff_latitude=40.7306,
    dropoff_longitude=-73.9352,
    key="k",
    passenger_count=1,
):
    return {
        "key": key,
        "fare_amount": fare_amount,
        "pickup_datetime": pickup_datetime,
        "pickup_longitude": pickup_longitude,
        "pickup_latitude": pickup_latitude,
        "dropoff_longitude": dropoff_longitude,
        "dropoff_latitude": dropoff_latitude,
        "passenger_count": passenger_count,
    }


@pytest.fixture
def raw_trips() -> pd.DataFrame:
    """A small raw table with a mix of good and bad rows."""
    rows = [
        make_trip(key="ok-jan-1", pickup_datetime="2015-01-07 08:15:00 UTC", fare_amount=12.0),
        make_trip(key="ok-jan-2", pickup_datetime="2015-01-12 13:40:00 UTC", fare_amount=9.5,
                  dropoff_latitude=40.7580, dropoff_longitude=-73.9855),
        make_trip(key="ok-jan-3", pickup_datetime="2015-01-20 22:05:00 UTC", fare_amount=20.0,
                  dropoff_latitude=40.6413, dropoff_longitude=-73.7781),
        make_trip(key="ok-mar-1", pickup_datetime="2015-03-02 18:30:00 UTC", fare_amount=6.0,
                  dropoff_latitude=40.7200, dropoff_longitude=-74.0000),
        make_trip(key="ok-mar-2", pickup_datetime="2015-03-03 03:00:00", fare_amount=None),
        make_trip(key="zero-lat", pickup_latitude=0.0),
        make_trip(key="bad-lon", dropoff_longitude=-200.0),
        make_trip(key="bad-lat", dropoff_latitude=95.0),
        make_trip(key="bad-ts", pickup_datetime="07/01/2015 19:52"),
        make_trip(key="too-far", dropoff_latitude=41.2000, dropoff_longitude=-74.0060),
    ]
    return pd.DataFrame(rows, columns=RAW_COLUMNS)


@pytest.fixture
def raw_csv(tmp_path, raw_trips) -> Path:
    path = tmp_path / "uber.csv"
    raw_trips.to_csv(path, index=False)
    return path

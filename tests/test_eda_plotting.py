"""
Tests for the chart functions: data series, titles and saved output.
"""

import numpy as np
import pandas as pd
import pytest

import eda_plotting as ep
from trip_errors import EmptyResultError


@pytest.fixture
def trips():
    x = np.array([0.5, 1.2, 2.0, 3.3, 4.1, 7.8, 12.4, 19.9])
    return pd.DataFrame({"distance_miles": x, "fare_amount": 3.0 + 2.5 * x})


@pytest.fixture
def slot_summary():
    return pd.DataFrame({
        "time_slot": ["Night", "Morning", "Afternoon", "Evening"],
        "trip_count": [5, 12, 9, 7],
        "avg_fare": [14.2, 10.1, 11.0, 12.5],
    })


@pytest.fixture
def month_summary():
    return pd.DataFrame({"month": ["January", "March"], "trip_count": [3, 1]})


def test_fare_vs_distance_labels_and_fit(trips, tmp_path):
    fig = ep.plot_fare_vs_distance(trips, save=True, out_dir=tmp_path)
    ax = fig.axes[0]

    assert ax.get_title() == "Fare Amount vs Distance Traveled (Up to 20 Miles)"
    assert ax.get_xlabel() == "Distance (miles)"
    assert ax.get_ylabel() == "Fare Amount ($)"

    line = ax.get_lines()[0]
    xs, ys = line.get_xdata(), line.get_ydata()
    assert ys == pytest.approx(3.0 + 2.5 * xs)
    assert (tmp_path / "scatter_fare_vs_distance.png").exists()


def test_fare_vs_distance_uses_supplied_model(trips, tmp_path):
    from fare_models import fit_fare_distance_ols

    other = pd.DataFrame({"distance_miles": [1.0, 2.0, 3.0], "fare_amount": [1.0, 1.0, 1.0]})
    model = fit_fare_distance_ols(other)

    fig = ep.plot_fare_vs_distance(trips, save=True, out_dir=tmp_path, model=model)
    assert fig.axes[0].get_lines()[0].get_ydata() == pytest.approx(1.0)


def test_trips_per_time_slot(slot_summary, tmp_path):
    fig = ep.plot_trips_per_time_slot(slot_summary, save=True, out_dir=tmp_path)
    ax = fig.axes[0]

    assert ax.get_title() == "Total Number of Trips per Time Slot"
    assert [p.get_height() for p in ax.patches] == [5, 12, 9, 7]
    assert (tmp_path / "bar_trips_per_time_slot.png").exists()


def test_avg_fare_per_time_slot(slot_summary, tmp_path):
    fig = ep.plot_avg_fare_per_time_slot(slot_summary, save=True, out_dir=tmp_path)
    ax = fig.axes[0]

    assert ax.get_title() == "Average Fare per Time Slot"
    assert [p.get_height() for p in ax.patches] == pytest.approx([14.2, 10.1, 11.0, 12.5])
    assert (tmp_path / "bar_avg_fare_per_time_slot.png").exists()


def test_trips_per_month(month_summary, tmp_path):
    fig = ep.plot_trips_per_month(month_summary, save=True, out_dir=str(tmp_path))
    ax = fig.axes[0]

    assert ax.get_title() == "Total Number of Trips per Month"
    assert [t.get_text() for t in ax.get_xticklabels()] == ["January", "March"]
    assert [t.get_text() for t in ax.texts] == ["3", "1"]
    assert [p.get_height() for p in ax.patches] == [3, 1]
    assert list(ax.get_lines()[0].get_ydata()) == [3, 1]
    assert (tmp_path / "trips_per_month.png").exists()


def test_show_path_does_not_write(slot_summary, tmp_path):
    ep.plot_trips_per_time_slot(slot_summary, save=False, out_dir=tmp_path)
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    "fn, columns",
    [
        (ep.plot_fare_vs_distance, ["distance_miles", "fare_amount"]),
        (ep.plot_trips_per_time_slot, ["time_slot", "trip_count", "avg_fare"]),
        (ep.plot_avg_fare_per_time_slot, ["time_slot", "trip_count", "avg_fare"]),
        (ep.plot_trips_per_month, ["month", "trip_count"]),
    ],
)
def test_empty_input_raises(fn, columns, tmp_path):
    with pytest.raises(EmptyResultError):
        fn(pd.DataFrame(columns=columns), save=True, out_dir=tmp_path)

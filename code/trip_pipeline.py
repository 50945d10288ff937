# -*- coding: utf-8 -*-
"""
trip_pipeline.py

End-to-end EDA run over the raw Uber trip file:

    load -> clean -> derive features -> aggregate -> charts + pickup map

Usage (from repo root):

    python code/trip_pipeline.py
    python code/trip_pipeline.py --input data/raw/uber.csv --save-plots
    python code/trip_pipeline.py --save-plots --out-dir reports/plots --strict

Without --save-plots the charts are shown interactively; the pickup map is
always written as HTML (to --out-dir, or <PROJECT_ROOT>/plots).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

from eda_config import (
    DEFAULT_CLEAN_OUTPUT,
    DEFAULT_INPUT,
    DEFAULT_MAP_NAME,
    DEFAULT_MAX_MARKERS,
    MAX_DISTANCE_MILES,
    PLOTS_DIR,
    PROJECT_ROOT,
)
from eda_plotting import (
    plot_avg_fare_per_time_slot,
    plot_fare_vs_distance,
    plot_trips_per_month,
    plot_trips_per_time_slot,
)
from fare_models import coeff_table, fit_fare_distance_ols
from pickup_map import build_pickup_map, save_pickup_map
from trip_aggregate import trips_by_month, trips_by_time_slot
from trip_cleaner import clean_trips
from trip_errors import TripPipelineError
from trip_features import derive_features
from trip_loader import load_trips


def prepare_trips(
    input_path: Path | str,
    max_distance_miles: float = MAX_DISTANCE_MILES,
    strict: bool = False,
) -> pd.DataFrame:
    """Load, clean and derive features; returns the trip-level table."""
    df_raw = load_trips(input_path)
    df_clean = clean_trips(df_raw)
    return derive_features(df_clean, max_distance_miles=max_distance_miles, strict=strict)


def save_clean_trips(df: pd.DataFrame, out_path: Path | str = DEFAULT_CLEAN_OUTPUT) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(out_path, index=False)
    print(f"Saved cleaned trips to: {out_path}")
    return out_path


def run_pipeline(
    input_path: Path | str = DEFAULT_INPUT,
    save_plots: bool = False,
    out_dir: Path | None = None,
    strict: bool = False,
    max_distance_miles: float = MAX_DISTANCE_MILES,
    max_markers: int | None = DEFAULT_MAX_MARKERS,
    fill_missing_months: bool = False,
    write_clean: bool = False,
    clean_output: Path | str = DEFAULT_CLEAN_OUTPUT,
) -> dict:
    """
    Run every stage in order. Any TripPipelineError aborts the run.

    Returns a dict with the trip table ("trips"), the two summaries
    ("by_time_slot", "by_month"), the OLS results ("ols") and the map
    path ("map_path").
    """
    if out_dir is None:
        out_dir = PLOTS_DIR

    trips = prepare_trips(input_path, max_distance_miles=max_distance_miles, strict=strict)

    if write_clean:
        save_clean_trips(trips, clean_output)

    by_slot = trips_by_time_slot(trips)
    by_month = trips_by_month(trips, fill_missing=fill_missing_months)

    print("\nTrips per time slot:")
    print(by_slot.to_string(index=False))
    print("\nTrips per month:")
    print(by_month.to_string(index=False))

    ols = fit_fare_distance_ols(trips)
    print(coeff_table(ols).to_string(index=False))

    plot_fare_vs_distance(trips, save=save_plots, out_dir=out_dir, model=ols)
    plot_trips_per_time_slot(by_slot, save=save_plots, out_dir=out_dir)
    plot_avg_fare_per_time_slot(by_slot, save=save_plots, out_dir=out_dir)
    plot_trips_per_month(by_month, save=save_plots, out_dir=out_dir)

    pickup_map = build_pickup_map(trips, max_markers=max_markers)
    map_path = save_pickup_map(pickup_map, Path(out_dir) / DEFAULT_MAP_NAME)

    return {
        "trips": trips,
        "by_time_slot": by_slot,
        "by_month": by_month,
        "ols": ols,
        "map_path": map_path,
    }


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="EDA over the Uber trip dataset.")

    parser.add_argument(
        "--input",
        default=str(DEFAULT_INPUT),
        help="Path to the trip file (.csv or .parquet). "
             "Relative to project root or absolute.",
    )
    parser.add_argument(
        "--save-plots",
        action="store_true",
        help="If set, save plots to <PROJECT_ROOT>/plots instead of showing them.",
    )
    parser.add_argument(
        "--out-dir",
        default=None,
        help="Optional override for output directory (plots and map).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unparseable pickup timestamps instead of dropping those rows.",
    )
    parser.add_argument(
        "--max-distance",
        type=float,
        default=MAX_DISTANCE_MILES,
        help="Drop trips longer than this many miles (default: %(default)s).",
    )
    parser.add_argument(
        "--max-markers",
        type=int,
        default=DEFAULT_MAX_MARKERS,
        help="Sample at most this many pickups onto the map; 0 = all (default: %(default)s).",
    )
    parser.add_argument(
        "--fill-missing-months",
        action="store_true",
        help="Show all 12 months in the monthly summary, 0 where no trips.",
    )
    parser.add_argument(
        "--write-clean",
        action="store_true",
        help="Also write the cleaned trip table to data/processed as parquet.",
    )

    return parser.parse_args(argv)


def _resolve(path_str: str) -> Path:
    p = Path(path_str)
    return p if p.is_absolute() else PROJECT_ROOT / p


def main(argv=None) -> int:
    args = parse_args(argv)

    out_dir = _resolve(args.out_dir) if args.out_dir else None
    max_markers = args.max_markers if args.max_markers > 0 else None

    try:
        run_pipeline(
            input_path=_resolve(args.input),
            save_plots=args.save_plots,
            out_dir=out_dir,
            strict=args.strict,
            max_distance_miles=args.max_distance,
            max_markers=max_markers,
            fill_missing_months=args.fill_missing_months,
            write_clean=args.write_clean,
        )
    except TripPipelineError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print("EDA complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# -*- coding: utf-8 -*-
"""
pickup_map.py

Interactive clustered map of pickup locations (folium + MarkerCluster).
Each marker's popup and tooltip show the pickup latitude/longitude.
"""

from __future__ import annotations

from pathlib import Path

import folium
from folium.plugins import MarkerCluster
import pandas as pd

from trip_errors import EmptyResultError


LAT_COL = "pickup_latitude"
LON_COL = "pickup_longitude"


def format_pickup_label(lat: float, lon: float) -> str:
    return f"Pickup: {lat:.6f}, {lon:.6f}"


def build_pickup_map(
    df: pd.DataFrame,
    max_markers: int | None = None,
    random_state: int = 42,
    zoom_start: int = 11,
) -> folium.Map:
    """
    Build a folium Map centred on the mean pickup location with one
    clustered marker per trip.

    If max_markers is set and there are more trips than that, a fixed
    random sample (random_state) is drawn.
    """
    pts = df[[LAT_COL, LON_COL]].dropna()
    if pts.empty:
        raise EmptyResultError("No pickup coordinates to map.")

    if max_markers is not None and len(pts) > max_markers:
        print(f"Sampling {max_markers:,} of {len(pts):,} pickups for the map.")
        pts = pts.sample(n=max_markers, random_state=random_state)

    center = [pts[LAT_COL].mean(), pts[LON_COL].mean()]
    m = folium.Map(location=center, zoom_start=zoom_start, tiles="CartoDB positron")

    marker_cluster = MarkerCluster(name="Pickups").add_to(m)

    for lat, lon in pts.itertuples(index=False, name=None):
        label = format_pickup_label(lat, lon)
        folium.Marker(
            location=[lat, lon],
            popup=folium.Popup(label, max_width=250),
            tooltip=label,
        ).add_to(marker_cluster)

    return m


def save_pickup_map(m: folium.Map, out_path: Path | str) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    m.save(str(out_path))
    print(f"Saved {out_path}")
    return out_path

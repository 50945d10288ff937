# -*- coding: utf-8 -*-
"""
Project paths and pipeline defaults for the Uber trip EDA.

Paths hang off PROJECT_ROOT: the repo root when running from a source
checkout, otherwise the current working directory (installed package).
Nothing is created here; the save helpers make their own directories.
"""

from pathlib import Path


def find_project_root(module_path: Path | str | None = None) -> Path:
    """
    Repo root if module_path sits in <root>/code/ of a checkout, else cwd.
    """
    if module_path is None:
        module_path = __file__
    here = Path(module_path).resolve()
    root = here.parents[1]
    if here.parent.name == "code" and (root / "pyproject.toml").exists():
        return root
    return Path.cwd()


PROJECT_ROOT = find_project_root()

DATA_DIR = PROJECT_ROOT / "data"
RAW_DIR = DATA_DIR / "raw"
PROCESSED_DIR = DATA_DIR / "processed"
PLOTS_DIR = PROJECT_ROOT / "plots"

DEFAULT_INPUT = RAW_DIR / "uber.csv"
DEFAULT_CLEAN_OUTPUT = PROCESSED_DIR / "uber_trips_clean.parquet"
DEFAULT_MAP_NAME = "pickup_map.html"

# Trips longer than this are treated as data-entry errors
MAX_DISTANCE_MILES = 20.0

# Cap on markers drawn on the pickup map (None = every trip)
DEFAULT_MAX_MARKERS = 5000

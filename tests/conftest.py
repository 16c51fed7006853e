"""
Shared pytest fixtures: small FARS accident files written to a temporary directory.
"""

import sys
from pathlib import Path

import pandas as pd
import pytest

# Project root, so the pipeline modules import without installing
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


ACCIDENTS_2013 = {
    "STATE": [1, 1, 2, 1],
    "ST_CASE": [10001, 10002, 20001, 10003],
    "MONTH": [1, 1, 2, 3],
    "LATITUDE": [32.1, 99.9999, 61.2, 31.5],
    "LONGITUD": [-86.5, -87.0, -149.9, 999.9999],
}

ACCIDENTS_2014 = {
    "STATE": [1, 1, 6, 6],
    "ST_CASE": [10001, 10002, 60001, 60002],
    "MONTH": [1, 2, 2, 12],
    "LATITUDE": [33.4, 34.0, 36.7, 37.3],
    "LONGITUD": [-86.8, -85.9, -119.7, -121.9],
}


def write_accident_file(directory, year, records):
    """Write records as a bz2-compressed accident_<year>.csv.bz2 file."""
    path = Path(directory) / f"accident_{year}.csv.bz2"
    pd.DataFrame(records).to_csv(path, index=False)
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding accident files for 2013 and 2014."""
    directory = tmp_path / "fars_data"
    directory.mkdir()
    write_accident_file(directory, 2013, ACCIDENTS_2013)
    write_accident_file(directory, 2014, ACCIDENTS_2014)
    return directory


@pytest.fixture
def output_dir(tmp_path):
    """Directory for generated maps and exports."""
    directory = tmp_path / "output"
    directory.mkdir()
    return directory

"""Shared fixtures: small FARS accident files written to a temp directory."""

from pathlib import Path

import pandas as pd
import pytest

# STATE, MONTH, LONGITUD, LATITUDE plus an extra pass-through column.
# 2013 state 1 holds one sentinel longitude and one sentinel latitude.
ACCIDENTS_2013 = [
    (1, 1,  -86.5,    32.5,    10001),
    (1, 1,  -87.0,    33.0,    10002),
    (1, 2,  999.9999, 34.0,    10003),
    (1, 3,  -85.0,    99.9999, 10004),
    (6, 1,  -120.0,   37.0,    60001),
    (6, 5,  -118.0,   34.0,    60002),
]

ACCIDENTS_2014 = [
    (1,  1,  -86.0,  32.0, 10001),
    (6,  2,  -119.0, 36.0, 60001),
    (6,  2,  -121.0, 38.0, 60002),
    (56, 12, -105.0, 41.0, 560001),
]

COLUMNS = ['STATE', 'MONTH', 'LONGITUD', 'LATITUDE', 'ST_CASE']


def write_accident_file(directory: Path, year: int, rows) -> Path:
    path = directory / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows, columns=COLUMNS).to_csv(path, index=False)
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding accident_2013.csv.bz2 and accident_2014.csv.bz2."""
    write_accident_file(tmp_path, 2013, ACCIDENTS_2013)
    write_accident_file(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path


@pytest.fixture
def in_data_dir(data_dir: Path, monkeypatch) -> Path:
    """Same files, with the working directory switched to them."""
    monkeypatch.chdir(data_dir)
    return data_dir

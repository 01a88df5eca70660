"""Shared fixtures: tiny bz2-compressed FARS accident files."""

import logging

import pandas as pd
import pytest

# 2013: Alabama (1) x3, Idaho (16) x2.  One row per sentinel kind.
ACCIDENTS_2013 = pd.DataFrame({
    'ST_CASE':  [10001, 10002, 10003, 160001, 160002],
    'STATE':    [1, 1, 1, 16, 16],
    'MONTH':    [1, 1, 2, 3, 3],
    'LATITUDE': [32.5, 33.1, 99.9999, 43.6, 44.0],
    'LONGITUD': [-86.7, -87.2, 999.9999, -116.2, 999.9999],
    'FATALS':   [1, 2, 1, 1, 3],
})

# 2014: Alabama (1) x1, Idaho (16) x2.
ACCIDENTS_2014 = pd.DataFrame({
    'ST_CASE':  [10001, 160001, 160002],
    'STATE':    [1, 16, 16],
    'MONTH':    [1, 5, 5],
    'LATITUDE': [31.9, 42.9, 47.1],
    'LONGITUD': [-85.4, -112.4, -116.8],
    'FATALS':   [1, 1, 1],
})


def write_fars_file(directory, year, df):
    path = directory / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression='bz2')
    return path


@pytest.fixture
def fars_dir(tmp_path):
    """Directory holding accident_2013 and accident_2014 (no 2016)."""
    write_fars_file(tmp_path, 2013, ACCIDENTS_2013)
    write_fars_file(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    """Drop handlers the CLI installs so streams don't leak between tests."""
    yield
    logger = logging.getLogger('fars')
    for handler in list(logger.handlers):
        if getattr(handler, '_fars_cli', False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

"""Shared test fixtures."""

import pytest

from pyisodur import Duration, parse


@pytest.fixture
def full_duration():
    return parse("P3Y6M4DT12H30M5.5S")


@pytest.fixture
def zero_duration():
    return Duration()


VALID_DURATIONS = [
    "P4Y",
    "PT2.5S",
    "P3Y6M4DT12H30M5.5S",
    "-PT5M",
    "-PT2H5M",
    "P1W",
    "P1M",
    "PT1M",
    "P1MT1M",
    "PT0.0000000000001S",
    "P0D",
    "PT0S",
]

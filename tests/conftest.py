import pytest

from trail_segmenter import Coordinate


@pytest.fixture
def tokyo_station():
    return Coordinate(lat=35.681236, lng=139.767125)


@pytest.fixture
def near_tokyo_station():
    return Coordinate(lat=35.681300, lng=139.767200)


@pytest.fixture
def shinjuku_station():
    return Coordinate(lat=35.658034, lng=139.701636)


@pytest.fixture
def walk():
    """A short walk near Tokyo Station, each step a few meters."""
    return [
        Coordinate(lat=35.681236, lng=139.767125),
        Coordinate(lat=35.681300, lng=139.767200),
        Coordinate(lat=35.681350, lng=139.767250),
    ]

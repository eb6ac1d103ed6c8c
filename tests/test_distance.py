from __future__ import annotations

import pytest

from rackfeed.models import Coordinate
from racklist.core.distance import distance_meters


def test_distance_zero_for_same_point() -> None:
    point = Coordinate(60.45, 22.25)

    assert distance_meters(point, point) == 0.0


def test_distance_one_degree_of_latitude() -> None:
    distance = distance_meters(Coordinate(60.0, 22.0), Coordinate(61.0, 22.0))

    assert distance == pytest.approx(111_195, abs=5)


def test_distance_is_symmetric() -> None:
    turku = Coordinate(60.4518, 22.2666)
    helsinki = Coordinate(60.1699, 24.9384)

    assert distance_meters(turku, helsinki) == pytest.approx(
        distance_meters(helsinki, turku)
    )
    assert distance_meters(turku, helsinki) == pytest.approx(150_000, rel=0.02)

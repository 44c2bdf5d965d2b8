"""Distance ranking: haversine properties and ordering contract."""

import math
import random

import pytest

from schools.ranking import EARTH_RADIUS_KM, distance_km, rank_by_distance, rank_schools

SAMPLE_POINTS = [
    (0.0, 0.0),
    (1.0, 1.0),
    (51.5074, -0.1278),
    (-33.8688, 151.2093),
    (90.0, 0.0),
    (-90.0, 180.0),
    (35.6762, 139.6503),
    (0.0, -180.0),
]


@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_distance_to_self_is_zero(point):
    assert distance_km(*point, *point) == 0.0


def test_distance_is_symmetric_and_non_negative():
    for a in SAMPLE_POINTS:
        for b in SAMPLE_POINTS:
            forward = distance_km(*a, *b)
            backward = distance_km(*b, *a)
            assert forward >= 0.0
            assert forward == pytest.approx(backward, abs=1e-9)


def test_one_degree_diagonal_from_origin():
    assert distance_km(0, 0, 1, 1) == pytest.approx(157.25, abs=0.01)


def test_antipodal_points_are_half_the_circumference():
    assert distance_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_known_city_pair():
    # London -> Paris is roughly 344 km on a spherical earth.
    assert distance_km(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(343.5, abs=1.0)


def test_rank_returns_every_point_once_in_non_decreasing_order():
    rng = random.Random(7)
    points = [(rng.uniform(-90, 90), rng.uniform(-180, 180)) for _ in range(200)]

    ranked = rank_by_distance((10.0, 20.0), points)

    assert sorted(point for point, _ in ranked) == sorted(points)
    distances = [distance for _, distance in ranked]
    assert distances == sorted(distances)


def test_rank_keeps_input_order_for_ties():
    points = [("b", 1.0, 0.0), ("a", -1.0, 0.0), ("c", 0.0, 1.0)]

    ranked = rank_by_distance((0.0, 0.0), points, key=lambda p: (p[1], p[2]))

    assert [p[0] for p, _ in ranked] == ["b", "a", "c"]


def test_rank_of_empty_input_is_empty():
    assert rank_by_distance((0.0, 0.0), []) == []


def test_rank_schools_shapes_rows_with_distance():
    rows = [
        {"id": 2, "name": "Far", "address": "B", "latitude": 1.0, "longitude": 1.0},
        {"id": 1, "name": "Near", "address": "A", "latitude": 0.0, "longitude": 0.0},
    ]

    ranked = rank_schools((0.0, 0.0), rows)

    assert [item["id"] for item in ranked] == [1, 2]
    assert ranked[0] == {
        "id": 1,
        "name": "Near",
        "address": "A",
        "latitude": 0.0,
        "longitude": 0.0,
        "distance": 0.0,
    }
    assert ranked[1]["distance"] == pytest.approx(157.25, abs=0.01)

"""
Great-circle distance and proximity ranking.

Pure functions only; nothing here touches the store.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, TypeVar

EARTH_RADIUS_KM = 6371.0

T = TypeVar("T")

LatLng = tuple[float, float]


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Haversine distance in kilometres between two points given in degrees.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push `a` a hair outside [0, 1] for antipodal points.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def rank_by_distance(
    origin: LatLng,
    points: Iterable[T],
    *,
    key: Callable[[T], LatLng] | None = None,
) -> list[tuple[T, float]]:
    """
    Pair every point with its distance from `origin`, nearest first.

    `key` extracts (lat, lng) from a point; by default points are (lat, lng)
    tuples themselves. Ties keep input order (sorted() is stable).
    """
    origin_lat, origin_lng = origin
    locate = key if key is not None else (lambda point: point)

    ranked: list[tuple[T, float]] = []
    for point in points:
        lat, lng = locate(point)
        ranked.append((point, distance_km(origin_lat, origin_lng, float(lat), float(lng))))
    return sorted(ranked, key=lambda item: item[1])


def rank_schools(origin: LatLng, rows: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Rank store rows and shape them as response items with a `distance` field.
    """
    ranked = rank_by_distance(
        origin,
        rows,
        key=lambda row: (row["latitude"], row["longitude"]),
    )
    return [
        {
            "id": int(row["id"]),
            "name": str(row["name"]),
            "address": str(row["address"]),
            "latitude": float(row["latitude"]),
            "longitude": float(row["longitude"]),
            "distance": distance,
        }
        for row, distance in ranked
    ]

"""
Pydantic schemas for the school endpoints, plus the parse-and-validate step
that turns untyped request input into typed structs.

Request bodies are accepted as-is (`Any` fields) so that every rejection
goes through `ValidationError` with a caller-readable message instead of a
generic framework error.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field

from core.errors import ValidationError

EMPTY_TEXT_MESSAGE = "Name and address must not be empty"
INVALID_COORDINATES_MESSAGE = "Invalid latitude or longitude values"
INVALID_ORIGIN_MESSAGE = "Latitude and longitude are required as numbers"

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


class AddSchoolRequest(BaseModel):
    name: Any = None
    address: Any = None
    latitude: Any = None
    longitude: Any = None


class NewSchool(BaseModel):
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=LATITUDE_RANGE[0], le=LATITUDE_RANGE[1])
    longitude: float = Field(..., ge=LONGITUDE_RANGE[0], le=LONGITUDE_RANGE[1])


class Origin(BaseModel):
    latitude: float
    longitude: float


class AddSchoolResponse(BaseModel):
    success: bool = True
    message: str
    schoolId: int


class RankedSchool(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float


class ListSchoolsResponse(BaseModel):
    success: bool = True
    count: int
    schools: list[RankedSchool]


def _clean_text(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def parse_number(value: Any) -> float | None:
    """
    Parse a JSON number or numeric string into a finite float.

    Returns None for anything else (missing, bool, blank, junk, NaN, +/-inf).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            number = float(raw)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _in_range(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def parse_new_school(payload: AddSchoolRequest) -> NewSchool:
    name = _clean_text(payload.name)
    address = _clean_text(payload.address)
    if name is None or address is None:
        raise ValidationError(EMPTY_TEXT_MESSAGE)

    latitude = parse_number(payload.latitude)
    longitude = parse_number(payload.longitude)
    if (
        latitude is None
        or longitude is None
        or not _in_range(latitude, LATITUDE_RANGE)
        or not _in_range(longitude, LONGITUDE_RANGE)
    ):
        raise ValidationError(INVALID_COORDINATES_MESSAGE)

    return NewSchool(name=name, address=address, latitude=latitude, longitude=longitude)


def parse_origin(lat: Any, lng: Any) -> Origin:
    # The origin is a search point, not a stored record: no range check.
    latitude = parse_number(lat)
    longitude = parse_number(lng)
    if latitude is None or longitude is None:
        raise ValidationError(INVALID_ORIGIN_MESSAGE)
    return Origin(latitude=latitude, longitude=longitude)

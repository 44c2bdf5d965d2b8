"""
School API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from core import db

from . import schemas, service

router = APIRouter()


@router.post("/addSchool", status_code=status.HTTP_201_CREATED)
async def add_school(
    payload: schemas.AddSchoolRequest,
    executor: db.Executor = Depends(db.get_pool),
) -> schemas.AddSchoolResponse:
    return await service.add_school(executor, payload)


@router.get("/listSchools")
async def list_schools(
    lat: str | None = Query(default=None),
    lng: str | None = Query(default=None),
    executor: db.Executor = Depends(db.get_pool),
) -> schemas.ListSchoolsResponse:
    """
    All schools, nearest to (lat, lng) first.
    """
    return await service.list_schools(executor, lat=lat, lng=lng)

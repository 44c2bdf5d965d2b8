"""
School business logic.

Flow:
- add: validate body -> one insert -> new id
- list: validate origin -> one select -> rank by distance

Store failures are logged here with full detail and re-raised as an opaque
`StorageError`; the caller only ever sees the public message.
"""

from __future__ import annotations

import logging
from typing import Any

from core import db
from core.errors import StorageError

from . import ranking, repository, schemas

ADD_SCHOOL_FAILED = "Database error while adding school"
LIST_SCHOOLS_FAILED = "Database error while listing schools"
SCHOOL_ADDED = "School added successfully"

logger = logging.getLogger(__name__)


async def add_school(executor: db.Executor, payload: schemas.AddSchoolRequest) -> schemas.AddSchoolResponse:
    school = schemas.parse_new_school(payload)

    try:
        school_id = await repository.insert_school(executor, school)
    except Exception as exc:
        logger.exception("add_school_failed name=%r", school.name)
        raise StorageError(ADD_SCHOOL_FAILED) from exc

    logger.info("school_added school_id=%s", school_id)
    return schemas.AddSchoolResponse(message=SCHOOL_ADDED, schoolId=school_id)


async def list_schools(executor: db.Executor, *, lat: Any, lng: Any) -> schemas.ListSchoolsResponse:
    origin = schemas.parse_origin(lat, lng)

    try:
        rows = await repository.list_schools(executor)
    except Exception as exc:
        logger.exception("list_schools_failed lat=%s lng=%s", origin.latitude, origin.longitude)
        raise StorageError(LIST_SCHOOLS_FAILED) from exc

    ranked = ranking.rank_schools((origin.latitude, origin.longitude), rows)
    return schemas.ListSchoolsResponse(
        count=len(ranked),
        schools=[schemas.RankedSchool(**item) for item in ranked],
    )

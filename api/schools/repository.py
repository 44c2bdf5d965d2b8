"""
School persistence (raw SQL).

Each function issues exactly one statement against the store it is given.
"""

from __future__ import annotations

from core import db

from .schemas import NewSchool


async def insert_school(executor: db.Executor, school: NewSchool) -> int:
    row = await db.fetch_one(
        executor,
        """
        INSERT INTO schools (name, address, latitude, longitude)
        VALUES ($1, $2, $3, $4)
        RETURNING id
        """,
        school.name,
        school.address,
        school.latitude,
        school.longitude,
    )
    if row is None:
        raise RuntimeError("Insert did not return a school id.")
    return int(row["id"])


async def list_schools(executor: db.Executor) -> list[dict]:
    return await db.fetch_all(
        executor,
        """
        SELECT id, name, address, latitude, longitude
        FROM schools
        """,
    )

"""Shared fixtures: an in-memory stand-in for the asyncpg pool + API client.

The fake pool answers the two statements the schools repository issues
(INSERT ... RETURNING id, SELECT ... FROM schools). The app lifespan is not
run, so no real database is needed.
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("CORS_ALLOW_ORIGINS", "*")

from core import db  # noqa: E402
from main import app  # noqa: E402


class FakePool:
    def __init__(self) -> None:
        self.rows: list[dict] = []
        self.statements: list[str] = []
        self.fail_with: Exception | None = None
        self._next_id = 1

    def seed(self, name: str, address: str, latitude: float, longitude: float) -> int:
        school_id = self._next_id
        self._next_id += 1
        self.rows.append(
            {
                "id": school_id,
                "name": name,
                "address": address,
                "latitude": latitude,
                "longitude": longitude,
            }
        )
        return school_id

    @property
    def inserts(self) -> int:
        return sum(1 for sql in self.statements if sql.strip().upper().startswith("INSERT"))

    async def fetchrow(self, query: str, *args):
        self.statements.append(query)
        if self.fail_with is not None:
            raise self.fail_with
        name, address, latitude, longitude = args
        return {"id": self.seed(name, address, latitude, longitude)}

    async def fetch(self, query: str, *args):
        self.statements.append(query)
        if self.fail_with is not None:
            raise self.fail_with
        return [dict(row) for row in self.rows]


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture
async def client(fake_pool):
    app.dependency_overrides[db.get_pool] = lambda: fake_pool
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

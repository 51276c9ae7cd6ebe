from __future__ import annotations

import os

# Must be set before the application settings are imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_CREATE_ALL"] = "true"

import pytest  # noqa: E402
from starlette.testclient import TestClient  # noqa: E402

from organization_management.core.config import Settings  # noqa: E402
from organization_management.core.database import Database  # noqa: E402
from organization_management.main import app  # noqa: E402
from organization_management.repositories.employee_repository import EmployeeRepository  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def database():
    db = Database()
    await db.initialize(Settings(DATABASE_URL=TEST_DATABASE_URL))
    yield db
    await db.close()


@pytest.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest.fixture
def repository(session):
    return EmployeeRepository(session)


@pytest.fixture
def employee_data() -> dict[str, str]:
    return {
        "first_name": "Grace",
        "last_name": "Hopper",
        "department": "Navy",
        "position": "Rear Admiral",
        "phone_number": "+1 555 0100",
    }

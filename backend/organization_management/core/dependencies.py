from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from organization_management.core.database import Database
from organization_management.repositories.employee_repository import EmployeeRepository


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_session(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:  # noqa: B008
    async with database.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_employee_repository(
    session: AsyncSession = Depends(get_session),  # noqa: B008
) -> EmployeeRepository:
    return EmployeeRepository(session)

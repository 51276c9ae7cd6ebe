"""Employee persistence on top of an async SQLAlchemy session."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from organization_management.models.employee import EmployeePatch, EmployeeSummary
from organization_management.models.tables import Employee
from organization_management.services.mapping import apply_patch, to_summary

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """CRUD operations for the ``employees`` table.

    The session is owned by the caller; every write commits immediately.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_all(self) -> list[Employee]:
        result = await self.session.execute(select(Employee))
        return list(result.scalars().all())

    async def get_by_id(self, employee_id: int) -> Employee | None:
        return await self.session.get(Employee, employee_id)

    async def get_details_by_id(self, employee_id: int) -> EmployeeSummary | None:
        employee = await self.get_by_id(employee_id)
        return to_summary(employee) if employee else None

    async def add(self, employee: Employee) -> Employee:
        self.session.add(employee)
        await self.session.commit()
        # Pick up the store-assigned id and created_at.
        await self.session.refresh(employee)
        logger.info("Added employee #%s", employee.id)
        return employee

    async def add_many(self, employees: list[Employee]) -> list[Employee]:
        """Insert several rows in one transaction; either all are stored or none."""
        self.session.add_all(employees)
        await self.session.commit()
        for employee in employees:
            await self.session.refresh(employee)
        logger.info("Added %d employees", len(employees))
        return employees

    async def update(self, patch: EmployeePatch) -> Employee | None:
        existing = await self.get_by_id(patch.id)
        if existing is None:
            logger.info("Update skipped, employee #%s does not exist", patch.id)
            return None

        apply_patch(existing, patch)
        await self.session.commit()
        logger.info("Updated employee #%s", patch.id)
        return existing

    async def delete(self, employee_id: int) -> bool:
        employee = await self.get_by_id(employee_id)
        if employee is None:
            return False

        await self.session.delete(employee)
        await self.session.commit()
        logger.info("Deleted employee #%s", employee_id)
        return True

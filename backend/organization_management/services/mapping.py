"""Conversions between the employee table, its summary projection and input models."""

from __future__ import annotations

from organization_management.models.employee import (
    EmployeeForm,
    EmployeeIngest,
    EmployeePatch,
    EmployeeSummary,
)
from organization_management.models.tables import Employee


class IncompleteEmployeeError(ValueError):
    pass


def full_name(first_name: str | None, last_name: str | None) -> str:
    return f"{first_name or ''} {last_name or ''}"


def to_summary(employee: Employee) -> EmployeeSummary:
    return EmployeeSummary(
        id=employee.id,
        full_name=full_name(employee.first_name, employee.last_name),
        department=employee.department,
        position=employee.position,
        phone_number=employee.phone_number,
    )


def to_form(employee: Employee) -> EmployeeForm:
    return EmployeeForm(
        first_name=employee.first_name,
        last_name=employee.last_name,
        department=employee.department,
        position=employee.position,
        phone_number=employee.phone_number,
    )


def form_to_employee(form: EmployeeForm) -> Employee:
    return Employee(
        first_name=form.first_name,
        last_name=form.last_name,
        department=form.department,
        position=form.position,
        phone_number=form.phone_number,
    )


def form_to_patch(employee_id: int, form: EmployeeForm) -> EmployeePatch:
    return EmployeePatch(
        id=employee_id,
        first_name=form.first_name,
        last_name=form.last_name,
        department=form.department,
        position=form.position,
        phone_number=form.phone_number,
    )


def ingest_to_employee(payload: EmployeeIngest) -> Employee:
    """Build a new row from an ingestion payload.

    ``full_name`` is never split; payloads without explicit names are refused.
    """
    if not payload.first_name or not payload.last_name:
        raise IncompleteEmployeeError("firstName and lastName are required")
    return Employee(
        first_name=payload.first_name,
        last_name=payload.last_name,
        department=payload.department,
        position=payload.position,
        phone_number=payload.phone_number,
    )


def apply_patch(existing: Employee, patch: EmployeePatch) -> Employee:
    """Copy every non-None field of ``patch`` onto ``existing``.

    ``id`` and ``created_at`` are never written. A field cannot be cleared this way.
    """
    if patch.first_name is not None:
        existing.first_name = patch.first_name
    if patch.last_name is not None:
        existing.last_name = patch.last_name
    if patch.department is not None:
        existing.department = patch.department
    if patch.position is not None:
        existing.position = patch.position
    if patch.phone_number is not None:
        existing.phone_number = patch.phone_number
    return existing

"""Pydantic models for employee views, forms and wire formats."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def blank_to_none(value: object) -> object:
    """Strip strings and turn empty ones into None."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class CamelModel(BaseModel):
    """Base for models exchanged with clients: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeSummary(CamelModel):
    """Read-only projection of an employee with a combined full name."""

    model_config = ConfigDict(title="Employee")

    id: int
    full_name: str | None = None
    department: str | None = None
    position: str | None = None
    phone_number: str | None = None


class EmployeeIngest(EmployeeSummary):
    """Payload accepted by the JSON/XML ingestion endpoints.

    ``fullName`` cannot be split back into first and last name, so the
    names travel separately. ``id`` and ``fullName`` are ignored on input.
    """

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("full_name", "department", "position", "phone_number", "first_name", "last_name", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        return blank_to_none(value)


class EmployeeForm(CamelModel):
    """Values submitted from the create/edit HTML forms."""

    first_name: str | None = None
    last_name: str | None = None
    department: str | None = None
    position: str | None = None
    phone_number: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        return blank_to_none(value)


class EmployeePatch(BaseModel):
    """Partial update: ``None`` means leave the stored value untouched."""

    id: int
    first_name: str | None = None
    last_name: str | None = None
    department: str | None = None
    position: str | None = None
    phone_number: str | None = None

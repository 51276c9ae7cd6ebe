from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel

from organization_management.services.serialization import has_illegal_xml_chars

REQUIRED_FIELDS: list[tuple[str, str, str]] = [
    ("first_name", "firstName", "First name"),
    ("last_name", "lastName", "Last name"),
]

TEXT_FIELDS: list[tuple[str, str, str]] = [
    *REQUIRED_FIELDS,
    ("department", "department", "Department"),
    ("position", "position", "Position"),
    ("phone_number", "phoneNumber", "Phone number"),
]


class FieldError(BaseModel):
    field: str
    message: str


class HasNames(Protocol):
    first_name: str | None
    last_name: str | None


def validate_employee(data: HasNames) -> list[FieldError]:
    """Return one error per missing, blank or unstorable field; empty means valid.

    Stored values must survive the XML export, so control characters are refused.
    """
    errors: list[FieldError] = []
    for attr, wire_name, label in REQUIRED_FIELDS:
        value = getattr(data, attr, None)
        if value is None or not str(value).strip():
            errors.append(FieldError(field=wire_name, message=f"{label} is required."))

    for attr, wire_name, label in TEXT_FIELDS:
        value = getattr(data, attr, None)
        if isinstance(value, str) and has_illegal_xml_chars(value):
            errors.append(FieldError(field=wire_name, message=f"{label} contains unsupported control characters."))
    return errors


def errors_by_field(errors: list[FieldError]) -> dict[str, str]:
    return {error.field: error.message for error in errors}

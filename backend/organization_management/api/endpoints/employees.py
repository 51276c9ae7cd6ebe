from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from organization_management.core.dependencies import get_employee_repository
from organization_management.models.employee import EmployeeIngest, EmployeeSummary
from organization_management.models.tables import Employee
from organization_management.repositories.employee_repository import EmployeeRepository
from organization_management.services.mapping import ingest_to_employee, to_summary
from organization_management.services.serialization import (
    DeserializationError,
    InputError,
    SerializationError,
    from_json,
    from_xml,
    to_json,
    to_xml,
)
from organization_management.services.validation import validate_employee

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employees", tags=["employees"])


async def _read_body(request: Request) -> str:
    raw = await request.body()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be UTF-8 encoded",
        ) from err


def _to_new_employees(payloads: list[EmployeeIngest]) -> list[Employee]:
    problems = []
    for index, payload in enumerate(payloads):
        errors = validate_employee(payload)
        if errors:
            problems.append({"index": index, "errors": [e.model_dump() for e in errors]})

    if problems:
        logger.warning("Rejected ingestion of %d employee(s): invalid fields", len(problems))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Invalid employee data", "invalid": problems},
        )

    return [ingest_to_employee(p) for p in payloads]


@router.get("/json")
async def list_employees_json(
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    summaries = [to_summary(e) for e in await repository.get_all()]
    return Response(content=to_json(summaries), media_type="application/json")


@router.get("/xml")
async def list_employees_xml(
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    summaries = [to_summary(e) for e in await repository.get_all()]
    try:
        content = to_xml(summaries, model=EmployeeSummary)
    except SerializationError as err:
        logger.error("XML export failed: %s", err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Stored employee data cannot be exported as XML",
        ) from err
    return Response(content=content, media_type="application/xml")


@router.post("/json")
async def create_employee_from_json(
    request: Request,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    body = await _read_body(request)
    try:
        payload = from_json(body, EmployeeIngest)
    except InputError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty or null JSON data",
        ) from err
    except DeserializationError as err:
        logger.warning("Invalid JSON payload: %s", err)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid JSON format: {err}",
        ) from err

    (employee,) = _to_new_employees([payload])
    created = await repository.add(employee)
    return {"created": [created.id]}


@router.post("/xml")
async def create_employees_from_xml(
    request: Request,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    body = await _read_body(request)
    try:
        parsed = from_xml(body, EmployeeIngest)
    except InputError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty or null XML data",
        ) from err
    except DeserializationError as err:
        logger.warning("Invalid XML payload: %s", err)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid XML data: {err}",
        ) from err

    payloads = parsed if isinstance(parsed, list) else [parsed]
    employees = _to_new_employees(payloads)
    created = await repository.add_many(employees)
    return {"created": [e.id for e in created]}

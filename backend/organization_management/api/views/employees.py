"""Server-rendered HTML pages for managing employees."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from organization_management.core.dependencies import get_employee_repository
from organization_management.models.employee import EmployeeForm
from organization_management.models.tables import Employee
from organization_management.repositories.employee_repository import EmployeeRepository
from organization_management.services.mapping import (
    form_to_employee,
    form_to_patch,
    to_form,
    to_summary,
)
from organization_management.services.validation import errors_by_field, validate_employee

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(prefix="/employees", tags=["employee pages"], default_response_class=HTMLResponse)


async def _read_form(request: Request) -> EmployeeForm:
    data = await request.form()
    return EmployeeForm.model_validate({key: value for key, value in data.items() if isinstance(value, str)})


async def _get_or_404(repository: EmployeeRepository, employee_id: int) -> Employee:
    employee = await repository.get_by_id(employee_id)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found",
        )
    return employee


def _redirect_to_list(request: Request) -> RedirectResponse:
    return RedirectResponse(
        url=str(request.url_for("list_employees")),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("")
async def list_employees(
    request: Request,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    employees = [to_summary(e) for e in await repository.get_all()]
    return templates.TemplateResponse(request, "employees/index.html", {"employees": employees})


@router.get("/new")
async def new_employee(request: Request):
    return templates.TemplateResponse(
        request,
        "employees/create.html",
        {"form": EmployeeForm(), "errors": {}},
    )


@router.post("")
async def create_employee(
    request: Request,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    form = await _read_form(request)
    errors = validate_employee(form)
    if errors:
        logger.warning("Rejected employee form: %s", ", ".join(e.field for e in errors))
        return templates.TemplateResponse(
            request,
            "employees/create.html",
            {"form": form, "errors": errors_by_field(errors)},
            status_code=422,
        )

    await repository.add(form_to_employee(form))
    return _redirect_to_list(request)


@router.get("/{employee_id}")
async def employee_details(
    request: Request,
    employee_id: int,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    employee = await repository.get_details_by_id(employee_id)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id {employee_id} not found",
        )
    return templates.TemplateResponse(request, "employees/details.html", {"employee": employee})


@router.get("/{employee_id}/edit")
async def edit_employee(
    request: Request,
    employee_id: int,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    employee = await _get_or_404(repository, employee_id)
    return templates.TemplateResponse(
        request,
        "employees/edit.html",
        {"employee_id": employee_id, "form": to_form(employee), "errors": {}},
    )


@router.post("/{employee_id}")
async def update_employee(
    request: Request,
    employee_id: int,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    form = await _read_form(request)
    errors = validate_employee(form)
    if errors:
        logger.warning("Rejected edit of employee #%s: %s", employee_id, ", ".join(e.field for e in errors))
        return templates.TemplateResponse(
            request,
            "employees/edit.html",
            {"employee_id": employee_id, "form": form, "errors": errors_by_field(errors)},
            status_code=422,
        )

    await repository.update(form_to_patch(employee_id, form))
    return _redirect_to_list(request)


@router.get("/{employee_id}/delete")
async def confirm_delete_employee(
    request: Request,
    employee_id: int,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    employee = await _get_or_404(repository, employee_id)
    return templates.TemplateResponse(request, "employees/delete.html", {"employee": to_summary(employee)})


@router.post("/{employee_id}/delete")
async def delete_employee(
    request: Request,
    employee_id: int,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    await repository.delete(employee_id)
    return _redirect_to_list(request)

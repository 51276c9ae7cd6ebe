from fastapi import APIRouter

from organization_management.api.endpoints import employees, health
from organization_management.api.views import employees as employee_views

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(employee_views.router)

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, status
from fastapi.responses import RedirectResponse

from organization_management.api.router import api_router
from organization_management.core.config import settings
from organization_management.core.database import Database
from organization_management.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings)
    database = Database()
    try:
        await database.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize Database, continuing without DB")
    application.state.database = database
    yield
    await database.close()


app = FastAPI(
    title="Organization Management",
    description="Employee records with HTML pages and JSON/XML endpoints",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/employees", status_code=status.HTTP_307_TEMPORARY_REDIRECT)

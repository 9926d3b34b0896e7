from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import inject
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.app.application.writer import DetachedTaskWriter
from src.app.domain.repositories import TaskStoreRepository
from src.app.infrastructure.database.orm import DatabaseOrm
from src.app.presentation.routes import router as tasks_router
from src.setup.api_config import ApiSettings, get_api_settings
from src.setup.app_config import configure_di
from src.setup.db_config import get_database_settings

logger = logging.getLogger(__name__)


async def _invalid_payload(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "Rejected request payload",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return JSONResponse(status_code=400, content={"detail": "Invalid request payload"})


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    store = inject.instance(TaskStoreRepository)
    await store.ping()
    logger.info("Connected to task store")
    if app.state.create_schema and get_database_settings().CREATE_SCHEMA:
        await inject.instance(DatabaseOrm).create_schema()
    writer = inject.instance(DetachedTaskWriter)
    await writer.start()
    try:
        yield
    finally:
        # Writes still queued here are dropped; the writer logs how many.
        await writer.stop()
        await store.close()


def create_app(settings: ApiSettings | None = None, *, create_schema: bool = True) -> FastAPI:
    """Build the task API. Serve with ``uvicorn --factory src.app.presentation.main:create_app``."""
    settings = settings or get_api_settings()
    configure_di()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Task CRUD API with background persistence of new tasks",
        lifespan=_lifespan,
    )
    app.state.create_schema = create_schema
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_payload)

    app.include_router(tasks_router, prefix="")
    return app

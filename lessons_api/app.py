"""
Application factory for the lessons API.

``create_app`` wires middleware and routers and registers a lifespan that
chooses the storage backend (MongoDB or in-memory) before the server accepts
requests. Run with::

    python -m lessons_api
    uvicorn lessons_api.app:app
"""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from lessons_api import __version__
from lessons_api.core.config import Settings, get_settings
from lessons_api.core.logging_config import setup_logging
from lessons_api.db.mongo import connect
from lessons_api.repositories import Repository
from lessons_api.routers import auth as auth_router
from lessons_api.routers import images as images_router
from lessons_api.routers import lessons as lessons_router
from lessons_api.routers import orders as orders_router
from lessons_api.routers import status as status_router
from lessons_api.routers.common import error_response
from lessons_api.services import AuthService, LessonService, OrderService, StatusService
from lessons_api.services.bootstrap import Connector, bootstrap, seed_repository

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log every request with method, path, status and duration."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.info("%s %s -> %s (%.1fms)", request.method, path, response.status_code, elapsed_ms)
        return response


def install_services(app: FastAPI, repository: Repository, settings: Settings) -> None:
    app.state.repository = repository
    app.state.lesson_service = LessonService(repository)
    app.state.order_service = OrderService(repository)
    app.state.auth_service = AuthService(repository)
    app.state.status_service = StatusService(repository, database=settings.db_name)


def create_app(
    settings: Settings | None = None,
    repository: Repository | None = None,
    connector: Connector = connect,
) -> FastAPI:
    """Build the FastAPI app.

    When ``repository`` is given it is used as-is (and seeded) instead of
    attempting a MongoDB connection.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if repository is not None:
            repo = repository
            seed_repository(repo)
        else:
            repo = bootstrap(settings, connector)
        install_services(app, repo, settings)
        try:
            yield
        finally:
            repo.close()

    app = FastAPI(title="Lessons API", version=__version__, lifespan=lifespan)
    app.state.settings = settings

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else list(settings.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return error_response(400, "Invalid request body")

    app.include_router(status_router.router)
    app.include_router(lessons_router.router)
    app.include_router(orders_router.router)
    app.include_router(auth_router.router)
    app.include_router(images_router.router)
    return app


# Module-level instance for uvicorn; the storage backend is chosen in lifespan.
app = create_app()

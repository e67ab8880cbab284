"""FastAPI application for the task tracker API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .api.routes import router as tasks_router
from .db import Database
from .errors import ApiError, api_error_handler, request_validation_handler
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app and wire settings -> database -> routes explicitly."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    database = Database(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Task Tracker API (environment=%s)...", settings.environment)
        logger.info("CORS allowed origin=%s", settings.allowed_origin)
        try:
            database.create_all()
        except Exception:
            logger.exception("Failed to initialize database")
            raise
        yield
        logger.info("Shutting down Task Tracker API...")
        database.dispose()

    app = FastAPI(
        title="Task Tracker API",
        description="Create, list, update, complete and delete tasks",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added after CORS so it is the outer layer and also stamps preflight responses.
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/")
    def root() -> Dict[str, str]:
        """Root endpoint with basic API info."""
        return {
            "message": "Task Tracker API",
            "endpoints": "/api/tasks",
        }

    @app.get("/health")
    def health():
        try:
            database.ping()
        except SQLAlchemyError:
            logger.exception("Health check could not reach the database")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unavailable"},
            )
        return {"status": "ok"}

    app.include_router(tasks_router)
    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tasktracker.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

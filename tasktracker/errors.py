"""API error types and their JSON rendering."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error, "message": self.message}


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "validation_error"

    def __init__(self, errors: Sequence[FieldError], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.errors: List[FieldError] = list(errors)

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = [asdict(item) for item in self.errors]
        return payload


class TaskNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class UnexpectedError(ApiError):
    """Opaque server error; the underlying exception is logged, never returned."""


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in {"body", "path", "query"}:
        parts = parts[1:]
    return ".".join(parts) or "body"


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(field=_field_name(item.get("loc", ())), message=item.get("msg", "Invalid value"))
        for item in exc.errors()
    ]
    logger.info("Rejected %s %s: %d invalid field(s)", request.method, request.url.path, len(errors))
    failure = ValidationFailed(errors)
    return JSONResponse(status_code=failure.status_code, content=failure.to_dict())

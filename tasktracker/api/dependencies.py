"""Dependency providers for the task API.

Everything is built once in ``create_app`` and parked on ``app.state``;
these providers only hand those objects to the routes.
"""

from fastapi import Depends, Request

from ..db import Database
from ..repositories.task_repository import TaskRepository
from ..services.task_service import TaskService


def get_database(request: Request) -> Database:
    """Provide the database bound to the running app."""
    return request.app.state.database


def get_task_repository(
    database: Database = Depends(get_database),
) -> TaskRepository:
    """Provide the task repository."""
    return TaskRepository(database)


def get_task_service(
    repository: TaskRepository = Depends(get_task_repository),
) -> TaskService:
    """Provide the task service."""
    return TaskService(repository)

"""Shared fixtures: every test gets its own in-memory SQLite database."""

import sys
from pathlib import Path
from typing import Iterator

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402
from pytest import fixture  # noqa: E402

from tasktracker.db import Database  # noqa: E402
from tasktracker.main import create_app  # noqa: E402
from tasktracker.repositories.task_repository import TaskRepository  # noqa: E402
from tasktracker.services.task_service import TaskService  # noqa: E402
from tasktracker.settings import DEFAULT_ALLOWED_ORIGIN, Settings  # noqa: E402

CLIENT_ORIGIN = DEFAULT_ALLOWED_ORIGIN


@fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", allowed_origin=CLIENT_ORIGIN)


@fixture
def database(settings: Settings) -> Iterator[Database]:
    database = Database(settings.database_url)
    database.create_all()
    yield database
    database.dispose()


@fixture
def repository(database: Database) -> TaskRepository:
    return TaskRepository(database)


@fixture
def task_service(repository: TaskRepository) -> TaskService:
    return TaskService(repository)


@fixture
def app(settings: Settings):
    return create_app(settings)


@fixture
def client(app) -> Iterator[TestClient]:
    """TestClient used as a context manager so the lifespan creates the schema."""
    with TestClient(app) as test_client:
        yield test_client

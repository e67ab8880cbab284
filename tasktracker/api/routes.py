"""API routes for task management."""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from ..errors import TaskNotFound, UnexpectedError, ValidationFailed
from ..logging_utils import task_context
from ..models.task import Task, TaskCreate, TaskUpdate
from ..services.task_service import TaskService
from ..validation import build_draft, validate_task_create, validate_task_update
from .dependencies import get_task_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

# Same range as the INTEGER id column; anything outside it is a malformed id.
TaskId = Annotated[int, Path(ge=-2_147_483_648, le=2_147_483_647)]


@router.get("", response_model=List[Task])
def list_tasks(service: TaskService = Depends(get_task_service)) -> List[Task]:
    """Get all tasks, newest first."""
    try:
        return service.list_tasks()
    except Exception as exc:
        logger.exception("Error retrieving all tasks")
        raise UnexpectedError("An error occurred while retrieving tasks") from exc


@router.get("/{task_id}", response_model=Task)
def get_task(
    task_id: TaskId,
    service: TaskService = Depends(get_task_service),
) -> Task:
    """Get a specific task by ID."""
    with task_context(task_id):
        try:
            task = service.get_task(task_id)
        except Exception as exc:
            logger.exception("Error retrieving task with ID %s", task_id)
            raise UnexpectedError("An error occurred while retrieving the task") from exc
    if task is None:
        raise TaskNotFound(task_id)
    return task


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: TaskCreate,
    request: Request,
    response: Response,
    service: TaskService = Depends(get_task_service),
) -> Task:
    """Create a new task."""
    errors = validate_task_create(payload)
    if errors:
        raise ValidationFailed(errors)
    try:
        task = service.create_task(build_draft(payload))
    except Exception as exc:
        logger.exception("Error creating task")
        raise UnexpectedError("An error occurred while creating the task") from exc
    with task_context(task.id):
        logger.info("Created task")
    response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
    return task


@router.put("/{task_id}", response_model=Task)
def update_task(
    task_id: TaskId,
    payload: TaskUpdate,
    service: TaskService = Depends(get_task_service),
) -> Task:
    """Replace the editable fields of an existing task."""
    errors = validate_task_update(payload)
    if errors:
        raise ValidationFailed(errors)
    with task_context(task_id):
        try:
            task = service.update_task(task_id, build_draft(payload))
        except Exception as exc:
            logger.exception("Error updating task %s", task_id)
            raise UnexpectedError("An error occurred while updating the task") from exc
    if task is None:
        raise TaskNotFound(task_id)
    return task


@router.put("/{task_id}/complete", status_code=status.HTTP_204_NO_CONTENT)
def mark_task_complete(
    task_id: TaskId,
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Mark a task as complete."""
    with task_context(task_id):
        try:
            success = service.mark_task_complete(task_id)
        except Exception as exc:
            logger.exception("Error marking task %s as complete", task_id)
            raise UnexpectedError("An error occurred while updating the task") from exc
    if not success:
        raise TaskNotFound(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: TaskId,
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Delete a task."""
    with task_context(task_id):
        try:
            success = service.delete_task(task_id)
        except Exception as exc:
            logger.exception("Error deleting task %s", task_id)
            raise UnexpectedError("An error occurred while deleting the task") from exc
    if not success:
        raise TaskNotFound(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

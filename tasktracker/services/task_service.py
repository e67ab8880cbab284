"""Task service - thin layer between the API and the repository."""

from __future__ import annotations

from typing import List, Optional

from ..models.task import Task, TaskDraft
from ..repositories.task_repository import TaskRepository


class TaskService:
    """Service for task operations."""

    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository

    def list_tasks(self) -> List[Task]:
        return self.repository.get_all()

    def get_task(self, task_id: int) -> Optional[Task]:
        return self.repository.get_by_id(task_id)

    def create_task(self, draft: TaskDraft) -> Task:
        return self.repository.insert(draft)

    def update_task(self, task_id: int, draft: TaskDraft) -> Optional[Task]:
        return self.repository.update(task_id, draft)

    def delete_task(self, task_id: int) -> bool:
        return self.repository.delete(task_id)

    def mark_task_complete(self, task_id: int) -> bool:
        return self.repository.mark_complete(task_id)

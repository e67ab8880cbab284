"""Request, response and draft models for tasks."""

from .task import DEFAULT_STATUS, Priority, Task, TaskCreate, TaskDraft, TaskUpdate

__all__ = [
    "DEFAULT_STATUS",
    "Priority",
    "Task",
    "TaskCreate",
    "TaskDraft",
    "TaskUpdate",
]

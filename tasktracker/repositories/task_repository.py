"""Task repository - data access layer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select

from ..db import Database, TaskRecord, utcnow
from ..models.task import Priority, Task, TaskDraft


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive values are UTC: SQLite drops tzinfo on the way in and out.
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_task(record: TaskRecord) -> Task:
    return Task(
        id=record.id,
        title=record.title,
        description=record.description,
        created_date=_as_utc(record.created_date),
        due_date=_as_utc(record.due_date),
        priority=Priority(record.priority),
        status=record.status,
        is_completed=record.is_completed,
    )


def _apply_draft(record: TaskRecord, draft: TaskDraft) -> None:
    record.title = draft.title
    record.description = draft.description
    record.due_date = _as_utc(draft.due_date)
    record.priority = draft.priority.value
    record.status = draft.status
    record.is_completed = draft.is_completed


class TaskRepository:
    """Repository for task data access backed by SQLAlchemy."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def get_all(self) -> List[Task]:
        """Get all tasks, most recently created first."""
        with self._database.session() as session:
            stmt = select(TaskRecord).order_by(
                TaskRecord.created_date.desc(),
                TaskRecord.id.desc(),
            )
            return [_to_task(record) for record in session.scalars(stmt)]

    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get task by ID."""
        with self._database.session() as session:
            record = session.get(TaskRecord, task_id)
            return _to_task(record) if record else None

    def insert(self, draft: TaskDraft) -> Task:
        """Persist a new task; storage assigns the id and creation time."""
        with self._database.session() as session:
            record = TaskRecord(created_date=utcnow())
            _apply_draft(record, draft)
            session.add(record)
            session.commit()
            session.refresh(record)
            return _to_task(record)

    def update(self, task_id: int, draft: TaskDraft) -> Optional[Task]:
        """Overwrite the mutable fields of an existing task."""
        with self._database.session() as session:
            record = session.get(TaskRecord, task_id)
            if not record:
                return None
            _apply_draft(record, draft)
            session.commit()
            session.refresh(record)
            return _to_task(record)

    def delete(self, task_id: int) -> bool:
        """Delete a task."""
        with self._database.session() as session:
            record = session.get(TaskRecord, task_id)
            if not record:
                return False
            session.delete(record)
            session.commit()
            return True

    def mark_complete(self, task_id: int) -> bool:
        """Flag a task as completed. Completing a completed task still succeeds."""
        with self._database.session() as session:
            record = session.get(TaskRecord, task_id)
            if not record:
                return False
            record.is_completed = True
            session.commit()
            return True

    def clear(self) -> None:
        """Remove every stored task (testing helper). Ids keep counting up."""
        with self._database.session() as session:
            session.execute(delete(TaskRecord))
            session.commit()

"""Explicit validation for task payloads.

Each ``validate_*`` function returns a list of field errors; an empty list
means the payload may be turned into a :class:`TaskDraft` with ``build_draft``.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .errors import FieldError
from .models.task import DEFAULT_STATUS, Priority, TaskCreate, TaskDraft, TaskUpdate

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
STATUS_MAX_LENGTH = 50


def _clean(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


def parse_priority(value: Optional[str]) -> Optional[Priority]:
    """Resolve a priority name case-insensitively; blank means the default."""
    cleaned = _clean(value)
    if not cleaned:
        return Priority.MEDIUM
    for priority in Priority:
        if priority.value.casefold() == cleaned.casefold():
            return priority
    return None


def _validate_fields(payload: TaskCreate) -> List[FieldError]:
    errors: List[FieldError] = []

    title = _clean(payload.title)
    if not title:
        errors.append(FieldError("title", "Title is required"))
    elif len(title) > TITLE_MAX_LENGTH:
        errors.append(
            FieldError("title", f"Title must be between 1 and {TITLE_MAX_LENGTH} characters")
        )

    description = _clean(payload.description)
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError(
                "description",
                f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            )
        )

    status = _clean(payload.status)
    if status is not None and len(status) > STATUS_MAX_LENGTH:
        errors.append(FieldError("status", f"Status cannot exceed {STATUS_MAX_LENGTH} characters"))

    if parse_priority(payload.priority) is None:
        allowed = ", ".join(priority.value for priority in Priority)
        errors.append(FieldError("priority", f"Priority must be one of {allowed}"))

    return errors


def validate_task_create(payload: TaskCreate) -> List[FieldError]:
    return _validate_fields(payload)


def validate_task_update(payload: TaskUpdate) -> List[FieldError]:
    # isCompleted is type-checked by the model itself.
    return _validate_fields(payload)


def build_draft(payload: Union[TaskCreate, TaskUpdate]) -> TaskDraft:
    """Trim and default a payload that passed validation."""
    status = _clean(payload.status)
    return TaskDraft(
        title=(payload.title or "").strip(),
        description=_clean(payload.description),
        due_date=payload.due_date,
        priority=parse_priority(payload.priority) or Priority.MEDIUM,
        status=status if status else DEFAULT_STATUS,
        is_completed=getattr(payload, "is_completed", False),
    )

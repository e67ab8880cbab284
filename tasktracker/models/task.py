"""Task data models using Pydantic."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

DEFAULT_STATUS = "Pending"


class Priority(str, Enum):
    """Fixed set of task priorities."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskCreate(BaseModel):
    """Payload for creating tasks.

    Fields are loosely typed on purpose; lengths, blank titles and priority
    names are checked by ``tasktracker.validation`` so that every rule
    produces the same field-level 400 response.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    priority: Optional[str] = None
    status: Optional[str] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date_is_iso_text(cls, value):
        # Bare numbers would otherwise be read as Unix timestamps.
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str) and not value.strip().lstrip("+-").replace(".", "", 1).isdigit():
            return value
        raise ValueError("dueDate must be an ISO 8601 date-time string")


class TaskUpdate(TaskCreate):
    """Payload for replacing the editable fields of a task."""

    is_completed: StrictBool = Field(False, alias="isCompleted")


class Task(BaseModel):
    """Task as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = None
    created_date: datetime = Field(..., alias="createdDate")
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    priority: Priority = Priority.MEDIUM
    status: Optional[str] = DEFAULT_STATUS
    is_completed: bool = Field(False, alias="isCompleted")


@dataclass(frozen=True)
class TaskDraft:
    """Validated, trimmed field values handed to the repository."""

    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Priority = Priority.MEDIUM
    status: Optional[str] = DEFAULT_STATUS
    is_completed: bool = False

# taskboard/ui/models.py

from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class TaskStatus(StrEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        """Unknown or missing values fall back to PENDING."""
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING


class TaskPriority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: Any) -> TaskPriority:
        """Unknown or missing values fall back to LOW."""
        try:
            return cls(raw)
        except ValueError:
            return cls.LOW


class Task(BaseModel):
    """
    One row of the remote task table as the UI sees it.

    Frozen: local patches go through model_copy(update=...), so every field
    the patch does not name is carried over untouched.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: datetime | None = None
    created_at: datetime
    user_id: str

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v: Any) -> TaskStatus:
        return TaskStatus.parse(v)

    @field_validator("priority", mode="before")
    @classmethod
    def _priority(cls, v: Any) -> TaskPriority:
        return TaskPriority.parse(v)

    @field_validator("due_date", "created_at")
    @classmethod
    def _as_utc(cls, v: datetime | None) -> datetime | None:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: str

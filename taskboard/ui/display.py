# taskboard/ui/display.py

"""
Pure display helpers: enum -> label/tone lookups and the status transitions
offered to the user.

All lookups are total. A value outside the enum gets the default row
(pending for status, low for priority) instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from . import strings
from .models import TaskPriority, TaskStatus


class Tone(StrEnum):
    NEUTRAL = "neutral"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True, slots=True)
class Badge:
    label: str
    tone: Tone


@dataclass(frozen=True, slots=True)
class Transition:
    target: TaskStatus
    label: str
    primary: bool = False


_STATUS_BADGES: dict[TaskStatus, Badge] = {
    TaskStatus.PENDING: Badge(strings.STATUS_PENDING, Tone.NEUTRAL),
    TaskStatus.IN_PROGRESS: Badge(strings.STATUS_IN_PROGRESS, Tone.WARNING),
    TaskStatus.COMPLETED: Badge(strings.STATUS_COMPLETED, Tone.SUCCESS),
}

_PRIORITY_BADGES: dict[TaskPriority, Badge] = {
    TaskPriority.LOW: Badge(strings.PRIORITY_LOW, Tone.INFO),
    TaskPriority.MEDIUM: Badge(strings.PRIORITY_MEDIUM, Tone.WARNING),
    TaskPriority.HIGH: Badge(strings.PRIORITY_HIGH, Tone.DANGER),
}

# pending -> in_progress -> completed -> pending, plus pending -> completed.
_TRANSITIONS: dict[TaskStatus, tuple[Transition, ...]] = {
    TaskStatus.PENDING: (
        Transition(TaskStatus.IN_PROGRESS, strings.ACTION_START, primary=True),
        Transition(TaskStatus.COMPLETED, strings.ACTION_COMPLETE),
    ),
    TaskStatus.IN_PROGRESS: (
        Transition(TaskStatus.COMPLETED, strings.ACTION_COMPLETE),
    ),
    TaskStatus.COMPLETED: (
        Transition(TaskStatus.PENDING, strings.ACTION_REOPEN),
    ),
}


def status_badge(status: Any) -> Badge:
    return _STATUS_BADGES[TaskStatus.parse(status)]


def priority_badge(priority: Any) -> Badge:
    return _PRIORITY_BADGES[TaskPriority.parse(priority)]


def allowed_transitions(status: Any) -> tuple[Transition, ...]:
    """Status changes offered for a task currently in `status`."""
    return _TRANSITIONS[TaskStatus.parse(status)]


def is_allowed_transition(current: Any, target: Any) -> bool:
    try:
        target = TaskStatus(target)
    except ValueError:
        return False
    return any(t.target is target for t in allowed_transitions(current))


def format_due_date(due: datetime | None) -> str:
    """Render a due timestamp as a calendar date, e.g. '18. 10. 2026.'."""
    if due is None:
        return ""
    return f"{due.day}. {due.month}. {due.year}."

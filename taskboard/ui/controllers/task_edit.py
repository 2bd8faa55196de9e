# taskboard/ui/controllers/task_edit.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone
from typing import Any

from .. import strings
from ..client import AuthError, StoreError
from ..models import Task, TaskPriority
from ..ports import AuthProvider, NoticeKind, Notifier, TaskTable

logger = logging.getLogger(__name__)


def due_date_to_input(due: datetime | None) -> date | None:
    """Stored timestamp -> calendar date shown in the date input (UTC)."""
    if due is None:
        return None
    if due.tzinfo is not None:
        due = due.astimezone(timezone.utc)
    return due.date()


def input_to_due_date(day: date | None) -> datetime | None:
    """Calendar date from the form -> UTC start-of-day timestamp."""
    if day is None:
        return None
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


class TaskEditController:
    """
    One create-or-update form.

    Seeded with a task it edits that task; without one it creates a new task
    for the signed-in user. submit() issues at most one remote command and
    reports the stored record through on_save.
    """

    def __init__(
        self,
        table: TaskTable,
        auth: AuthProvider,
        notifier: Notifier,
        *,
        task: Task | None = None,
        on_save: Callable[[Task], None],
        on_cancel: Callable[[], None],
    ) -> None:
        self._table = table
        self._auth = auth
        self._notifier = notifier
        self._on_save = on_save
        self._on_cancel = on_cancel

        self.task = task
        self.title: str = task.title if task else ""
        self.description: str = (task.description or "") if task else ""
        self.priority: TaskPriority = task.priority if task else TaskPriority.MEDIUM
        self.due_date: date | None = due_date_to_input(task.due_date) if task else None
        self.submitting = False

    @property
    def is_edit(self) -> bool:
        return self.task is not None

    @property
    def is_valid(self) -> bool:
        return bool(self.title.strip())

    def payload(self) -> dict[str, Any]:
        return {
            "title": self.title.strip(),
            "description": self.description or None,
            "priority": TaskPriority.parse(self.priority),
            "due_date": input_to_due_date(self.due_date),
        }

    def _save(self, payload: dict[str, Any]) -> Task:
        if self.task is not None:
            return self._table.update(self.task.id, payload)

        user = self._auth.get_user()
        if user is None:
            raise AuthError("User not authenticated")
        return self._table.insert({**payload, "user_id": user.id})

    def submit(self) -> bool:
        if not self.is_valid:
            logger.debug("Submit rejected: empty title")
            return False

        self.submitting = True
        try:
            saved = self._save(self.payload())
        except StoreError:
            logger.exception(
                "Task %s failed task_id=%s",
                "update" if self.is_edit else "create",
                self.task.id if self.task else None,
            )
            self._notifier.notify(
                NoticeKind.ERROR,
                strings.ERROR_TITLE,
                strings.UPDATE_FAILED if self.is_edit else strings.CREATE_FAILED,
            )
            return False
        finally:
            self.submitting = False

        self._on_save(saved)
        self._notifier.notify(
            NoticeKind.SUCCESS,
            strings.SUCCESS_TITLE,
            strings.UPDATED if self.is_edit else strings.CREATED,
        )
        return True

    def cancel(self) -> None:
        self._on_cancel()

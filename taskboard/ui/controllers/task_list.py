# taskboard/ui/controllers/task_list.py

from __future__ import annotations

import logging

from .. import strings
from ..client import StoreError
from ..display import is_allowed_transition
from ..models import Task, TaskStatus
from ..ports import AuthProvider, NoticeKind, Notifier, TaskTable
from .task_edit import TaskEditController

logger = logging.getLogger(__name__)


class TaskListController:
    """
    Local view of the signed-in user's tasks.

    `tasks` is the last successful load() result, newest first, patched in
    place after each confirmed mutation. Nothing here changes `tasks` before
    the store has accepted the command.
    """

    def __init__(self, table: TaskTable, auth: AuthProvider, notifier: Notifier) -> None:
        self._table = table
        self._auth = auth
        self._notifier = notifier

        self.tasks: list[Task] = []
        self.loading = True
        self.editor: TaskEditController | None = None

    @property
    def editing(self) -> bool:
        return self.editor is not None

    def _success(self, description: str) -> None:
        self._notifier.notify(NoticeKind.SUCCESS, strings.SUCCESS_TITLE, description)

    def _error(self, description: str) -> None:
        self._notifier.notify(NoticeKind.ERROR, strings.ERROR_TITLE, description)

    def find(self, task_id: str) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    # ---- remote operations ----

    def load(self) -> None:
        try:
            tasks = self._table.select_all()
        except StoreError:
            logger.exception("Loading tasks failed")
            self._error(strings.LOAD_FAILED)
            return
        finally:
            self.loading = False

        self.tasks = list(tasks)
        logger.info("Loaded %d tasks", len(self.tasks))

    def delete(self, task_id: str) -> bool:
        try:
            self._table.delete(task_id)
        except StoreError:
            logger.exception("Deleting task failed task_id=%s", task_id)
            self._error(strings.DELETE_FAILED)
            return False

        self.tasks = [t for t in self.tasks if t.id != task_id]
        self._success(strings.DELETED)
        return True

    def change_status(self, task_id: str, new_status: TaskStatus) -> bool:
        current = self.find(task_id)
        if current is None or not is_allowed_transition(current.status, new_status):
            logger.warning(
                "Rejected status change task_id=%s from=%s to=%s",
                task_id,
                current.status if current else None,
                new_status,
            )
            self._error(strings.STATUS_FAILED)
            return False

        new_status = TaskStatus(new_status)
        try:
            self._table.update(task_id, {"status": new_status})
        except StoreError:
            logger.exception("Status change failed task_id=%s to=%s", task_id, new_status)
            self._error(strings.STATUS_FAILED)
            return False

        self.tasks = [
            t.model_copy(update={"status": new_status}) if t.id == task_id else t
            for t in self.tasks
        ]
        self._success(strings.STATUS_UPDATED)
        return True

    def sign_out(self) -> bool:
        try:
            self._auth.sign_out()
        except StoreError:
            logger.exception("Sign-out failed")
            self._error(strings.SIGN_OUT_FAILED)
            return False

        self.tasks = []
        self.editor = None
        return True

    # ---- edit mode ----

    def begin_create(self) -> TaskEditController:
        return self._begin(None)

    def begin_edit(self, task: Task) -> TaskEditController:
        return self._begin(task)

    def _begin(self, seed: Task | None) -> TaskEditController:
        def on_save(saved: Task) -> None:
            if seed is None:
                self.tasks = [saved, *self.tasks]
            else:
                self.tasks = [saved if t.id == saved.id else t for t in self.tasks]
            self.editor = None

        def on_cancel() -> None:
            self.editor = None

        self.editor = TaskEditController(
            self._table,
            self._auth,
            self._notifier,
            task=seed,
            on_save=on_save,
            on_cancel=on_cancel,
        )
        return self.editor

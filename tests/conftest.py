# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from taskboard.ui.controllers import TaskListController
from taskboard.ui.models import Task, TaskPriority, TaskStatus, User

from .fakes import FakeAuth, FakeTaskTable, RecordingNotifier

T0 = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def user() -> User:
    return User(id="user-1", email="ana@example.com")


@pytest.fixture()
def seed_tasks(user: User) -> list[Task]:
    """Three tasks with distinct created_at, deliberately not in display order."""
    return [
        Task(
            id="t-old",
            title="Pay rent",
            status=TaskStatus.COMPLETED,
            priority=TaskPriority.HIGH,
            created_at=T0,
            user_id=user.id,
        ),
        Task(
            id="t-new",
            title="Call plumber",
            description="Kitchen sink",
            status=TaskStatus.PENDING,
            priority=TaskPriority.LOW,
            due_date=datetime(2026, 10, 20, tzinfo=timezone.utc),
            created_at=T0 + timedelta(days=2),
            user_id=user.id,
        ),
        Task(
            id="t-mid",
            title="Write report",
            status=TaskStatus.IN_PROGRESS,
            created_at=T0 + timedelta(days=1),
            user_id=user.id,
        ),
    ]


@pytest.fixture()
def table(seed_tasks: list[Task]) -> FakeTaskTable:
    return FakeTaskTable(seed_tasks)


@pytest.fixture()
def auth(user: User) -> FakeAuth:
    return FakeAuth(user=user)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def controller(table: FakeTaskTable, auth: FakeAuth, notifier: RecordingNotifier) -> TaskListController:
    return TaskListController(table, auth, notifier)


@pytest.fixture()
def loaded(controller: TaskListController, table: FakeTaskTable, notifier: RecordingNotifier) -> TaskListController:
    controller.load()
    table.calls.clear()
    notifier.notices.clear()
    return controller

# tests/test_end_to_end.py

"""Controllers -> HTTP client -> store API, wired together in-process."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from taskboard.store.db.session import get_session
from taskboard.store.main import app
from taskboard.ui.client import TaskStoreClient
from taskboard.ui.controllers import TaskListController
from taskboard.ui.models import TaskPriority, TaskStatus
from taskboard.ui import ports
from taskboard.ui.notify import LoggingNotifier
from taskboard.ui.ports import NoticeKind

from .fakes import RecordingNotifier, TestClientSession


@pytest.fixture()
def client():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)

    def _session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session
    yield TaskStoreClient("http://testserver/api/v1", session=TestClientSession(TestClient(app)))
    app.dependency_overrides.clear()


def test_full_lifecycle(client) -> None:
    user = client.sign_in("ana@example.com")
    notifier = RecordingNotifier()
    ctl = TaskListController(client, client, notifier)

    ctl.load()
    assert ctl.tasks == []

    editor = ctl.begin_create()
    editor.title = "Buy milk"
    assert editor.submit() is True
    editor = ctl.begin_create()
    editor.title = "Pay rent"
    editor.priority = TaskPriority.LOW
    editor.due_date = date(2026, 11, 1)
    assert editor.submit() is True

    assert [t.title for t in ctl.tasks] == ["Pay rent", "Buy milk"]
    assert all(t.user_id == user.id for t in ctl.tasks)
    rent = ctl.tasks[0]
    assert rent.due_date == datetime(2026, 11, 1, tzinfo=timezone.utc)

    assert ctl.change_status(rent.id, TaskStatus.COMPLETED) is True
    editor = ctl.begin_edit(ctl.find(rent.id))
    editor.priority = TaskPriority.HIGH
    assert editor.submit() is True

    milk = ctl.tasks[1]
    assert ctl.delete(milk.id) is True
    assert all(n.kind is NoticeKind.SUCCESS for n in notifier.notices)

    local = list(ctl.tasks)
    ctl.load()
    assert ctl.tasks == local
    assert ctl.tasks[0].status is TaskStatus.COMPLETED
    assert ctl.tasks[0].priority is TaskPriority.HIGH


def test_create_after_sign_out_reports_failure(client) -> None:
    client.sign_in("ana@example.com")
    notifier = RecordingNotifier()
    ctl = TaskListController(client, client, notifier)
    ctl.load()
    editor = ctl.begin_create()
    editor.title = "Buy milk"

    client.sign_out()

    assert editor.submit() is False
    assert ctl.tasks == []
    assert notifier.notices[-1].kind is NoticeKind.ERROR


def test_logging_notifier_writes_to_log(caplog) -> None:
    with caplog.at_level("INFO", logger="taskboard.ui.notify"):
        LoggingNotifier().notify(NoticeKind.ERROR, "Greška", "Nije moguće učitati zadatke")

    assert caplog.records[-1].levelname == "ERROR"
    assert "Nije moguće učitati zadatke" in caplog.records[-1].getMessage()


def test_store_reports_healthy(client) -> None:
    assert client.health() is True


def test_stale_session_sign_out_returns_to_sign_in(client) -> None:
    client.sign_in("ana@example.com")
    token = client.access_token
    client.sign_out()
    client.access_token = token

    assert TaskListController(client, client, RecordingNotifier()).sign_out() is True
    assert client.access_token is None
    assert client.get_user() is None


def test_ports_module_has_docstring() -> None:
    assert ports.__doc__.strip().startswith("Ports used by the UI controllers.")

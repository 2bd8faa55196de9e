# tests/test_task_edit.py

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from taskboard.ui import strings
from taskboard.ui.controllers import TaskEditController
from taskboard.ui.controllers.task_edit import due_date_to_input, input_to_due_date
from taskboard.ui.models import TaskPriority
from taskboard.ui.ports import NoticeKind

from .fakes import Notice


@pytest.fixture()
def saved() -> list:
    return []


@pytest.fixture()
def cancelled() -> list:
    return []


@pytest.fixture()
def make_editor(table, auth, notifier, saved, cancelled):
    def _make(task=None) -> TaskEditController:
        return TaskEditController(
            table,
            auth,
            notifier,
            task=task,
            on_save=saved.append,
            on_cancel=lambda: cancelled.append(True),
        )

    return _make


def test_defaults_for_new_task(make_editor) -> None:
    editor = make_editor()

    assert editor.is_edit is False
    assert editor.title == ""
    assert editor.description == ""
    assert editor.priority is TaskPriority.MEDIUM
    assert editor.due_date is None
    assert editor.submitting is False


def test_seeded_from_existing_task(make_editor, seed_tasks) -> None:
    task = seed_tasks[1]
    editor = make_editor(task)

    assert editor.is_edit is True
    assert editor.title == "Call plumber"
    assert editor.description == "Kitchen sink"
    assert editor.priority is TaskPriority.LOW
    assert editor.due_date == date(2026, 10, 20)


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_blank_title_never_calls_the_store(make_editor, table, notifier, saved, title) -> None:
    editor = make_editor()
    editor.title = title

    assert editor.submit() is False

    assert table.calls == []
    assert notifier.notices == []
    assert saved == []


def test_create_payload_and_user(make_editor, table, user, saved, notifier) -> None:
    editor = make_editor()
    editor.title = "  Buy milk  "
    editor.due_date = date(2026, 11, 3)

    assert editor.submit() is True

    op, values = table.calls[0]
    assert op == "insert"
    assert values == {
        "title": "Buy milk",
        "description": None,
        "priority": TaskPriority.MEDIUM,
        "due_date": datetime(2026, 11, 3, tzinfo=timezone.utc),
        "user_id": user.id,
    }
    assert saved[0].user_id == user.id
    assert notifier.last == Notice(NoticeKind.SUCCESS, strings.SUCCESS_TITLE, strings.CREATED)
    assert editor.submitting is False


def test_create_without_user_fails_with_create_wording(make_editor, table, auth, saved, notifier) -> None:
    auth.user = None
    editor = make_editor()
    editor.title = "Buy milk"

    assert editor.submit() is False

    assert table.writes() == []
    assert saved == []
    assert notifier.last.kind is NoticeKind.ERROR
    assert notifier.last.description == strings.CREATE_FAILED
    assert editor.submitting is False


def test_update_sends_editable_fields_only(make_editor, table, seed_tasks, saved) -> None:
    task = seed_tasks[1]
    editor = make_editor(task)
    editor.description = ""

    assert editor.submit() is True

    op, (task_id, values) = table.calls[0]
    assert op == "update"
    assert task_id == task.id
    assert set(values) == {"title", "description", "priority", "due_date"}
    assert values["description"] is None
    assert saved[0].id == task.id


def test_failed_update_keeps_fields_for_retry(make_editor, table, seed_tasks, saved, notifier) -> None:
    editor = make_editor(seed_tasks[1])
    editor.title = "Call plumber today"
    table.fail = True

    assert editor.submit() is False

    assert editor.title == "Call plumber today"
    assert editor.submitting is False
    assert saved == []
    assert notifier.last.description == strings.UPDATE_FAILED

    table.fail = False
    assert editor.submit() is True
    assert saved[0].title == "Call plumber today"


def test_cancel_only_calls_back(make_editor, table, cancelled) -> None:
    editor = make_editor()

    editor.cancel()

    assert cancelled == [True]
    assert table.calls == []


def test_due_date_conversions() -> None:
    assert due_date_to_input(None) is None
    assert input_to_due_date(None) is None
    stamp = input_to_due_date(date(2026, 1, 31))
    assert stamp == datetime(2026, 1, 31, 0, 0, tzinfo=timezone.utc)
    assert due_date_to_input(stamp) == date(2026, 1, 31)


def test_submitting_flag_spans_the_remote_call(make_editor, table, monkeypatch) -> None:
    editor = make_editor()
    editor.title = "Buy milk"
    seen: list[bool] = []
    real_insert = table.insert

    def spy(values):
        seen.append(editor.submitting)
        return real_insert(values)

    monkeypatch.setattr(table, "insert", spy)

    assert editor.submit() is True
    assert seen == [True]
    assert editor.submitting is False

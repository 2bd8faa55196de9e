# taskboard/ui/ports.py

"""
Ports used by the UI controllers.

Controllers depend on these Protocols rather than on the HTTP client or on
Streamlit, so tests can drive them with in-memory fakes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol

from .models import Task, User


class NoticeKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


class TaskTable(Protocol):
    """The remote task table, already scoped to the signed-in user."""

    def select_all(self) -> list[Task]: ...
    def insert(self, values: dict[str, Any]) -> Task: ...
    def update(self, task_id: str, values: dict[str, Any]) -> Task: ...
    def delete(self, task_id: str) -> None: ...


class AuthProvider(Protocol):
    def get_user(self) -> User | None: ...
    def sign_out(self) -> None: ...


class Notifier(Protocol):
    """Fire-and-forget user notification (toast)."""

    def notify(self, kind: NoticeKind, title: str, description: str) -> None: ...

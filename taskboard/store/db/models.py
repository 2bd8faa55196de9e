from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid4())


class User(SQLModel, table=True):
    id: str = Field(default_factory=_new_id, primary_key=True)
    email: str = Field(index=True, unique=True)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)


class AuthSession(SQLModel, table=True):
    token: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="user.id", index=True)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)


class Task(SQLModel, table=True):
    id: str = Field(default_factory=_new_id, primary_key=True)
    title: str
    description: Optional[str] = None
    status: str = Field(default="pending", nullable=False)
    priority: str = Field(default="medium", nullable=False)
    due_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow, nullable=False, index=True)
    user_id: str = Field(foreign_key="user.id", index=True)

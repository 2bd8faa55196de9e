import secrets
from typing import Any, List, Optional

from sqlmodel import Session, select

from .models import AuthSession, Task, User


def get_or_create_user(session: Session, email: str) -> User:
    user = session.exec(select(User).where(User.email == email)).first()
    if user is not None:
        return user
    user = User(email=email)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def open_session(session: Session, user: User) -> AuthSession:
    auth = AuthSession(token=secrets.token_urlsafe(32), user_id=user.id)
    session.add(auth)
    session.commit()
    session.refresh(auth)
    return auth


def user_for_token(session: Session, token: str) -> Optional[User]:
    auth = session.get(AuthSession, token)
    if auth is None:
        return None
    return session.get(User, auth.user_id)


def close_session(session: Session, token: str) -> None:
    auth = session.get(AuthSession, token)
    if auth is None:
        return
    session.delete(auth)
    session.commit()


def list_tasks(session: Session, user_id: str) -> List[Task]:
    stmt = select(Task).where(Task.user_id == user_id).order_by(Task.created_at.desc())
    return session.exec(stmt).all()


def get_task(session: Session, user_id: str, task_id: str) -> Optional[Task]:
    task = session.get(Task, task_id)
    if task is None or task.user_id != user_id:
        return None
    return task


def create_task(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task


def update_task(session: Session, task: Task, fields: dict[str, Any]) -> Task:
    for name, value in fields.items():
        setattr(task, name, value)
    session.add(task)
    session.commit()
    session.refresh(task)
    return task


def delete_task(session: Session, user_id: str, task_id: str) -> bool:
    task = get_task(session, user_id, task_id)
    if task is None:
        return False
    session.delete(task)
    session.commit()
    return True

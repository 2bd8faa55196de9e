import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from ...db.crud import create_task, delete_task, get_task, list_tasks, update_task
from ...db.models import Task, User
from ...db.session import get_session
from ...schemas.tasks import TaskIn, TaskOut, TaskUpdate
from ..deps import current_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tasks", response_model=List[TaskOut])
def list_all(user: User = Depends(current_user), session: Session = Depends(get_session)):
    return list_tasks(session, user.id)


@router.post("/tasks", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create(body: TaskIn, user: User = Depends(current_user), session: Session = Depends(get_session)):
    if body.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="user_id does not match session")
    t = create_task(session, Task(**body.model_dump()))
    logger.info("Task created id=%s user_id=%s", t.id, user.id)
    return t


@router.patch("/tasks/{task_id}", response_model=TaskOut)
def update(
    task_id: str,
    body: TaskUpdate,
    user: User = Depends(current_user),
    session: Session = Depends(get_session),
):
    t = get_task(session, user.id, task_id)
    if t is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    fields = body.model_dump(exclude_unset=True)
    t = update_task(session, t, fields)
    logger.info("Task updated id=%s fields=%s", t.id, sorted(fields))
    return t


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(task_id: str, user: User = Depends(current_user), session: Session = Depends(get_session)):
    # Deleting an absent row is not an error; the caller cannot tell the two apart.
    removed = delete_task(session, user.id, task_id)
    logger.info("Task delete id=%s removed=%s", task_id, removed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

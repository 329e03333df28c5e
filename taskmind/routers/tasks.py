import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Literal, Optional

from taskmind.core.database import get_db
from taskmind.core.dependencies import get_current_user
from taskmind.models.task import Task
from taskmind.models.user import User
from taskmind.schemas.task import (
    Status,
    TaskCreate,
    TaskFromTextRequest,
    TaskMove,
    TaskResponse,
    TaskUpdate,
)
from taskmind.services import task_service
from taskmind.services.nlp_service import suggest_task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_owned_task(db: Session, user: User, task_id: int) -> Task:
    task = task_service.get_user_task(db, user.id, task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.create_task(db, current_user.id, task_data.model_dump())


@router.post("/from-text", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task_from_text(
    request: TaskFromTextRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Crée une tâche depuis du texte libre.

    - title: le texte (tronqué à 100 caractères)
    - due_date: "today", "tomorrow", jour de la semaine, "next week", date explicite
    - priority: selon les mots-clés ("urgent" -> high, "no rush" -> low)
    - description: entités trouvées par spaCy
    """
    task_info = suggest_task(request.text)
    return task_service.create_task(db, current_user.id, task_info)


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    search: Optional[str] = Query(None),
    priority: Optional[Literal["low", "medium", "high", "all"]] = Query(None),
    status_filter: Optional[Status] = Query(None, alias="status"),
    category: Optional[str] = Query(None)
):
    return task_service.list_tasks(
        db,
        current_user.id,
        search=search,
        priority=priority,
        status=status_filter,
        category=category
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return get_owned_task(db, current_user, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = get_owned_task(db, current_user, task_id)
    return task_service.update_task(db, task, task_data.model_dump(exclude_unset=True))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = get_owned_task(db, current_user, task_id)
    db.delete(task)
    db.commit()
    logger.info("Task %s deleted", task_id)


@router.post("/{task_id}/complete", response_model=TaskResponse)
def complete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = get_owned_task(db, current_user, task_id)
    return task_service.set_status(db, task, "completed")


@router.post("/{task_id}/move", response_model=TaskResponse)
def move_task(
    task_id: int,
    move: TaskMove,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = get_owned_task(db, current_user, task_id)
    return task_service.set_status(db, task, move.status)

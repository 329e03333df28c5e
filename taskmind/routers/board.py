"""
Router du tableau (dashboard + drag & drop).

Endpoints:
- GET /dashboard - colonnes today / upcoming / completed + métriques
- POST /board/drop - applique un dépôt de carte sur une colonne
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskmind.core.database import get_db
from taskmind.core.dependencies import get_current_user
from taskmind.models.user import User
from taskmind.routers.tasks import get_owned_task
from taskmind.schemas.board import BoardDropRequest, BoardDropResponse, DashboardResponse
from taskmind.schemas.task import TaskResponse
from taskmind.services import task_service
from taskmind.services.board_service import InvalidDrop, apply_drop, resolve_drop

router = APIRouter(tags=["board"])


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    tasks = task_service.list_tasks(db, current_user.id)
    columns = task_service.split_dashboard(tasks)
    return {**columns, "metrics": task_service.compute_metrics(tasks)}


@router.post("/board/drop", response_model=BoardDropResponse)
def drop(
    request: BoardDropRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = get_owned_task(db, current_user, request.task_id)

    try:
        action = resolve_drop(request.task_id, request.source, request.destination, due_date=request.due_date)
    except InvalidDrop as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if action is None:
        return BoardDropResponse(changed=False, task=TaskResponse.model_validate(task))

    task = apply_drop(db, task, action)
    return BoardDropResponse(changed=True, task=TaskResponse.model_validate(task))

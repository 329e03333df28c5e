"""
Drag & drop du tableau de tâches.

Traduit un dépôt (colonne source -> colonne destination) en changement
de statut ou d'échéance.

Colonnes de la page Tâches : "pending", "in-progress", "completed" (= statut)
Colonnes du dashboard     : "today", "upcoming", "completed"
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from taskmind.models.task import Task
from taskmind.schemas.board import DropLocation

STATUS_COLUMNS = {
    "pending": "pending",
    "in-progress": "in-progress",
    "completed": "completed",
}
DATE_COLUMNS = ("today", "upcoming")


class InvalidDrop(ValueError):
    pass


@dataclass
class DropAction:
    task_id: int
    status: Optional[str] = None
    due_date: Optional[datetime] = None


def resolve_drop(
    task_id: int,
    source: DropLocation,
    destination: Optional[DropLocation],
    due_date: Optional[date] = None,
    today: Optional[date] = None
) -> Optional[DropAction]:
    """Retourne l'action à appliquer, ou None si le dépôt ne change rien"""
    # Déposé hors d'une zone valide
    if destination is None:
        return None

    # Même colonne, même position
    if source.droppable_id == destination.droppable_id and source.index == destination.index:
        return None

    target = destination.droppable_id

    if target in STATUS_COLUMNS:
        return DropAction(task_id=task_id, status=STATUS_COLUMNS[target])

    if target in DATE_COLUMNS:
        if today is None:
            today = datetime.today().date()
        if target == "today":
            new_day = today
        else:
            # "upcoming": demain par défaut
            new_day = due_date or today + timedelta(days=1)
            if new_day <= today:
                raise InvalidDrop("Upcoming tasks must be due after today")
        action = DropAction(task_id=task_id, due_date=datetime.combine(new_day, time.min))
        if source.droppable_id == "completed":
            action.status = "pending"
        return action

    return None


def apply_drop(db: Session, task: Task, action: DropAction) -> Task:
    if action.status is not None:
        task.status = action.status
    if action.due_date is not None:
        task.due_date = action.due_date
    db.commit()
    db.refresh(task)
    return task

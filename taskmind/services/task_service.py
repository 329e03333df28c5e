"""Task service"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from taskmind.models.task import Task
from taskmind.services.category_service import find_category, get_or_create_category

logger = logging.getLogger(__name__)

RECENT_COMPLETED_LIMIT = 5


def escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def get_user_task(db: Session, user_id: int, task_id: int) -> Optional[Task]:
    return db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == user_id
    ).first()


def list_tasks(
    db: Session,
    user_id: int,
    search: Optional[str] = None,
    priority: Optional[str] = None,
    status: Optional[str] = None,
    category: Optional[str] = None
) -> List[Task]:
    query = db.query(Task).filter(Task.user_id == user_id)

    if search:
        # recherche littérale : % et _ ne sont pas des jokers
        pattern = f"%{escape_like(search.lower())}%"
        query = query.filter(or_(
            Task.title.ilike(pattern, escape="\\"),
            Task.description.ilike(pattern, escape="\\")
        ))

    if priority and priority != "all":
        query = query.filter(Task.priority == priority)

    if status:
        query = query.filter(Task.status == status)

    if category:
        found = find_category(db, user_id, category)
        if not found:
            return []
        query = query.filter(Task.category_id == found.id)

    return query.order_by(Task.created_at.desc(), Task.id.desc()).all()


def _apply_fields(db: Session, task: Task, data: dict) -> None:
    data = dict(data)
    if "category" in data:
        name = (data.pop("category") or "").strip()
        if name:
            task.category = get_or_create_category(db, task.user_id, name)
        else:
            task.category = None
    for field, value in data.items():
        setattr(task, field, value)


def create_task(db: Session, user_id: int, data: dict) -> Task:
    task = Task(user_id=user_id)
    _apply_fields(db, task, data)
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Task %s created for user %s", task.id, user_id)
    return task


NON_NULLABLE_FIELDS = ("title", "description", "priority", "status")


def update_task(db: Session, task: Task, data: dict) -> Task:
    # null explicite sur un champ obligatoire = champ ignoré
    data = {k: v for k, v in data.items() if v is not None or k not in NON_NULLABLE_FIELDS}
    _apply_fields(db, task, data)
    db.commit()
    db.refresh(task)
    return task


def set_status(db: Session, task: Task, status: str) -> Task:
    if task.status == status:
        return task
    logger.info("Task %s moved %s -> %s", task.id, task.status, status)
    task.status = status
    db.commit()
    db.refresh(task)
    return task


# ---- sélecteurs purs (serveur + store client) ----

def filter_tasks(tasks: Iterable, search: str = "", priority: str = "all") -> list:
    """Recherche (titre OU description, insensible à la casse) + filtre priorité"""
    term = (search or "").lower()
    result = []
    for task in tasks:
        matches_search = term in task.title.lower() or term in (task.description or "").lower()
        matches_priority = priority in (None, "", "all") or task.priority == priority
        if matches_search and matches_priority:
            result.append(task)
    return result


def _due_day(task) -> Optional[date]:
    return task.due_date.date() if task.due_date else None


def split_dashboard(tasks: Iterable, today: Optional[date] = None) -> dict:
    """
    Répartit les tâches en colonnes du dashboard.

    - today: non terminées, échéance aujourd'hui ou passée, ou sans échéance
    - upcoming: non terminées, échéance après aujourd'hui
    - completed: les 5 dernières terminées (updated_at desc)
    """
    if today is None:
        today = datetime.today().date()
    tasks = list(tasks)

    open_tasks = [t for t in tasks if t.status != "completed"]
    today_tasks = [t for t in open_tasks if _due_day(t) is None or _due_day(t) <= today]
    upcoming_tasks = [t for t in open_tasks if _due_day(t) is not None and _due_day(t) > today]
    completed = sorted(
        (t for t in tasks if t.status == "completed"),
        key=lambda t: t.updated_at,
        reverse=True
    )[:RECENT_COMPLETED_LIMIT]

    return {"today": today_tasks, "upcoming": upcoming_tasks, "completed": completed}


def compute_metrics(tasks: Iterable) -> dict:
    tasks = list(tasks)
    total = len(tasks)
    completed = len([t for t in tasks if t.status == "completed"])
    high_open = len([t for t in tasks if t.priority == "high" and t.status != "completed"])
    return {
        "total": total,
        "completed": completed,
        "completion_rate": int(completed * 100 / total + 0.5) if total > 0 else 0,  # arrondi "half up"
        "high_priority_open": high_open,
    }

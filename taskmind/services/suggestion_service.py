"""
Suggestions "IA" de productivité.

Règles fixes, aucun appel à un modèle :
1. plus d'une tâche et au moins une tâche haute priorité ouverte -> "task-priority"
2. plus de 3 tâches ouvertes -> "task-scheduling"
3. toujours (s'il y a des tâches) -> "productivity"
"""

import logging
from typing import Iterable, List
from sqlalchemy.orm import Session

from taskmind.models.suggestion import AISuggestion
from taskmind.models.task import Task

logger = logging.getLogger(__name__)

SCHEDULING_TIP = (
    "You have several incomplete tasks. I recommend scheduling specific time blocks "
    "for each task to ensure progress."
)
PRODUCTIVITY_TIP = (
    "Based on your past behavior, you complete tasks more efficiently in the morning. "
    "Consider scheduling important work before noon."
)
SCHEDULING_THRESHOLD = 3


def build_suggestions(tasks: Iterable) -> List[dict]:
    tasks = list(tasks)
    if not tasks:
        return []

    suggestions = []
    open_tasks = [t for t in tasks if t.status != "completed"]

    if len(tasks) > 1:
        high_priority = [t for t in open_tasks if t.priority == "high"]
        if high_priority:
            suggestions.append({
                "type": "task-priority",
                "content": (
                    f"You have {len(high_priority)} high priority tasks that should be completed soon. "
                    "Consider focusing on these first."
                ),
                "related_task_ids": [t.id for t in high_priority],
            })

    if len(open_tasks) > SCHEDULING_THRESHOLD:
        suggestions.append({
            "type": "task-scheduling",
            "content": SCHEDULING_TIP,
            "related_task_ids": None,
        })

    suggestions.append({
        "type": "productivity",
        "content": PRODUCTIVITY_TIP,
        "related_task_ids": None,
    })
    return suggestions


def generate_for_user(db: Session, user_id: int) -> List[AISuggestion]:
    tasks = db.query(Task).filter(Task.user_id == user_id).all()

    rows = [AISuggestion(user_id=user_id, **data) for data in build_suggestions(tasks)]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)

    logger.info("Generated %d suggestions for user %s", len(rows), user_id)
    return rows


def list_suggestions(db: Session, user_id: int) -> List[AISuggestion]:
    return db.query(AISuggestion).filter(
        AISuggestion.user_id == user_id
    ).order_by(AISuggestion.created_at.asc(), AISuggestion.id.asc()).all()

from pydantic import BaseModel
from datetime import date
from typing import Optional, List

from taskmind.schemas.task import TaskResponse


class DropLocation(BaseModel):
    """Colonne (droppable) + position dans la colonne"""
    droppable_id: str
    index: int = 0


class BoardDropRequest(BaseModel):
    task_id: int
    source: DropLocation
    destination: Optional[DropLocation] = None
    due_date: Optional[date] = None  # seulement pour la colonne "upcoming"


class BoardDropResponse(BaseModel):
    changed: bool
    task: Optional[TaskResponse] = None


class DashboardMetrics(BaseModel):
    total: int
    completed: int
    completion_rate: int
    high_priority_open: int


class DashboardResponse(BaseModel):
    today: List[TaskResponse]
    upcoming: List[TaskResponse]
    completed: List[TaskResponse]
    metrics: DashboardMetrics

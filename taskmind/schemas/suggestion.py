from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional, List, Literal

SuggestionType = Literal["task-priority", "task-scheduling", "productivity", "idle-time"]


class SuggestionResponse(BaseModel):
    """Suggestion IA retournée par l'API"""
    id: int
    user_id: int
    type: SuggestionType
    content: str
    related_task_ids: Optional[List[int]]
    applied: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

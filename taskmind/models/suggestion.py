from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, Boolean
from datetime import datetime
from taskmind.core.database import Base

SUGGESTION_TYPES = ("task-priority", "task-scheduling", "productivity", "idle-time")


class AISuggestion(Base):
    __tablename__ = "ai_suggestions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String, nullable=False)  # "task-priority", "task-scheduling", "productivity", "idle-time"
    content = Column(String, nullable=False)
    related_task_ids = Column(JSON, nullable=True)  # IDs des tâches concernées
    applied = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

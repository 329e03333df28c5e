"""Task model"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from taskmind.core.database import Base
from taskmind.models.category import Category  # noqa: F401  (relationship)

PRIORITIES = ("low", "medium", "high")
STATUSES = ("pending", "in-progress", "completed")


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)

    title = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    due_date = Column(DateTime, nullable=True, index=True)
    priority = Column(String, default="medium")
    status = Column(String, default="pending", index=True)

    estimated_time = Column(Integer, nullable=True)  # minutes
    actual_time = Column(Integer, nullable=True)  # minutes

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = relationship("Category", lazy="joined")

    @property
    def category_name(self) -> str:
        return self.category.name if self.category else ""

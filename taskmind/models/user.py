from sqlalchemy import Column, Integer, String, DateTime, Boolean, JSON
from datetime import datetime
from taskmind.core.database import Base
import bcrypt

DEFAULT_WORK_DAYS = [1, 2, 3, 4, 5]  # 0 = dimanche


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)

    # Préférences
    work_hours_start = Column(String, default="09:00")
    work_hours_end = Column(String, default="17:00")
    work_days = Column(JSON, default=lambda: list(DEFAULT_WORK_DAYS))
    focus_time = Column(Integer, default=45)  # minutes
    break_time = Column(Integer, default=15)  # minutes
    theme = Column(String, default="system")
    notifications = Column(Boolean, default=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def set_password(self, password: str):
        self.password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()

    def verify_password(self, password: str) -> bool:
        return bcrypt.checkpw(password.encode(), self.password_hash.encode())

    @property
    def preferences(self) -> dict:
        return {
            "work_hours": {"start": self.work_hours_start, "end": self.work_hours_end},
            "work_days": self.work_days,
            "focus_time": self.focus_time,
            "break_time": self.break_time,
            "theme": self.theme,
            "notifications": self.notifications,
        }

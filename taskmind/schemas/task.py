"""Pydantic schemas for task request/response validation."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, Literal

Priority = Literal["low", "medium", "high"]
Status = Literal["pending", "in-progress", "completed"]


class TaskCreate(BaseModel):
    """Schema for creating a task. The category is given by name."""

    title: str = Field(min_length=1)
    description: str = ""
    due_date: Optional[datetime] = None
    priority: Priority = "medium"
    status: Status = "pending"
    category: Optional[str] = None
    estimated_time: Optional[int] = Field(None, ge=0)
    actual_time: Optional[int] = Field(None, ge=0)


class TaskUpdate(BaseModel):
    """Schema for updating an existing task. `category=""` clears the category."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    category: Optional[str] = None
    estimated_time: Optional[int] = Field(None, ge=0)
    actual_time: Optional[int] = Field(None, ge=0)


class TaskMove(BaseModel):
    status: Status


class TaskFromTextRequest(BaseModel):
    text: str = Field(min_length=1)


class TaskResponse(BaseModel):
    """Schema for task responses from API."""

    id: int
    user_id: int
    title: str
    description: str
    due_date: Optional[datetime]
    priority: Priority
    status: Status
    # ORM: propriété category_name ; JSON: clé "category"
    category: str = Field("", validation_alias=AliasChoices("category_name", "category"))
    category_id: Optional[int] = None
    estimated_time: Optional[int] = None
    actual_time: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

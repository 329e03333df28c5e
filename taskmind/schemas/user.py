from pydantic import BaseModel, EmailStr, ConfigDict, Field
from datetime import datetime
from typing import Optional, List, Literal, Annotated

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
WeekDay = Annotated[int, Field(ge=0, le=6)]  # 0 = dimanche


class UserCreate(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1)
    password: str = Field(min_length=6)


class WorkHours(BaseModel):
    start: str = Field("09:00", pattern=HHMM_PATTERN)
    end: str = Field("17:00", pattern=HHMM_PATTERN)


class UserPreferences(BaseModel):
    work_hours: WorkHours
    work_days: List[int]
    focus_time: int
    break_time: int
    theme: Literal["light", "dark", "system"]
    notifications: bool


class UserPreferencesUpdate(BaseModel):
    work_hours: Optional[WorkHours] = None
    work_days: Optional[List[WeekDay]] = None
    focus_time: Optional[int] = Field(None, gt=0)
    break_time: Optional[int] = Field(None, gt=0)
    theme: Optional[Literal["light", "dark", "system"]] = None
    notifications: Optional[bool] = None


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    preferences: Optional[UserPreferencesUpdate] = None


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    preferences: UserPreferences
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"

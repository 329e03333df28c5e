from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from taskmind.core.database import get_db
from taskmind.core.dependencies import get_current_user
from taskmind.models.user import User
from taskmind.schemas.user import UserResponse, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/me", response_model=UserResponse)
def update_me(
    user_data: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if user_data.name is not None:
        current_user.name = user_data.name

    prefs = user_data.preferences
    if prefs is not None:
        if prefs.work_hours is not None:
            current_user.work_hours_start = prefs.work_hours.start
            current_user.work_hours_end = prefs.work_hours.end
        # Champs simples, copiés tels quels
        for field in ("work_days", "focus_time", "break_time", "theme", "notifications"):
            value = getattr(prefs, field)
            if value is not None:
                setattr(current_user, field, sorted(set(value)) if field == "work_days" else value)

    db.commit()
    db.refresh(current_user)
    return current_user

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskmind.core.database import get_db
from taskmind.core.dependencies import get_current_user
from taskmind.models.suggestion import AISuggestion
from taskmind.models.user import User
from taskmind.schemas.suggestion import SuggestionResponse
from taskmind.services.suggestion_service import generate_for_user, list_suggestions

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


def _get_owned_suggestion(db: Session, user: User, suggestion_id: int) -> AISuggestion:
    suggestion = db.query(AISuggestion).filter(
        AISuggestion.id == suggestion_id,
        AISuggestion.user_id == user.id
    ).first()
    if not suggestion:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Suggestion not found")
    return suggestion


@router.get("", response_model=List[SuggestionResponse])
def list_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return list_suggestions(db, current_user.id)


@router.post("/generate", response_model=List[SuggestionResponse], status_code=status.HTTP_201_CREATED)
def generate(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Génère les suggestions à partir des tâches actuelles (règles fixes)"""
    return generate_for_user(db, current_user.id)


@router.post("/{suggestion_id}/apply", response_model=SuggestionResponse)
def apply(
    suggestion_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    suggestion = _get_owned_suggestion(db, current_user, suggestion_id)
    suggestion.applied = True
    db.commit()
    db.refresh(suggestion)
    return suggestion


@router.delete("/{suggestion_id}", status_code=status.HTTP_204_NO_CONTENT)
def dismiss(
    suggestion_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    suggestion = _get_owned_suggestion(db, current_user, suggestion_id)
    db.delete(suggestion)
    db.commit()

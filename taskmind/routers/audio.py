"""
Router audio : transcription d'un enregistrement vocal.

POST /audio/transcribe (multipart, champ "file")
→ {"text": "...", "source": "elevenlabs" | "fallback", "task": null}
?create_task=true crée aussi la tâche depuis le texte.
"""

from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from taskmind.core.database import get_db
from taskmind.core.dependencies import get_current_user
from taskmind.models.user import User
from taskmind.schemas.task import TaskResponse
from taskmind.services import task_service
from taskmind.services.nlp_service import suggest_task
from taskmind.services.transcription_service import transcribe

router = APIRouter(prefix="/audio", tags=["audio"])


class TranscriptionResponse(BaseModel):
    text: str
    source: str
    task: Optional[TaskResponse] = None


@router.post("/transcribe", response_model=TranscriptionResponse)
def transcribe_audio(
    file: UploadFile = File(...),
    create_task: bool = Query(False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    audio = file.file.read()
    if not audio:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty audio file")

    text, source = transcribe(
        audio,
        filename=file.filename or "recording.webm",
        content_type=file.content_type or "audio/webm"
    )

    task = None
    if create_task:
        created = task_service.create_task(db, current_user.id, suggest_task(text))
        task = TaskResponse.model_validate(created)

    return TranscriptionResponse(text=text, source=source, task=task)

"""
Service de transcription vocale - ElevenLabs speech-to-text.

Sans clé API, ou si l'appel échoue, on retombe sur une transcription
de démo (phrase de tâche tirée au hasard).
"""

import logging
import random
from typing import Tuple

import requests

from taskmind.core.config import settings

logger = logging.getLogger(__name__)

SOURCE_ELEVENLABS = "elevenlabs"
SOURCE_FALLBACK = "fallback"

FALLBACK_PHRASES = [
    "Buy groceries from the supermarket",
    "Schedule dentist appointment for next week",
    "Call mom to check how she's doing",
    "Finish quarterly report by Friday",
    "Go to the gym for workout",
    "Book flight tickets for summer vacation",
    "Review and respond to pending emails",
    "Organize home office and clean desk",
    "Plan weekend activities with the family",
    "Update resume and LinkedIn profile",
    "Pay monthly bills and utilities",
    "Take car for oil change service",
    "Prepare presentation for Monday meeting",
    "Buy birthday gift for Sarah",
    "Schedule team meeting for project review",
]


class TranscriptionError(Exception):
    pass


def transcribe_with_elevenlabs(audio: bytes, filename: str, content_type: str) -> str:
    if not settings.ELEVENLABS_API_KEY:
        raise TranscriptionError("ElevenLabs API key not configured")

    try:
        response = requests.post(
            f"{settings.ELEVENLABS_BASE_URL}/v1/speech-to-text",
            headers={"xi-api-key": settings.ELEVENLABS_API_KEY},
            data={"model_id": settings.ELEVENLABS_MODEL_ID},
            files={"file": (filename, audio, content_type)},
            timeout=settings.TRANSCRIPTION_TIMEOUT
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise TranscriptionError(f"Transcription failed: {e}") from e

    if not isinstance(data, dict):
        raise TranscriptionError("Unexpected response from ElevenLabs")

    text = (data.get("text") or "").strip()
    if not text:
        raise TranscriptionError("No transcription text received")
    return text


def fallback_transcription() -> str:
    return random.choice(FALLBACK_PHRASES)


def transcribe(audio: bytes, filename: str = "recording.webm", content_type: str = "audio/webm") -> Tuple[str, str]:
    """Retourne (texte, source) ; source = "elevenlabs" ou "fallback" """
    if not settings.ELEVENLABS_API_KEY:
        logger.warning("ElevenLabs API key not found, using fallback service")
        return fallback_transcription(), SOURCE_FALLBACK

    try:
        text = transcribe_with_elevenlabs(audio, filename, content_type)
    except TranscriptionError as e:
        logger.error("ElevenLabs transcription failed: %s", e)
        return fallback_transcription(), SOURCE_FALLBACK

    logger.info("Transcription received (%d chars)", len(text))
    return text, SOURCE_ELEVENLABS

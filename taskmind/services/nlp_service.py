"""
Création de tâche depuis du texte libre (saisie rapide ou transcription vocale).

spaCy (en_core_web_sm) sert à extraire les entités quand le modèle est installé ;
la date et la priorité sont détectées par mots-clés, donc fonctionnent sans.
"""

import logging
import re
from datetime import datetime, timedelta
from typing import Dict, List, Optional

import spacy
from dateutil.parser import ParserError, parse as parse_date

logger = logging.getLogger(__name__)

try:
    nlp = spacy.load("en_core_web_sm")
except OSError:
    logger.warning("spaCy model not found. Run: python -m spacy download en_core_web_sm")
    nlp = None

TITLE_MAX_LENGTH = 100
DEFAULT_HOUR = 9

WEEKDAYS = {
    "monday": 0, "tuesday": 1, "wednesday": 2, "thursday": 3,
    "friday": 4, "saturday": 5, "sunday": 6,
}
HIGH_PRIORITY_WORDS = ("urgent", "asap", "immediately", "important", "critical", "right away")
LOW_PRIORITY_WORDS = ("when you can", "no rush", "not urgent", "someday", "eventually", "optional")

TIME_RE = re.compile(r"\bat\s+(\d{1,2})(?::(\d{2}))?\s*(am|pm)?\b")
EXPLICIT_DATE_RE = re.compile(
    r"\b(?:on|by|due|before)\s+("
    r"\d{4}-\d{2}-\d{2}"
    r"|\d{1,2}/\d{1,2}(?:/\d{2,4})?"
    r"|(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+\d{1,2}(?:st|nd|rd|th)?"
    r")"
)


def extract_entities(text: str) -> Dict[str, List[str]]:
    if not nlp:
        return {"people": [], "places": [], "dates": [], "organizations": []}

    doc = nlp(text)
    people, places, dates, organizations = [], [], [], []

    for ent in doc.ents:
        if ent.label_ == "PERSON":
            people.append(ent.text)
        elif ent.label_ in ("GPE", "LOC"):
            places.append(ent.text)
        elif ent.label_ == "DATE":
            dates.append(ent.text)
        elif ent.label_ == "ORG":
            organizations.append(ent.text)

    # Enlever les doublons en gardant l'ordre
    return {
        "people": list(dict.fromkeys(people)),
        "places": list(dict.fromkeys(places)),
        "dates": list(dict.fromkeys(dates)),
        "organizations": list(dict.fromkeys(organizations)),
    }


def _with_time(dt: datetime, text: str) -> datetime:
    match = TIME_RE.search(text)
    hour, minute = DEFAULT_HOUR, 0
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2) or 0)
        if match.group(3) == "pm" and hour < 12:
            hour += 12
        elif match.group(3) == "am" and hour == 12:
            hour = 0
        if hour > 23 or minute > 59:
            hour, minute = DEFAULT_HOUR, 0
    return dt.replace(hour=hour, minute=minute, second=0, microsecond=0)


def parse_due_date(text: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Détecte une échéance relative ("tomorrow", "friday", "next week") ou explicite ("by 2026-03-05")"""
    if now is None:
        now = datetime.now()
    lowered = text.lower()

    if "today" in lowered or "tonight" in lowered:
        return _with_time(now, lowered)

    if "tomorrow" in lowered:
        return _with_time(now + timedelta(days=1), lowered)

    for name, weekday in WEEKDAYS.items():
        if re.search(rf"\b{name}\b", lowered):
            days_ahead = weekday - now.weekday()
            if days_ahead <= 0:
                days_ahead += 7
            return _with_time(now + timedelta(days=days_ahead), lowered)

    if "next week" in lowered:
        return _with_time(now + timedelta(days=7), lowered)

    match = EXPLICIT_DATE_RE.search(lowered)
    if match:
        try:
            default = now.replace(hour=DEFAULT_HOUR, minute=0, second=0, microsecond=0)
            return parse_date(match.group(1), default=default)
        except (ParserError, ValueError, OverflowError):
            logger.debug("Could not parse date fragment %r", match.group(1))

    return None


def detect_priority(text: str) -> str:
    lowered = text.lower()
    # "not urgent" contient "urgent" : tester la basse priorité d'abord
    if any(w in lowered for w in LOW_PRIORITY_WORDS):
        return "low"
    if any(w in lowered for w in HIGH_PRIORITY_WORDS):
        return "high"
    return "medium"


def suggest_task(text: str, now: Optional[datetime] = None) -> Dict:
    text = text.strip()
    entities = extract_entities(text)

    title = text if len(text) <= TITLE_MAX_LENGTH else text[:TITLE_MAX_LENGTH - 3] + "..."

    description_parts = []
    if entities["people"]:
        description_parts.append(f"People: {', '.join(entities['people'])}")
    if entities["places"]:
        description_parts.append(f"Places: {', '.join(entities['places'])}")
    if entities["organizations"]:
        description_parts.append(f"Organizations: {', '.join(entities['organizations'])}")

    return {
        "title": title,
        "description": " | ".join(description_parts),
        "due_date": parse_due_date(text, now=now),
        "priority": detect_priority(text),
    }

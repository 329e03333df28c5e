"""Store local des suggestions IA (générées côté client, règles fixes)."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from taskmind.services.suggestion_service import build_suggestions


@dataclass
class LocalSuggestion:
    type: str
    content: str
    related_task_ids: Optional[List[int]] = None
    applied: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.utcnow)


class SuggestionStore:
    def __init__(self):
        self.suggestions: List[LocalSuggestion] = []

    def add(self, type: str, content: str, related_task_ids: Optional[List[int]] = None) -> LocalSuggestion:
        suggestion = LocalSuggestion(type=type, content=content, related_task_ids=related_task_ids)
        self.suggestions.append(suggestion)
        return suggestion

    def apply(self, suggestion_id: str) -> None:
        for suggestion in self.suggestions:
            if suggestion.id == suggestion_id:
                suggestion.applied = True

    def dismiss(self, suggestion_id: str) -> None:
        self.suggestions = [s for s in self.suggestions if s.id != suggestion_id]

    def generate(self, tasks: Iterable) -> List[LocalSuggestion]:
        # Les nouvelles suggestions s'ajoutent aux existantes
        new = [LocalSuggestion(**data) for data in build_suggestions(tasks)]
        self.suggestions = self.suggestions + new
        return new

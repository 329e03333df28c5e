"""Interface entre le store client et le serveur distant."""

from typing import List, Protocol

from taskmind.schemas.task import TaskResponse


class BackendError(Exception):
    """Échec d'un appel distant ; le message est affiché tel quel dans l'état du store"""


class TaskBackend(Protocol):
    def fetch_tasks(self) -> List[TaskResponse]:
        ...

    def create_task(self, data: dict) -> TaskResponse:
        ...

    def update_task(self, task_id: int, updates: dict) -> TaskResponse:
        ...

    def delete_task(self, task_id: int) -> None:
        ...

    def set_status(self, task_id: int, status: str) -> TaskResponse:
        ...

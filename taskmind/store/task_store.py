"""
Store de tâches côté client, avec mises à jour optimistes.

Principe : on modifie l'état local, on appelle le backend, et si l'appel
échoue on restaure la liste d'avant et on garde le message d'erreur dans
`error`.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from taskmind.schemas.board import DropLocation
from taskmind.schemas.task import TaskResponse
from taskmind.services.board_service import InvalidDrop, resolve_drop
from taskmind.services.task_service import compute_metrics, filter_tasks, split_dashboard
from taskmind.store.backend import BackendError, TaskBackend

logger = logging.getLogger(__name__)

# Champs modifiables localement avant confirmation du serveur
LOCAL_FIELDS = (
    "title", "description", "due_date", "priority", "status",
    "category", "estimated_time", "actual_time",
)


class TaskStore:
    def __init__(self, backend: TaskBackend):
        self.backend = backend
        self.tasks: List[TaskResponse] = []
        self.is_loading = False
        self.error: Optional[str] = None
        self._listeners: List[Callable[["TaskStore"], None]] = []

    # ---- abonnement (l'UI se redessine à chaque changement) ----

    def subscribe(self, listener: Callable[["TaskStore"], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _set(self, **changes) -> None:
        for key, value in changes.items():
            setattr(self, key, value)
        for listener in list(self._listeners):
            listener(self)

    def _fail(self, exc: BackendError, default: str, **changes) -> None:
        message = str(exc) or default
        logger.error("%s: %s", default, message)
        self._set(error=message, **changes)

    def find(self, task_id: int) -> Optional[TaskResponse]:
        return next((task for task in self.tasks if task.id == task_id), None)

    def clear_error(self) -> None:
        self._set(error=None)

    # ---- actions ----

    def fetch_tasks(self) -> None:
        self._set(is_loading=True, error=None)
        try:
            tasks = self.backend.fetch_tasks()
        except BackendError as e:
            self._fail(e, "Failed to fetch tasks", is_loading=False)
            return
        logger.debug("Fetched %d tasks", len(tasks))
        self._set(tasks=tasks, is_loading=False)

    def add_task(self, data: dict) -> Optional[TaskResponse]:
        self._set(is_loading=True)
        try:
            created = self.backend.create_task(data)
            tasks = self.backend.fetch_tasks()
        except BackendError as e:
            self._fail(e, "Failed to add task", is_loading=False)
            return None
        self._set(tasks=tasks, is_loading=False)
        return created

    def update_task(self, task_id: int, updates: dict) -> bool:
        previous = list(self.tasks)
        task = self.find(task_id)
        if task is None:
            self._set(error=f"Task {task_id} not found")
            return False

        local = {k: v for k, v in updates.items() if k in LOCAL_FIELDS}
        if "category" in local and local["category"] is None:
            local["category"] = ""
        optimistic = task.model_copy(update=local)
        self._set(tasks=[optimistic if t.id == task_id else t for t in previous])

        try:
            confirmed = self.backend.update_task(task_id, updates)
        except BackendError as e:
            self._fail(e, "Failed to update task", tasks=previous)
            return False

        self._set(tasks=[confirmed if t.id == task_id else t for t in self.tasks])
        return True

    def delete_task(self, task_id: int) -> bool:
        previous = list(self.tasks)
        self._set(tasks=[t for t in previous if t.id != task_id])

        try:
            self.backend.delete_task(task_id)
        except BackendError as e:
            self._fail(e, "Failed to delete task", tasks=previous)
            return False
        return True

    def move_task(self, task_id: int, new_status: str) -> bool:
        """
        Change le statut (drag & drop). En cas d'échec distant, la liste
        d'origine est restaurée et l'exception est relancée.
        Retourne False si rien n'a changé.
        """
        previous = self.tasks
        task = self.find(task_id)

        if task is None:
            logger.error("move_task: task %s not found", task_id)
            self._set(error=f"Task {task_id} not found")
            return False

        if task.status == new_status:
            return False

        self._set(tasks=[
            t.model_copy(update={"status": new_status}) if t.id == task_id else t
            for t in previous
        ])

        try:
            confirmed = self.backend.set_status(task_id, new_status)
        except BackendError as e:
            self._fail(e, "Failed to move task", tasks=previous)
            raise

        logger.info("Task %s moved %s -> %s", task_id, task.status, new_status)
        self._set(tasks=[confirmed if t.id == task_id else t for t in self.tasks])
        return True

    def complete_task(self, task_id: int) -> bool:
        # Comme move_task, mais l'erreur reste dans l'état sans être relancée
        try:
            return self.move_task(task_id, "completed")
        except BackendError:
            return False

    def handle_drop(
        self,
        task_id: int,
        source: DropLocation,
        destination: Optional[DropLocation],
        due_date: Optional[date] = None
    ) -> bool:
        try:
            action = resolve_drop(task_id, source, destination, due_date=due_date)
        except InvalidDrop as e:
            logger.warning("Drop of task %s rejected: %s", task_id, e)
            self._set(error=str(e))
            return False
        if action is None:
            return False

        if action.due_date is None:
            return self.move_task(task_id, action.status)

        updates = {"due_date": action.due_date}
        if action.status is not None:
            updates["status"] = action.status
        return self.update_task(task_id, updates)

    # ---- sélecteurs ----

    def filtered(self, search: str = "", priority: str = "all") -> List[TaskResponse]:
        return filter_tasks(self.tasks, search=search, priority=priority)

    def by_status(self, status: str, search: str = "", priority: str = "all") -> List[TaskResponse]:
        return [t for t in self.filtered(search, priority) if t.status == status]

    def dashboard(self, today: Optional[date] = None) -> dict:
        return split_dashboard(self.tasks, today=today)

    def metrics(self) -> dict:
        return compute_metrics(self.tasks)

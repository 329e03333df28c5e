"""
Client HTTP de l'API TaskMind (requests).

Implémente TaskBackend, donc utilisable directement par TaskStore :

    client = TaskMindClient("http://localhost:8000")
    client.login("me@example.com", "secret")
    store = TaskStore(client)
"""

import logging
from datetime import date, datetime
from typing import Any, List, Optional

import requests

from taskmind.schemas.task import TaskResponse
from taskmind.store.backend import BackendError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiError(BackendError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _jsonable(data: dict) -> dict:
    return {
        key: value.isoformat() if isinstance(value, (date, datetime)) else value
        for key, value in data.items()
    }


class TaskMindClient:
    def __init__(self, base_url: str, token: Optional[str] = None, session=None, timeout: int = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.token = token
        # session: requests.Session ou tout objet compatible (ex: TestClient)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    # ---- bas niveau ----

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                headers=headers,
                timeout=self.timeout,
                **kwargs
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise ApiError(f"Network error: {e}") from e

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = None
            detail = body.get("detail", response.text) if isinstance(body, dict) else response.text
            logger.warning("%s %s -> %s %s", method, path, response.status_code, detail)
            raise ApiError(str(detail), status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # ---- auth ----

    def signup(self, email: str, name: str, password: str) -> dict:
        return self._request("POST", "/auth/signup", json={"email": email, "name": name, "password": password})

    def login(self, email: str, password: str) -> str:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["access_token"]
        return self.token

    # ---- TaskBackend ----

    def fetch_tasks(self, **filters) -> List[TaskResponse]:
        params = {k: v for k, v in filters.items() if v is not None}
        data = self._request("GET", "/tasks", params=params)
        return [TaskResponse.model_validate(item) for item in data]

    def create_task(self, data: dict) -> TaskResponse:
        return TaskResponse.model_validate(self._request("POST", "/tasks", json=_jsonable(data)))

    def update_task(self, task_id: int, updates: dict) -> TaskResponse:
        return TaskResponse.model_validate(self._request("PUT", f"/tasks/{task_id}", json=_jsonable(updates)))

    def delete_task(self, task_id: int) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    def set_status(self, task_id: int, status: str) -> TaskResponse:
        return TaskResponse.model_validate(self._request("POST", f"/tasks/{task_id}/move", json={"status": status}))

    # ---- divers ----

    def dashboard(self) -> dict:
        return self._request("GET", "/dashboard")

    def generate_suggestions(self) -> List[dict]:
        return self._request("POST", "/suggestions/generate")

from typing import Any

import httpx

from console.search import TaskDict


class TaskApiClient:
    """
    Thin client for the Task Manager API.

    Every method raises `httpx.HTTPError` on transport failures and on
    non-success responses (`httpx.HTTPStatusError`).
    """

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @classmethod
    def for_base_url(cls, base_url: str, timeout: float = 10.0) -> "TaskApiClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def list_tasks(self, params: dict[str, str] | None = None) -> list[TaskDict]:
        response = self._http.get("/tasks", params=params or None)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, list):
            raise ValueError("expected a list of tasks")
        return data

    def create_task(self, payload: dict[str, Any]) -> TaskDict:
        response = self._http.post("/tasks", json=payload)
        response.raise_for_status()
        return response.json()

    def update_task(self, task_id: str, changes: dict[str, Any]) -> TaskDict:
        response = self._http.put(f"/tasks/{task_id}", json=changes)
        response.raise_for_status()
        return response.json()

    def delete_task(self, task_id: str) -> None:
        response = self._http.delete(f"/tasks/{task_id}")
        response.raise_for_status()

    def close(self) -> None:
        self._http.close()

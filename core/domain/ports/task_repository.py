from abc import ABC, abstractmethod
from typing import Any

from core.domain.models.task import Task, TaskId
from core.domain.models.task_filter import TaskFilter


class TaskRepository(ABC):
    """
    Storage port for the task collection.

    Implementations own their state (no module-level collections) and assign
    identifiers on `add`. Identifiers arrive from the outside world as
    strings; one that cannot name a task in the store is simply not found.
    """

    @abstractmethod
    def list(self, criteria: TaskFilter | None = None) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def add(self, task: Task) -> Task:
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: TaskId) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: TaskId, changes: dict[str, Any]) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: TaskId) -> bool:
        raise NotImplementedError

    def check_connection(self) -> None:
        """Verifies the backing store is reachable. Raises when it is not."""
        return None

import logging
import threading
from dataclasses import replace
from typing import Any

from core.domain.models.task import Task, TaskId
from core.domain.models.task_filter import TaskFilter
from core.domain.ports.task_repository import TaskRepository
from infrastructure.identifiers import parse_sequential_id

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    Process-local task store. Contents are lost on restart.

    Ids are sequential integers starting at 1 and tasks are listed in
    insertion order. Request handlers run on a threadpool, so every
    read-modify-write of the collection holds the instance lock.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self, criteria: TaskFilter | None = None) -> list[Task]:
        criteria = criteria or TaskFilter()
        with self._lock:
            return [replace(t) for t in self._tasks if criteria.matches(t)]

    def add(self, task: Task) -> Task:
        with self._lock:
            stored = replace(task, id=self._next_id)
            self._next_id += 1
            self._tasks.append(stored)
        logger.debug(f"Task {stored.id} added to memory store")
        return replace(stored)

    def get(self, task_id: TaskId) -> Task | None:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            return replace(self._tasks[index])

    def update(self, task_id: TaskId, changes: dict[str, Any]) -> Task | None:
        changes = {k: v for k, v in changes.items() if k != "id"}
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None
            self._tasks[index] = replace(self._tasks[index], **changes)
            return replace(self._tasks[index])

    def delete(self, task_id: TaskId) -> bool:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return False
            del self._tasks[index]
            return True

    def _index_of(self, task_id: TaskId) -> int | None:
        # Callers hold self._lock.
        numeric_id = parse_sequential_id(task_id)
        if numeric_id is None:
            return None
        for index, task in enumerate(self._tasks):
            if task.id == numeric_id:
                return index
        return None

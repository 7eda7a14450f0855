from dataclasses import dataclass
from typing import Any

from core.domain.errors import TaskNotFoundError, invalid_status_error
from core.domain.models.task import Task, TaskId, TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class UpdateTaskCommand:
    """Partial update. A field left as None is not touched."""

    title: str | None = None
    description: str | None = None
    completed: bool | None = None
    status: TaskStatus | str | None = None

    def changes(self) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if self.title is not None:
            changes["title"] = self.title
        if self.description is not None:
            changes["description"] = self.description
        if self.completed is not None:
            changes["completed"] = self.completed
        if self.status is not None:
            status = TaskStatus.parse(self.status)
            if status is None:
                raise invalid_status_error()
            changes["status"] = status
        return changes


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: TaskId, cmd: UpdateTaskCommand) -> Task:
        # completed and status are stored as given; keeping them consistent is up to the client.
        changes = cmd.changes()
        task = self._repository.update(task_id, changes)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

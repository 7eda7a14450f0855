from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.models.task_filter import TaskFilter
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class ListTasksCommand:
    status: str | None = None
    q: str | None = None


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ListTasksCommand | None = None) -> list[Task]:
        cmd = cmd or ListTasksCommand()
        return self._repository.list(TaskFilter.from_query(cmd.status, cmd.q))

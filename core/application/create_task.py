from dataclasses import dataclass

from core.domain.errors import invalid_status_error, invalid_title_error
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class CreateTaskCommand:
    title: str
    description: str = ""
    completed: bool = False
    status: TaskStatus | str = TaskStatus.PENDING


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        if not isinstance(cmd.title, str) or not cmd.title:
            raise invalid_title_error()
        status = TaskStatus.parse(cmd.status)
        if status is None:
            raise invalid_status_error()

        task = Task(
            title=cmd.title,
            description=cmd.description,
            completed=cmd.completed,
            status=status,
        )
        return self._repository.add(task)

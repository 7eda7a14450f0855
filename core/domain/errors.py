from core.domain.models.task import TaskId, TaskStatus

STATUS_CHOICES = " | ".join(f"'{s.value}'" for s in TaskStatus)


class TaskError(Exception):
    """Base class for task domain errors."""


class TaskValidationError(TaskError):
    """The input of an operation is malformed. Nothing was mutated."""


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: TaskId) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


def invalid_status_error() -> TaskValidationError:
    return TaskValidationError(f"status must be one of {STATUS_CHOICES}")


def invalid_title_error() -> TaskValidationError:
    return TaskValidationError("title is required and must be a string")

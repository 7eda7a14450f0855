from dataclasses import dataclass
from enum import Enum


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: object) -> "TaskStatus | None":
        """Returns the matching status, or None when `value` is not a status literal."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


TaskId = int | str


@dataclass(slots=True)
class Task:
    title: str
    description: str = ""
    completed: bool = False
    status: TaskStatus = TaskStatus.PENDING
    id: TaskId | None = None

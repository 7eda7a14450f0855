from dataclasses import dataclass

from core.domain.models.task import Task, TaskStatus


@dataclass(slots=True, frozen=True)
class TaskFilter:
    """
    Criteria applied when listing tasks.

    Both criteria are optional and combine with AND semantics:
    - status: exact match on the task status.
    - text: case-insensitive substring of the title or the description.
    """

    status: TaskStatus | None = None
    text: str | None = None

    @classmethod
    def from_query(cls, status: str | None = None, q: str | None = None) -> "TaskFilter":
        """
        Builds a filter from raw query parameters.

        An unknown status is silently ignored and a blank search text
        (after trimming) means no text criterion.
        """
        text = q.strip() if isinstance(q, str) else ""
        return cls(status=TaskStatus.parse(status), text=text or None)

    @property
    def is_empty(self) -> bool:
        return self.status is None and self.text is None

    def matches(self, task: Task) -> bool:
        if self.status is not None and task.status != self.status:
            return False
        if self.text is not None:
            needle = self.text.lower()
            title = (task.title or "").lower()
            description = (task.description or "").lower()
            if needle not in title and needle not in description:
                return False
        return True

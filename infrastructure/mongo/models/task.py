from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from core.domain.models.task import Task, TaskStatus


class TaskMongo(BaseModel):
    """
    Task model for MongoDB.
    Represents how a task is stored in the `tasks` collection.
    """

    id: str = Field(alias="_id")
    title: str
    description: str = ""
    completed: bool = False
    status: str = TaskStatus.PENDING.value
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("id", mode="before")
    @classmethod
    def _object_id_as_str(cls, value: Any) -> str:
        return str(value)

    def to_domain(self) -> Task:
        """
        Converts the MongoDB document into the domain entity.

        Returns:
            Task: The domain entity.
        """
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            completed=self.completed,
            status=TaskStatus(self.status),
        )

    @staticmethod
    def new_document(task: Task, now: datetime) -> dict[str, Any]:
        """
        Builds the document inserted for a new task. MongoDB assigns `_id`.

        Args:
            task: The domain entity to store.
            now: Creation timestamp, also used as the first update timestamp.
        """
        return {
            "title": task.title,
            "description": task.description,
            "completed": task.completed,
            "status": task.status.value,
            "createdAt": now,
            "updatedAt": now,
        }

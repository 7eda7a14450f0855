from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from core.application.create_task import CreateTaskCommand
from core.application.update_task import UpdateTaskCommand
from core.domain.models.task import TaskStatus


class TaskCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(min_length=1)
    description: StrictStr = ""
    completed: StrictBool = False
    status: TaskStatus = TaskStatus.PENDING

    def to_command(self) -> CreateTaskCommand:
        return CreateTaskCommand(
            title=self.title,
            description=self.description,
            completed=self.completed,
            status=self.status,
        )


class TaskUpdateRequest(BaseModel):
    """Every field is optional; omitted fields keep their stored value."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr | None = None
    description: StrictStr | None = None
    completed: StrictBool | None = None
    status: TaskStatus | None = None

    @field_validator("title", "description", "completed", "status", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Defaults are not validated, so this only runs for values sent by the client.
        if value is None:
            raise ValueError("must not be null")
        return value

    def to_command(self) -> UpdateTaskCommand:
        return UpdateTaskCommand(
            title=self.title,
            description=self.description,
            completed=self.completed,
            status=self.status,
        )


class DeleteResponse(BaseModel):
    success: bool = True


class ServiceInfo(BaseModel):
    status: str = "ok"
    service: str = "Task Manager API"


class ErrorResponse(BaseModel):
    error: str

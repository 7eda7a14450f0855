from datetime import datetime
from typing import Any

from core.domain.models.task import Task, TaskId, TaskStatus
from core.domain.models.task_filter import TaskFilter
from core.domain.ports.task_repository import TaskRepository
from infrastructure.identifiers import parse_sequential_id
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        completed=model.completed,
        status=TaskStatus(model.status),
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self) -> None:
        # Tables are created on init; there are no migrations.
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)

    def check_connection(self) -> None:
        db.execute_sql("SELECT 1")

    def list(self, criteria: TaskFilter | None = None) -> list[Task]:
        criteria = criteria or TaskFilter()
        query = TaskModel.select().order_by(TaskModel.id)
        if criteria.status is not None:
            query = query.where(TaskModel.status == criteria.status.value)
        # Text matching is done here so it behaves the same on every SQL backend.
        return [t for t in map(_to_domain, query) if criteria.matches(t)]

    def add(self, task: Task) -> Task:
        with db.atomic():
            model = TaskModel.create(
                title=task.title,
                description=task.description,
                completed=task.completed,
                status=task.status.value,
            )
        return _to_domain(model)

    def get(self, task_id: TaskId) -> Task | None:
        numeric_id = parse_sequential_id(task_id)
        if numeric_id is None:
            return None
        model = TaskModel.get_or_none(TaskModel.id == numeric_id)
        return _to_domain(model) if model is not None else None

    def update(self, task_id: TaskId, changes: dict[str, Any]) -> Task | None:
        numeric_id = parse_sequential_id(task_id)
        if numeric_id is None:
            return None
        with db.atomic():
            model = TaskModel.get_or_none(TaskModel.id == numeric_id)
            if model is None:
                return None
            for key, value in changes.items():
                if key == "id":
                    continue
                setattr(model, key, value.value if isinstance(value, TaskStatus) else value)
            model.updated_at = datetime.now()
            model.save()
        return _to_domain(model)

    def delete(self, task_id: TaskId) -> bool:
        numeric_id = parse_sequential_id(task_id)
        if numeric_id is None:
            return False
        query = TaskModel.delete().where(TaskModel.id == numeric_id)
        return query.execute() > 0

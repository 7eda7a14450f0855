from datetime import datetime

from peewee import AutoField, BooleanField, CharField, DateTimeField, Model, TextField

from core.domain.models.task import TaskStatus
from infrastructure.peewee.session.db import db


class TaskModel(Model):
    id = AutoField()
    title = CharField()
    description = TextField(default="")
    completed = BooleanField(default=False)
    status = CharField(default=TaskStatus.PENDING.value)
    created_at = DateTimeField(default=datetime.now)
    updated_at = DateTimeField(default=datetime.now)

    class Meta:
        database = db
        table_name = "tasks"

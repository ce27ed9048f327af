from peewee import AutoField, CharField, DateTimeField, Model, TextField

from core.domain.models.task import Task, TaskPriority, TaskStatus, utcnow
from infrastructure.peewee.session.db import db


class TaskModel(Model):
    id = AutoField()
    title = CharField(max_length=255)
    description = TextField(null=True)
    status = CharField(max_length=50, default=TaskStatus.PENDING.value)
    priority = CharField(max_length=50, default=TaskPriority.MEDIUM.value)
    created_at = DateTimeField(default=utcnow, index=True)
    updated_at = DateTimeField(default=utcnow)

    class Meta:
        database = db
        table_name = "tasks"

    def to_domain(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            status=self.status,
            priority=self.priority,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

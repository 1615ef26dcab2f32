from peewee import BooleanField, CharField, DateTimeField, Model, TextField

from core.domain.models.task import Priority


class TaskModel(Model):
    # La base de datos se enlaza en PeeweeTaskRepository (db.bind).
    id = CharField(primary_key=True, max_length=24)
    title = CharField()
    description = TextField(null=True)
    due_date = DateTimeField(null=True)
    priority = CharField(
        max_length=6,
        default=Priority.MEDIUM.value,
        choices=[(p.value, p.value) for p in Priority],
    )
    completed = BooleanField(default=False)
    created_at = DateTimeField(index=True)
    updated_at = DateTimeField()

    class Meta:
        table_name = "tasks"

import unittest
from datetime import datetime, timezone

from bson import ObjectId

from core.domain.errors import MalformedIdentifierError, ValidationError
from core.domain.models.task import NewTask, Priority
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.peewee.session.db import create_database


class PeeweeTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        # Use memory database for tests
        self.db = create_database("sqlite:///:memory:")
        self.repo = PeeweeTaskRepository(self.db)

    def tearDown(self) -> None:
        self.db.drop_tables([TaskModel])
        self.db.close()

    def test_add_and_get(self) -> None:
        due = datetime(2030, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc)
        task = self.repo.add(
            NewTask(
                title="Tarea Peewee",
                description="desc",
                due_date=due,
                priority=Priority.HIGH,
            )
        )

        loaded = self.repo.get(task.id)

        self.assertIsNotNone(loaded)
        self.assertTrue(ObjectId.is_valid(task.id))
        self.assertEqual(loaded, task)
        self.assertEqual(loaded.due_date, due)
        self.assertEqual(loaded.created_at.tzinfo, timezone.utc)
        self.assertEqual(loaded.created_at, loaded.updated_at)

    def test_list_is_newest_first(self) -> None:
        first = self.repo.add(NewTask(title="first"))
        second = self.repo.add(NewTask(title="second"))

        self.assertEqual([t.id for t in self.repo.list()], [second.id, first.id])

    def test_update_changes_only_given_fields(self) -> None:
        task = self.repo.add(
            NewTask(title="Keep", description="same", priority=Priority.LOW)
        )

        updated = self.repo.update(task.id, {"completed": True})

        self.assertTrue(updated.completed)
        self.assertEqual(updated.title, "Keep")
        self.assertEqual(updated.description, "same")
        self.assertEqual(updated.priority, Priority.LOW)
        self.assertEqual(updated.created_at, task.created_at)
        self.assertGreater(updated.updated_at, task.updated_at)
        self.assertEqual(self.repo.get(task.id), updated)

    def test_update_clears_due_date(self) -> None:
        task = self.repo.add(
            NewTask(title="Due", due_date=datetime(2030, 1, 1, tzinfo=timezone.utc))
        )

        updated = self.repo.update(task.id, {"due_date": None})

        self.assertIsNone(updated.due_date)

    def test_update_rejects_priority_outside_enum(self) -> None:
        task = self.repo.add(NewTask(title="x"))

        with self.assertRaises(ValidationError):
            self.repo.update(task.id, {"priority": "Urgent"})

        self.assertEqual(self.repo.get(task.id).priority, Priority.MEDIUM)

    def test_missing_ids_return_none(self) -> None:
        missing = str(ObjectId())

        self.assertIsNone(self.repo.get(missing))
        self.assertIsNone(self.repo.update(missing, {"title": "x"}))
        self.assertIsNone(self.repo.delete(missing))

    def test_malformed_id_raises(self) -> None:
        with self.assertRaises(MalformedIdentifierError):
            self.repo.get("1")

    def test_delete(self) -> None:
        task = self.repo.add(NewTask(title="Eliminar Peewee"))

        removed = self.repo.delete(task.id)

        self.assertEqual(removed, task)
        self.assertIsNone(self.repo.get(task.id))


if __name__ == "__main__":
    unittest.main()

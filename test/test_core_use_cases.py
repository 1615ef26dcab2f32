import unittest

from bson import ObjectId

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskCommand, GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import MalformedIdentifierError, NotFoundError, ValidationError
from core.domain.models.task import Priority
from fakes import InMemoryTaskRepository


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()
        self.create = CreateTaskUseCase(self.repo)
        self.get = GetTaskUseCase(self.repo)
        self.update = UpdateTaskUseCase(self.repo)
        self.delete = DeleteTaskUseCase(self.repo)
        self.list = ListTasksUseCase(self.repo)

    def _create(self, **payload):
        return self.create.execute(CreateTaskCommand(payload=payload))

    def test_create_assigns_id_defaults_and_equal_timestamps(self) -> None:
        task = self._create(title="Buy milk")

        self.assertTrue(ObjectId.is_valid(task.id))
        self.assertEqual(task.title, "Buy milk")
        self.assertEqual(task.priority, Priority.MEDIUM)
        self.assertFalse(task.completed)
        self.assertEqual(task.created_at, task.updated_at)

    def test_create_trims_title_and_description(self) -> None:
        task = self._create(title="  Write report ", description="  draft  ")

        self.assertEqual(task.title, "Write report")
        self.assertEqual(task.description, "draft")

    def test_create_ignores_completed_and_unknown_fields(self) -> None:
        task = self._create(title="x", completed=True, tags=["a"], id="nope")

        self.assertFalse(task.completed)
        self.assertNotEqual(task.id, "nope")

    def test_create_blank_title_fails_without_saving(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            self._create(title="   ")

        self.assertEqual(ctx.exception.field, "title")
        self.assertEqual(self.repo.list(), [])

    def test_create_then_get_round_trip(self) -> None:
        created = self._create(
            title="Plan trip", dueDate="2030-05-01T10:00:00Z", priority="High"
        )

        fetched = self.get.execute(GetTaskCommand(id=created.id))

        self.assertEqual(fetched, created)

    def test_list_returns_newest_first(self) -> None:
        first = self._create(title="first")
        second = self._create(title="second")

        ids = [task.id for task in self.list.execute()]

        self.assertEqual(ids, [second.id, first.id])

    def test_list_empty(self) -> None:
        self.assertEqual(self.list.execute(), [])

    def test_update_only_touches_supplied_fields(self) -> None:
        original = self._create(
            title="Keep", description="same", dueDate="2030-01-01", priority="Low"
        )

        updated = self.update.execute(
            UpdateTaskCommand(id=original.id, payload={"completed": True})
        )

        self.assertTrue(updated.completed)
        self.assertEqual(updated.title, original.title)
        self.assertEqual(updated.description, original.description)
        self.assertEqual(updated.due_date, original.due_date)
        self.assertEqual(updated.priority, original.priority)
        self.assertEqual(updated.created_at, original.created_at)
        self.assertGreater(updated.updated_at, original.updated_at)

    def test_update_null_due_date_clears_it(self) -> None:
        original = self._create(title="Due", dueDate="2030-01-01")

        updated = self.update.execute(
            UpdateTaskCommand(id=original.id, payload={"dueDate": None})
        )

        self.assertIsNone(updated.due_date)

    def test_update_invalid_priority_fails(self) -> None:
        original = self._create(title="x")

        with self.assertRaises(ValidationError) as ctx:
            self.update.execute(
                UpdateTaskCommand(id=original.id, payload={"priority": "Urgent"})
            )

        self.assertEqual(ctx.exception.field, "priority")
        self.assertEqual(self.repo.get(original.id), original)

    def test_update_missing_task_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.update.execute(
                UpdateTaskCommand(id=str(ObjectId()), payload={"title": "y"})
            )

    def test_update_malformed_id_wins_over_invalid_body(self) -> None:
        with self.assertRaises(MalformedIdentifierError):
            self.update.execute(UpdateTaskCommand(id="123", payload={"title": ""}))

    def test_delete_then_get_raises_not_found(self) -> None:
        task = self._create(title="Remove me")

        removed = self.delete.execute(DeleteTaskCommand(id=task.id))

        self.assertEqual((removed.id, removed.title), (task.id, "Remove me"))
        with self.assertRaises(NotFoundError):
            self.get.execute(GetTaskCommand(id=task.id))
        self.assertNotIn(task.id, [t.id for t in self.list.execute()])

    def test_delete_missing_task_raises_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.delete.execute(DeleteTaskCommand(id=str(ObjectId())))

    def test_get_malformed_id_is_not_not_found(self) -> None:
        for bad_id in ["123", "not-an-object-id", "", "g" * 24]:
            with self.subTest(bad_id=bad_id):
                with self.assertRaises(MalformedIdentifierError):
                    self.get.execute(GetTaskCommand(id=bad_id))


if __name__ == "__main__":
    unittest.main()

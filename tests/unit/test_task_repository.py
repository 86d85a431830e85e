"""Tests for TaskRepository and document validation."""
import sqlite3
from datetime import datetime

import pytest

from taskapp.errors import TaskValidationError
from taskapp.infrastructure.repositories import task_repository as task_repository_module
from taskapp.infrastructure.repositories import validate_task


class TestValidateTask:

    def test_valid_title(self):
        validate_task({"title": "Write tests"})

    @pytest.mark.parametrize("document", [{}, {"title": None}, {"title": ""}])
    def test_missing_or_empty_title(self, document):
        with pytest.raises(TaskValidationError) as exc_info:
            validate_task(document)

        assert exc_info.value.model == "Task"
        assert exc_info.value.errors == {"title": "Path `title` is required."}
        assert str(exc_info.value) == "Task validation failed: title: Path `title` is required."

    def test_non_string_title(self):
        with pytest.raises(TaskValidationError) as exc_info:
            validate_task({"title": 42})

        assert exc_info.value.errors["title"] == 'Cast to string failed for value 42 at path "title"'

    def test_unencodable_title(self):
        with pytest.raises(TaskValidationError) as exc_info:
            validate_task({"title": "\ud800"})

        assert exc_info.value.errors["title"] == "Path `title` must be valid UTF-8 text."

    def test_whitespace_title_is_valid(self):
        validate_task({"title": " "})


class TestTaskRepository:

    def test_create_returns_document(self, task_repo):
        task = task_repo.create("Test Task")

        assert task["title"] == "Test Task"
        assert isinstance(task["_id"], str) and task["_id"]
        assert isinstance(task["created_at"], datetime)
        assert task["created_at"] == task["updated_at"]

    def test_create_with_explicit_id(self, task_repo):
        task = task_repo.create("Pinned", task_id="task-1")

        assert task["_id"] == "task-1"
        assert task_repo.get_by_id("task-1")["title"] == "Pinned"

    def test_create_duplicate_id_is_not_a_validation_error(self, task_repo):
        task_repo.create("First", task_id="dup")

        with pytest.raises(sqlite3.IntegrityError):
            task_repo.create("Second", task_id="dup")

        assert task_repo.count() == 1

    @pytest.mark.parametrize("title", ["", None])
    def test_create_invalid_title_stores_nothing(self, task_repo, title):
        with pytest.raises(TaskValidationError):
            task_repo.create(title)

        assert task_repo.count() == 0

    def test_schema_rejects_empty_title(self, db_connection):
        """The table itself refuses empty titles."""
        with pytest.raises(sqlite3.IntegrityError):
            db_connection.execute(
                "INSERT INTO tasks (_id, title, created_at, updated_at) VALUES (?, ?, ?, ?)",
                ("raw", "", datetime.now(), datetime.now())
            )
        db_connection.rollback()

    @pytest.mark.parametrize("title", ["", None])
    def test_constraint_violation_on_create_is_validation_error(self, task_repo, monkeypatch, title):
        """With validate_task out of the way the table constraints still reject the write."""
        monkeypatch.setattr(task_repository_module, "validate_task", lambda document: None)

        with pytest.raises(TaskValidationError) as exc_info:
            task_repo.create(title)

        assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
        assert str(exc_info.value) == "Task validation failed: title: Path `title` is required."
        assert task_repo.count() == 0

    def test_constraint_violation_on_update_is_validation_error(self, task_repo, monkeypatch):
        task = task_repo.create("Before")
        monkeypatch.setattr(task_repository_module, "validate_task", lambda document: None)

        with pytest.raises(TaskValidationError):
            task_repo.update(task["_id"], "")

        assert task_repo.get_by_id(task["_id"])["title"] == "Before"

    def test_unencodable_title_stores_nothing(self, task_repo):
        with pytest.raises(TaskValidationError):
            task_repo.create("\ud800")

        assert task_repo.count() == 0

    def test_get_all_in_insertion_order(self, task_repo):
        task_repo.create("Task 1")
        task_repo.create("Task 2")
        task_repo.create("Task 3")

        assert [t["title"] for t in task_repo.get_all()] == ["Task 1", "Task 2", "Task 3"]

    def test_get_all_empty(self, task_repo):
        assert task_repo.get_all() == []

    def test_get_by_id_missing(self, task_repo):
        assert task_repo.get_by_id("nope") is None

    def test_find_one(self, task_repo):
        first = task_repo.create("Same")
        task_repo.create("Same")

        assert task_repo.find_one("Same")["_id"] == first["_id"]
        assert task_repo.find_one("Other") is None

    def test_update(self, task_repo):
        task = task_repo.create("Before")

        updated = task_repo.update(task["_id"], "After")

        assert updated["title"] == "After"
        assert updated["created_at"] == task["created_at"]
        assert updated["updated_at"] >= task["updated_at"]

    def test_update_missing(self, task_repo):
        assert task_repo.update("nope", "After") is None

    def test_update_invalid_title(self, task_repo):
        task = task_repo.create("Before")

        with pytest.raises(TaskValidationError):
            task_repo.update(task["_id"], "")

        assert task_repo.get_by_id(task["_id"])["title"] == "Before"

    def test_delete(self, task_repo):
        task = task_repo.create("Gone")

        assert task_repo.delete(task["_id"]) is True
        assert task_repo.delete(task["_id"]) is False
        assert task_repo.count() == 0

    def test_delete_all(self, task_repo):
        task_repo.create("Task 1")
        task_repo.create("Task 2")

        assert task_repo.delete_all() == 2
        assert task_repo.get_all() == []

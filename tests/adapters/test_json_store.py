"""Unit tests for JsonTaskStore - loading, saving and the corrupt-file fallback."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from taskman_cli.adapters import JsonTaskStore
from taskman_cli.exceptions import StorageError
from taskman_cli.models import Task
from taskman_cli.repositories import TaskRepository
from taskman_cli.utils.exit_codes import ERROR_PERMISSION_DENIED, ERROR_STORAGE


def test_store_is_a_task_repository(store):
    assert isinstance(store, TaskRepository)


# ---------------------------------------------------------------------------
# load
# ---------------------------------------------------------------------------


class TestLoad:
    def test_missing_file_loads_empty(self, store, task_file):
        assert not task_file.exists()
        assert store.load() == []

    def test_loading_does_not_create_the_file(self, store, task_file):
        store.load()
        assert not task_file.exists()

    def test_loads_tasks_in_file_order(self, store, task_file):
        task_file.write_text(
            json.dumps(
                [
                    {"id": 3, "description": "third", "completed": True},
                    {"id": 1, "description": "first", "completed": False},
                ]
            )
        )
        tasks = store.load()
        assert [t.id for t in tasks] == [3, 1]
        assert tasks[0].completed is True
        assert tasks[1].description == "first"

    def test_compact_json_is_accepted(self, store, task_file):
        task_file.write_text('[{"id":1,"description":"x","completed":false}]')
        assert store.load() == [Task(id=1, description="x")]

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "not json",
            "{",
            '{"id": 1, "description": "x", "completed": false}',
            '[{"id": 1, "description": "x"}, ',
            '[{"id": "1", "description": "x", "completed": false}]',
            '[{"id": 1, "description": "x", "completed": 1}]',
            '[{"id": 1, "completed": false}]',
            '[{"description": "x", "completed": false}]',
            '[{"id": -3, "description": "x", "completed": false}]',
            '[{"id": 0, "description": "x", "completed": false}]',
        ],
    )
    def test_unparseable_file_loads_empty(self, store, task_file, content):
        task_file.write_text(content)
        assert store.load() == []

    def test_invalid_utf8_loads_empty(self, store, task_file):
        task_file.write_bytes(b"\xff\xfe\x00garbage")
        assert store.load() == []

    def test_corrupt_file_is_logged_not_raised(self, store, task_file, isolate_logs):
        task_file.write_text("{{{")
        store.load()
        log = (isolate_logs / "taskman.log").read_text()
        assert "not a valid task list" in log

    def test_directory_in_place_of_file_is_fatal(self, tmp_path):
        store = JsonTaskStore(tmp_path)
        with pytest.raises(StorageError) as exc_info:
            store.load()
        assert exc_info.value.exit_code in (ERROR_STORAGE, ERROR_PERMISSION_DENIED)

    def test_permission_error_maps_to_permission_exit_code(self, store):
        with patch.object(
            type(store.path), "read_bytes", side_effect=PermissionError(13, "Permission denied")
        ):
            with pytest.raises(StorageError) as exc_info:
                store.load()
        assert exc_info.value.exit_code == ERROR_PERMISSION_DENIED
        assert "Permission denied" in str(exc_info.value)

    def test_other_os_error_maps_to_storage_exit_code(self, store):
        with patch.object(
            type(store.path), "read_bytes", side_effect=OSError(5, "Input/output error")
        ):
            with pytest.raises(StorageError) as exc_info:
                store.load()
        assert exc_info.value.exit_code == ERROR_STORAGE


# ---------------------------------------------------------------------------
# save
# ---------------------------------------------------------------------------


class TestSave:
    def test_save_creates_file(self, store, task_file, sample_tasks):
        store.save(sample_tasks)
        assert task_file.exists()

    def test_save_writes_pretty_json_array(self, store, task_file, sample_tasks):
        store.save(sample_tasks)
        text = task_file.read_text()
        assert text.startswith("[\n  {")
        assert json.loads(text) == [
            {"id": 1, "description": "Write documentation", "completed": False},
            {"id": 2, "description": "Fix bug", "completed": False},
        ]

    def test_field_order_is_stable(self, store, task_file):
        store.save([Task(id=1, description="x", completed=True)])
        text = task_file.read_text()
        assert text.index('"id"') < text.index('"description"') < text.index('"completed"')

    def test_save_truncates_previous_content(self, store, task_file, sample_tasks):
        task_file.write_text("x" * 10_000)
        store.save(sample_tasks[:1])
        assert json.loads(task_file.read_text()) == [
            {"id": 1, "description": "Write documentation", "completed": False}
        ]

    def test_save_empty_collection(self, store, task_file):
        store.save([])
        assert json.loads(task_file.read_text()) == []
        assert store.load() == []

    def test_custom_indent(self, task_file):
        JsonTaskStore(task_file, indent=4).save([Task(id=1, description="x")])
        assert task_file.read_text().startswith("[\n    {")

    def test_save_into_missing_directory_is_fatal(self, tmp_path):
        store = JsonTaskStore(tmp_path / "missing" / "tasks.json")
        with pytest.raises(StorageError) as exc_info:
            store.save([Task(id=1, description="x")])
        assert exc_info.value.exit_code == ERROR_STORAGE
        assert "Could not write task file" in str(exc_info.value)


# ---------------------------------------------------------------------------
# round trip
# ---------------------------------------------------------------------------


def test_save_then_load_returns_equal_collection(store):
    tasks = [
        Task(id=4, description="unicode ✓ ünïcödé", completed=True),
        Task(id=2, description='quotes " and \\ backslashes', completed=False),
        Task(id=9, description="", completed=True),
    ]
    store.save(tasks)
    assert store.load() == tasks

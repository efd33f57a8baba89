"""Shared test fixtures and configuration.

Keeps tests away from the real log directory and gives each test its own
task file under *tmp_path*.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from taskman_cli.adapters import JsonTaskStore
from taskman_cli.models import Task


@pytest.fixture(autouse=True)
def isolate_logs(tmp_path):
    """Send the application log into tmp_path and reset the logger singleton."""
    import taskman_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("taskman_cli").handlers.clear()
    with patch(
        "taskman_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield tmp_path / "logs"
    for handler in logging.getLogger("taskman_cli").handlers:
        handler.close()
    logging.getLogger("taskman_cli").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def task_file(tmp_path):
    """Path of a task file that does not exist yet."""
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(task_file):
    return JsonTaskStore(task_file)


@pytest.fixture()
def sample_tasks():
    return [
        Task(id=1, description="Write documentation", completed=False),
        Task(id=2, description="Fix bug", completed=False),
    ]


@pytest.fixture()
def seeded_store(store, sample_tasks):
    """A store whose file already holds the two sample tasks."""
    store.save(sample_tasks)
    return store

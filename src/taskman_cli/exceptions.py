"""Application errors raised by services and storage adapters."""

from __future__ import annotations

from taskman_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
)


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class TaskNotFoundError(AppError):
    """No task with the requested id exists."""

    def __init__(self, task_id: int):
        super().__init__(f"Task with id {task_id} not found.", ERROR_NOT_FOUND)
        self.task_id = task_id


class StorageError(AppError):
    """The task file could not be read or written."""

    def __init__(self, message: str, exit_code: int = ERROR_STORAGE):
        super().__init__(message, exit_code)

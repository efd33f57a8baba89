"""JSON file implementation of TaskRepository."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from taskman_cli.config import DEFAULT_TASK_FILE
from taskman_cli.exceptions import StorageError
from taskman_cli.models import Task
from taskman_cli.repositories import TaskRepository
from taskman_cli.utils.exit_codes import ERROR_PERMISSION_DENIED, ERROR_STORAGE
from taskman_cli.utils.logger import get_logger

_TASK_LIST = TypeAdapter(list[Task])


def _storage_error(action: str, path: Path, exc: OSError) -> StorageError:
    code = ERROR_PERMISSION_DENIED if isinstance(exc, PermissionError) else ERROR_STORAGE
    reason = exc.strerror or str(exc)
    return StorageError(f"Could not {action} task file '{path}': {reason}", code)


class JsonTaskStore(TaskRepository):
    """Stores the task collection as a pretty-printed JSON array.

    A missing file and a file that does not parse as a list of tasks both
    load as an empty collection. Saving truncates and rewrites the file in
    place; there is no locking, so the last writer wins.
    """

    def __init__(self, path: Path | str = DEFAULT_TASK_FILE, indent: int = 2):
        self.path = Path(path)
        self.indent = indent

    def load(self) -> list[Task]:
        logger = get_logger()
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug("task file %s does not exist, starting empty", self.path)
            return []
        except OSError as e:
            raise _storage_error("read", self.path, e) from e

        try:
            # strict: JSON types must match exactly, e.g. "1" is not an id
            tasks = _TASK_LIST.validate_json(raw, strict=True)
        except ValidationError as e:
            logger.warning(
                "task file %s is not a valid task list, treating as empty: %s",
                self.path,
                e.errors(include_url=False)[:3],
            )
            return []

        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = _TASK_LIST.dump_json(list(tasks), indent=self.indent or None)
        try:
            self.path.write_bytes(payload)
        except OSError as e:
            raise _storage_error("write", self.path, e) from e
        get_logger().debug("saved %d task(s) to %s", len(tasks), self.path)

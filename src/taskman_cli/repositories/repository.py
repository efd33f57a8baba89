"""Repository abstraction layer for taskman.

The whole task collection is read and written as one unit: every command
loads it fresh, works on the in-memory list and writes the full list back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from taskman_cli.models import Task


class TaskRepository(ABC):
    """Abstract base class for task persistence."""

    @abstractmethod
    def load(self) -> list[Task]:
        """Load every stored task in storage order.

        Returns:
            List of Task objects; empty when nothing usable is stored

        Raises:
            StorageError: If the backing storage exists but cannot be read
        """
        raise NotImplementedError("TaskRepository.load() must be implemented by adapter")

    @abstractmethod
    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the stored collection with *tasks*.

        Args:
            tasks: Full task collection, in the order it should be stored

        Raises:
            StorageError: If the backing storage cannot be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")

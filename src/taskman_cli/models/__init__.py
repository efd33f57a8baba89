"""taskman domain models.

Pydantic models shared by the storage adapters, services and commands.
"""

from .task import STATUS_COMPLETED, STATUS_PENDING, Task

__all__ = [
    "Task",
    "STATUS_COMPLETED",
    "STATUS_PENDING",
]

"""Repository interfaces for taskman.

Implementations (adapters) live in ``taskman_cli.adapters``.
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]

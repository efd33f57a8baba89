"""Storage adapters implementing the repository interfaces."""

from .json_store import JsonTaskStore

__all__ = ["JsonTaskStore"]

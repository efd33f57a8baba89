"""Configuration for taskman."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_TASK_FILE = Path("tasks.json")


class AppConfig(BaseModel):
    """Runtime configuration.

    The task file is resolved against the current working directory, so each
    directory gets its own task list unless ``--file`` points elsewhere.
    """

    task_file: Path = Field(default=DEFAULT_TASK_FILE)
    indent: int = Field(default=2, ge=0)


def resolve_config(obj: object) -> AppConfig:
    """Return the AppConfig stored on a Typer context, or the defaults."""
    if isinstance(obj, AppConfig):
        return obj
    return AppConfig()

"""Command 'add' of taskman"""

import typer

from taskman_cli.config import resolve_config
from taskman_cli.services.task_service import get_task_service
from taskman_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper


@command_wrapper
def add(
    ctx: typer.Context,
    description: str = typer.Option(
        ..., "--description", "-d", help="Task description"
    ),
) -> None:
    """Add a task."""
    task_service = get_task_service(resolve_config(ctx.obj))
    task_service.add_task(description)
    format_success("Task added.")

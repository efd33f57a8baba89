"""Command 'remove' of taskman"""

import typer

from taskman_cli.config import resolve_config
from taskman_cli.services.task_service import get_task_service
from taskman_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper


@command_wrapper
def remove(
    ctx: typer.Context,
    task_id: int = typer.Option(..., "--id", "-i", min=1, help="Task ID"),
) -> None:
    """Remove a task by ID."""
    task_service = get_task_service(resolve_config(ctx.obj))
    task_service.remove_task(task_id)
    format_success("Task removed.")

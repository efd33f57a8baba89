"""Command 'toggle' of taskman"""

import typer

from taskman_cli.config import resolve_config
from taskman_cli.services.task_service import get_task_service
from taskman_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper


@command_wrapper
def toggle(
    ctx: typer.Context,
    task_id: int = typer.Option(..., "--id", "-i", min=1, help="Task ID"),
) -> None:
    """Toggle the completed state of a task by ID."""
    task_service = get_task_service(resolve_config(ctx.obj))
    task = task_service.toggle_task(task_id)
    format_success(f"Task '{task.description}' is now {task.status}.")

"""Command 'edit' of taskman"""

import typer

from taskman_cli.config import resolve_config
from taskman_cli.services.task_service import get_task_service
from taskman_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper


@command_wrapper
def edit(
    ctx: typer.Context,
    task_id: int = typer.Option(..., "--id", "-i", min=1, help="Task ID"),
    description: str = typer.Option(
        ..., "--description", "-d", help="New task description"
    ),
) -> None:
    """Edit a task description by ID."""
    task_service = get_task_service(resolve_config(ctx.obj))
    task = task_service.edit_task(task_id, description)
    format_success(f"Task with ID {task.id} was updated.")

"""Command 'list' of taskman"""

import typer

from taskman_cli.config import resolve_config
from taskman_cli.services.task_service import get_task_service
from taskman_cli.utils.ui.formatters import format_tasks

from .decorators import command_wrapper


@command_wrapper
def list_tasks(
    ctx: typer.Context,
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List all tasks."""
    task_service = get_task_service(resolve_config(ctx.obj))
    tasks = task_service.list_tasks()
    format_tasks(
        tasks,
        header="Tasks:",
        empty_message="No tasks available.",
        output_format="json" if json_opt else "pretty",
    )

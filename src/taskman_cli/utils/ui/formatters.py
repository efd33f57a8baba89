"""Output formatters for taskman."""

import json
from collections.abc import Sequence

from rich.markup import escape

from taskman_cli.models import Task
from taskman_cli.utils.ui.console import get_console, get_error_console


def format_task_line(task: Task) -> str:
    """Render a task as ``"<id>. <description> - <status>"``."""
    return f"{task.id}. {task.description} - {task.status}"


def format_tasks(
    tasks: Sequence[Task],
    *,
    header: str | None = None,
    empty_message: str = "No tasks available.",
    output_format: str = "pretty",
) -> None:
    """Print a task list.

    Args:
        tasks: Tasks to print, in the order given
        header: Line printed above a non-empty list
        empty_message: Line printed instead when there are no tasks
        output_format: "pretty" or "json"
    """
    if output_format == "json":
        print(json.dumps([task.model_dump() for task in tasks], indent=2))
        return

    console = get_console(highlight=False)
    if not tasks:
        console.print(empty_message, style="yellow")
        return

    if header:
        console.print(header, style="bold")
    for task in tasks:
        style = "green" if task.completed else None
        console.print(escape(format_task_line(task)), style=style, soft_wrap=True)


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    get_error_console().print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console(highlight=False).print(escape(message), style="green", soft_wrap=True)


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(escape(message), soft_wrap=True)

"""Command 'search' of taskman"""

import typer

from taskman_cli.config import resolve_config
from taskman_cli.services.task_service import get_task_service
from taskman_cli.utils.ui.formatters import format_tasks

from .decorators import command_wrapper


@command_wrapper
def search(
    ctx: typer.Context,
    query: str = typer.Option(..., "--query", "-q", help="Search query"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output matches as a JSON array ([] when none match)"
    ),
) -> None:
    """Fuzzy search tasks by description, ID, or status.

    Query characters must appear in order, not necessarily adjacent, in
    "<id> <description> <Completed|Pending>". Matches are shown in list order.
    With --json an empty array replaces the "no matches" message.
    """
    task_service = get_task_service(resolve_config(ctx.obj))
    matches = task_service.search_tasks(query)
    format_tasks(
        matches,
        empty_message="No tasks matched the query.",
        output_format="json" if json_opt else "pretty",
    )

"""Main entry point for taskman."""

from pathlib import Path

import typer

from taskman_cli import __version__
from taskman_cli.commands import (
    add_command,
    edit_command,
    list_command,
    remove_command,
    search_command,
    toggle_command,
)
from taskman_cli.config import DEFAULT_TASK_FILE, AppConfig
from taskman_cli.utils.logger import get_log_file
from taskman_cli.utils.typer_helpers import SuggestingGroup
from taskman_cli.utils.ui.console import get_console

app = typer.Typer(
    name="taskman",
    cls=SuggestingGroup,
    help="A simple CLI task manager",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    task_file: Path = typer.Option(
        DEFAULT_TASK_FILE,
        "--file",
        help="Task file to use (relative to the current directory)",
    ),
) -> None:
    """A simple CLI task manager."""
    ctx.obj = AppConfig(task_file=task_file)


app.command("add")(add_command.add)
app.command("list")(list_command.list_tasks)
app.command("remove")(remove_command.remove)
app.command("edit")(edit_command.edit)
app.command("toggle")(toggle_command.toggle)
app.command("search")(search_command.search)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]taskman[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Log file: {get_log_file()}[/dim]", soft_wrap=True)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()

"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from taskman_cli.utils.exit_codes import ERROR_INVALID_ARGS
from taskman_cli.utils.ui.console import get_error_console


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Return up to three known command names close to *attempted*."""
    return get_close_matches(attempted, available, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that suggests commands on typos ("Did you mean this?")."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            # Anything we cannot turn into a suggestion keeps the usage error.
            if not args or args[0] in self.commands:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, sorted(self.commands))
            if not suggestions:
                raise

            console = get_error_console()
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(ERROR_INVALID_ARGS) from e

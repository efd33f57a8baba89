"""Console utilities for taskman."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, stderr: bool = False) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight, stderr=stderr, emoji=False)


def get_error_console() -> Console:
    """Get the Rich Console that writes to stderr."""
    return get_console(highlight=False, stderr=True)

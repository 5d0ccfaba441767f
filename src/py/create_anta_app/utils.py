"""Utility helpers for create-anta-app."""

from collections.abc import Sequence

from rich.console import Console

__all__ = ("console", "format_command")

console = Console()


def format_command(command: "Sequence[str] | None") -> str:
    """Join a command for display.

    Args:
        command: Command arguments, or None.

    Returns:
        The space-joined command, or an empty string.
    """
    return " ".join(command) if command else ""

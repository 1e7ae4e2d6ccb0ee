"""Output formatters for CLI commands."""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()
error_console = Console(stderr=True)


def print_document(data: dict[str, Any] | list[Any]) -> None:
    """Print a parsed JSON document."""
    if not data:
        console.print("[dim]No data[/dim]")
        return
    console.print_json(json.dumps(data, default=str))


def print_url(url: str) -> None:
    """Print a built URL without markup processing."""
    console.print(url, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]Error:[/red] {escape(message)}")

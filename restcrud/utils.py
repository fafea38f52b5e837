"""Shared utility functions for restcrud.

Provides the Rich console every module prints through, a handful of
coloured message helpers, and the small file-system helpers the scaffolder
uses.  File-system errors are never caught here; they reach the caller
unchanged.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8, replacing anything already there."""
    file_path = Path(path)
    file_path.write_text(content, encoding="utf-8")
    return file_path


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as JSON indented by two spaces, without a trailing newline.

    Args:
        data: Serialisable data (dict or list).  Key order is preserved.
        path: Destination file path.  Existing content is overwritten.
    """
    content = json.dumps(data, indent=2, ensure_ascii=False)
    return write_text(path, content)


def touch_if_missing(path: str | Path) -> bool:
    """Create an empty file at *path* unless something already exists there.

    Returns:
        ``True`` if the file was created by this call.
    """
    file_path = Path(path)
    if file_path.exists():
        return False
    file_path.write_text("", encoding="utf-8")
    return True


def mkdir_if_missing(path: str | Path) -> bool:
    """Create the directory *path* unless something already exists there.

    The parent must exist.  An existing regular file at *path* is left alone
    (and counts as present).

    Returns:
        ``True`` if the directory was created by this call.
    """
    dir_path = Path(path)
    if dir_path.exists():
        return False
    dir_path.mkdir()
    return True


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_step(message: str) -> None:
    """Print a plain progress line exactly as given, never wrapped."""
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print an error message behind a red ``Error:`` prefix."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")

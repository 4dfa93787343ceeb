"""Shared utility functions for Guppy.

Provides the shared Rich console, slug derivation, manifest JSON I/O and the
coloured status printers used by the creator and the CLI.
"""

from __future__ import annotations

import asyncio
import json
import re
import unicodedata
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


# npm rejects package names longer than this, and it stays well under the
# 255-byte limit most filesystems put on a path component.
MAX_SLUG_LENGTH = 214


def slugify(name: str) -> str:
    """Convert a human-readable project name to a filesystem-safe id.

    * Transliterates accented Latin letters to ASCII (``é`` -> ``e``).
    * Lowercases the input.
    * Replaces whitespace and anything that is not alphanumeric, ``-``, ``_``
      or ``.`` with hyphens.
    * Collapses consecutive hyphens and strips leading/trailing hyphens.
    * Truncates to ``MAX_SLUG_LENGTH`` characters.

    The result is stable for a given name; two names may share a slug.

    Examples::

        slugify("My App") -> "my-app"
        slugify("Café Crème") -> "cafe-creme"
        slugify("  Hello, World!  ") -> "hello-world"
        slugify("!!!") -> ""
    """
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    result = re.sub(r"[^a-z0-9_.-]", "-", ascii_name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-.")[:MAX_SLUG_LENGTH].rstrip("-.")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way ``package.json`` files are written: 2-space
    indentation, non-ASCII characters kept as-is, key order preserved."""
    return json.dumps(data, indent=2, ensure_ascii=False)


async def load_json(path: str | Path) -> Any:
    """Read and parse a UTF-8 JSON file off the event loop.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    return json.loads(raw)


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Rewrite *path* with pretty-printed JSON.

    Unlike a generic save, parent directories are *not* created: the target
    is always a file that already exists next to its project.
    """
    content = dump_json(data)
    await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")


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


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", highlight=False)

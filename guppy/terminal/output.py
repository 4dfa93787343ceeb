"""Terminal output rendered as HTML.

Scaffolding tools colour their output with ANSI escape codes. These helpers
turn raw log chunks into inline-styled markup for the dashboard's terminal
panel: escape codes become ``<span style=...>``, leading spaces survive as
``&nbsp;`` and line breaks become ``<br />``.
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import Iterable

from rich.ansi import AnsiDecoder
from rich.console import Console
from rich.text import Text

from guppy.constants import COLORS

DEFAULT_HEIGHT = 200

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

# Only used to resolve styles; never printed to.
_style_console = Console(file=io.StringIO(), color_system="truecolor")


def _render_line(line: Text) -> str:
    parts: list[str] = []
    at_line_start = True

    for segment in line.render(_style_console):
        text = segment.text
        if not text:
            continue

        indent = ""
        if at_line_start:
            stripped = text.lstrip(" ")
            indent = "&nbsp;" * (len(text) - len(stripped))
            text = stripped
            at_line_start = not text

        body = indent + escape(text, quote=False)
        css = segment.style.get_html_style() if segment.style else ""
        if css:
            parts.append(f'<span style="{css}">{body}</span>')
        else:
            parts.append(body)

    return "".join(parts)


def render_log(log: str) -> str:
    """Convert one raw log chunk to HTML.

    Styles carry across line breaks inside the chunk, as they would in a
    terminal. Malformed escape sequences are dropped by the decoder.
    """
    decoder = AnsiDecoder()
    lines = _LINE_BREAK_RE.split(log)
    return "<br />".join(_render_line(decoder.decode_line(line)) for line in lines)


def render_terminal_output(logs: Iterable[str], height: int = DEFAULT_HEIGHT) -> str:
    """Render *logs* as a scrollable panel *height* pixels tall.

    The nested table wrappers keep the newest output pinned to the bottom
    while the panel still scrolls.
    """
    wrapper_style = (
        f"height: {height}px; overflow: auto; padding: 15px; "
        f"color: {COLORS['white']}; background-color: {COLORS['blue'][900]}; "
        "border-radius: 4px; font-family: monospace;"
    )
    table_style = "display: table; width: 100%; height: 100%;"
    cell_style = "display: table-cell; vertical-align: bottom; width: 100%; height: 100%;"
    log_style = "min-height: 0; margin-top: 10px;"

    rendered = "".join(
        f'<div class="log" style="{log_style}">{render_log(log)}</div>' for log in logs
    )
    return (
        f'<div class="terminal-output" style="{wrapper_style}">'
        f'<div style="{table_style}">'
        f'<div style="{cell_style}">{rendered}</div>'
        "</div>"
        "</div>"
    )


@dataclass
class TerminalOutput:
    """Accumulates log chunks for one terminal panel."""

    logs: list[str] = field(default_factory=list)
    height: int = DEFAULT_HEIGHT

    def append(self, log: str) -> None:
        self.logs.append(log)

    def render(self) -> str:
        return render_terminal_output(self.logs, self.height)

    def save(self, path: str | Path) -> Path:
        """Write a standalone HTML page containing the panel."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        page = (
            "<!DOCTYPE html>\n"
            '<html><head><meta charset="utf-8"><title>Guppy terminal output</title></head>\n'
            f"<body>{self.render()}</body></html>\n"
        )
        target.write_text(page, encoding="utf-8")
        return target

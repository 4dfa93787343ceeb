"""ANSI terminal output rendering for the dashboard."""

from .output import (
    TerminalOutput,
    render_log,
    render_terminal_output,
)

__all__ = [
    "TerminalOutput",
    "render_log",
    "render_terminal_output",
]

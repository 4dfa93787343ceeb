"""Host platform adapters."""

from __future__ import annotations

import sys


def is_windows(platform: str | None = None) -> bool:
    return (platform or sys.platform) == "win32"


def format_command_for_platform(command: str, platform: str | None = None) -> str:
    """Adapt a base command name to the host's executable resolution rules.

    Windows resolves ``npx`` to a script rather than the ``npx.cmd`` shim, so
    the ``.cmd`` suffix is appended there. Other platforms get the command
    unchanged.

    Args:
        command: Base command name, e.g. ``"npx"``.
        platform: Override for ``sys.platform`` (mainly for tests).
    """
    if is_windows(platform):
        return f"{command}.cmd"
    return command


WINDOWS_RESERVED_NAMES = frozenset(
    ["con", "prn", "aux", "nul"]
    + [f"com{i}" for i in range(1, 10)]
    + [f"lpt{i}" for i in range(1, 10)]
)


def is_reserved_name(component: str) -> bool:
    """True if *component* cannot name a file or folder on Windows.

    The check ignores any extension (``con.txt`` is reserved too) and is
    applied on every platform, so a project folder can always be copied to a
    Windows machine.
    """
    return component.split(".", 1)[0].lower() in WINDOWS_RESERVED_NAMES

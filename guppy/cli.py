"""Guppy command line.

Usage::

    guppy new "My App" --type gatsby --icon icon_3
    guppy new "My App" --fake
    guppy render build.log -o build.html
    guppy color "My App"
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from contextlib import aclosing
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel

from guppy.config import Config
from guppy.project import (
    CreationComplete,
    CreationFailed,
    ErrorOutput,
    InvalidProjectNameError,
    ProjectCreator,
    ProjectInfo,
    ProjectType,
    StatusUpdate,
    UnrecognizedProjectTypeError,
    color_for_project,
)
from guppy.terminal import TerminalOutput
from guppy.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    slugify,
)


async def run_new(info: ProjectInfo, config: Config, output: TerminalOutput) -> dict[str, Any] | None:
    """Drive one project creation, echoing events to the console.

    Every status and stderr chunk is also appended to *output*. Returns the
    final manifest, or ``None`` if creation failed.
    """
    console.print(
        Panel(
            f"[cyan]Creating project[/cyan]\n"
            f"  Name: {escape(info.name)}\n"
            f"  Type: {info.type.value}\n"
            f"  Parent: {escape(str(config.parent_path))}",
            title="Guppy",
            border_style="cyan",
        )
    )

    creator = ProjectCreator(config)
    async with aclosing(creator.create(info)) as events:
        async for event in events:
            if isinstance(event, StatusUpdate):
                output.append(event.text)
                console.print(f"[dim]{escape(event.text.rstrip())}[/dim]", highlight=False)
            elif isinstance(event, ErrorOutput):
                output.append(event.text)
                print_warning(event.text.rstrip())
            elif isinstance(event, CreationComplete):
                return event.manifest
            elif isinstance(event, CreationFailed):
                print_error(f"Project creation failed ({event.stage.value}): {event.message}")
                return None
    return None


def _cmd_new(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {}
    if args.parent_path:
        overrides["parent_path"] = Path(args.parent_path).expanduser()
    if args.fake:
        overrides["disable_creation"] = True
    if args.abort_on_failed_exit:
        overrides["abort_on_failed_exit"] = True
    if args.timeout is not None:
        overrides["process_timeout"] = args.timeout

    try:
        config = Config.from_env().with_overrides(**overrides)
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    try:
        info = ProjectInfo(name=args.name, type=args.type, icon=args.icon)
    except ValidationError as exc:
        print_error(f"Invalid project: {exc}")
        return 1

    output = TerminalOutput(height=config.terminal_height)
    try:
        manifest = asyncio.run(run_new(info, config, output))
    except (InvalidProjectNameError, UnrecognizedProjectTypeError, OSError) as exc:
        print_error(str(exc))
        return 1
    finally:
        if args.html_log:
            target = output.save(args.html_log)
            console.print(f"[dim]Terminal output written to {escape(str(target))}[/dim]")

    if manifest is None:
        return 1

    metadata = manifest.get("guppy", {})
    print_summary_table(
        {
            "Id": metadata.get("id", ""),
            "Name": metadata.get("name", ""),
            "Type": metadata.get("type", ""),
            "Color": metadata.get("color", ""),
            "Path": str(config.parent_path / metadata.get("id", "")),
        },
        title="Project created",
    )
    print_success("Project created successfully!")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    source = Path(args.logfile)
    if not source.exists():
        print_error(f"Log file not found: {source}")
        return 1

    raw = source.read_text(encoding="utf-8", errors="replace")
    output = TerminalOutput(logs=[raw], height=args.height)
    target = output.save(args.output or source.with_suffix(".html"))
    print_success(f"Rendered {source} -> {target}")
    return 0


def _cmd_color(args: argparse.Namespace) -> int:
    color = color_for_project(args.name)
    print_summary_table(
        {"Id": slugify(args.name), "Color": color},
        title=args.name,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guppy",
        description="Guppy -- create and manage JavaScript front-end projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  guppy new "My App"\n'
            '  guppy new "My Blog" --type gatsby --icon icon_7\n'
            "  guppy render build.log -o build.html\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser("new", help="Scaffold a new project")
    new.add_argument("name", help="Human-readable project name")
    new.add_argument(
        "--type",
        choices=[t.value for t in ProjectType],
        default=ProjectType.CREATE_REACT_APP.value,
        help="Scaffolding tool (default: create-react-app)",
    )
    new.add_argument("--icon", default="", help="Icon identifier for the dashboard")
    new.add_argument(
        "--parent-path",
        default=None,
        help="Projects folder (default: ~/guppy-projects or $GUPPY_PARENT_PATH)",
    )
    new.add_argument(
        "--fake",
        action="store_true",
        help="Skip the scaffolding tool and use a canned manifest",
    )
    new.add_argument(
        "--abort-on-failed-exit",
        action="store_true",
        help="Fail instead of patching package.json when the tool exits nonzero",
    )
    new.add_argument("--timeout", type=int, default=None, help="Tool timeout in seconds")
    new.add_argument("--html-log", default=None, help="Write the tool output as HTML here")
    new.set_defaults(func=_cmd_new)

    render = subparsers.add_parser("render", help="Render an ANSI log file to HTML")
    render.add_argument("logfile", help="Raw terminal log")
    render.add_argument("--height", type=int, default=200, help="Panel height in pixels")
    render.add_argument("--output", "-o", default=None, help="Output HTML file")
    render.set_defaults(func=_cmd_render)

    color = subparsers.add_parser("color", help="Show the id and colour for a name")
    color.add_argument("name", help="Project name")
    color.set_defaults(func=_cmd_color)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``guppy`` and ``python -m guppy``."""
    args = build_parser().parse_args(argv)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()

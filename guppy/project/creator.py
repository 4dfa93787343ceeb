"""Creation of new Guppy projects.

Interfaces with the host machine to:

1. Create the projects directory, if this is the first project.
2. Run create-react-app (or Gatsby) to generate the project.
3. Add Guppy's own metadata to the generated ``package.json`` so the
   dashboard can recognise it as a Guppy project.

Creation needs to report progress many times before it finishes, so the core
API is an async generator of events rather than a single awaitable result.
``create_project`` adapts that stream to the status/error/complete callbacks
the dashboard uses.
"""

from __future__ import annotations

import asyncio
import codecs
import copy
import time
from collections.abc import AsyncIterator, Callable
from contextlib import aclosing
from typing import Any, Optional

from guppy.config import Config
from guppy.platform import is_reserved_name
from guppy.project.build_instructions import get_build_instructions
from guppy.project.colors import color_for_project
from guppy.project.fixtures import FAKE_CRA_PROJECT
from guppy.project.models import (
    CreationComplete,
    CreationEvent,
    CreationFailed,
    ErrorOutput,
    FailureStage,
    GuppyMetadata,
    ProjectInfo,
    StatusUpdate,
)
from guppy.utils import load_json, print_error, save_json, slugify

STATUS_PARENT_CREATED = "Created parent directory"
STATUS_DEPENDENCIES_INSTALLED = "Dependencies installed"

MANIFEST_FILENAME = "package.json"


class InvalidProjectNameError(ValueError):
    """Raised when a project name does not give a usable folder name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Project name {name!r} does not produce a usable id")


class ProjectCreator:
    """Runs a scaffolding tool and tags its output as a Guppy project.

    Each ``create`` call spawns at most one child process. Concurrent calls
    are not coordinated: two projects with the same id race for the same
    directory.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    async def create(self, info: ProjectInfo) -> AsyncIterator[CreationEvent]:
        """Create the project described by *info*, yielding progress events.

        The stream ends after exactly one ``CreationComplete`` or
        ``CreationFailed``. Closing the generator early kills a child process
        that is still running.

        Raises:
            InvalidProjectNameError: If *info.name* slugifies to nothing or
                to a name Windows reserves (``con``, ``aux``, ...).
            UnrecognizedProjectTypeError: For an unknown project type. Both
                are raised before any directory is created or process spawned.
            FileNotFoundError: If the parent directory's own parent is missing.
        """
        if self.config.disable_creation:
            yield CreationComplete(copy.deepcopy(FAKE_CRA_PROJECT))
            return

        project_id = slugify(info.name)
        if not project_id or is_reserved_name(project_id):
            raise InvalidProjectNameError(info.name)

        parent_path = self.config.parent_path
        project_path = parent_path / project_id
        instruction, *args = get_build_instructions(info.type, str(project_path))

        # Not recursive: the folder's own parent must already exist.
        if not parent_path.exists():
            parent_path.mkdir()

        yield StatusUpdate(STATUS_PARENT_CREATED)

        try:
            process = await asyncio.create_subprocess_exec(
                instruction,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (FileNotFoundError, PermissionError) as exc:
            message = (
                f"Could not start '{instruction}': {exc}. "
                "Ensure Node.js (with npx) is installed and in PATH."
            )
            print_error(message)
            yield CreationFailed(FailureStage.PROCESS, message)
            return

        queue: asyncio.Queue[Optional[CreationEvent]] = asyncio.Queue()
        pumps = [
            asyncio.create_task(self._pump(process.stdout, StatusUpdate, queue)),
            asyncio.create_task(self._pump(process.stderr, ErrorOutput, queue)),
        ]

        try:
            loop = asyncio.get_running_loop()
            timeout = self.config.process_timeout
            deadline = loop.time() + timeout if timeout else None
            open_streams = len(pumps)
            timed_out = False

            while open_streams:
                remaining = None if deadline is None else deadline - loop.time()
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=remaining)
                except asyncio.TimeoutError:
                    timed_out = True
                    break
                if event is None:
                    open_streams -= 1
                    continue
                yield event

            if timed_out:
                process.kill()
                await process.wait()
                message = f"'{instruction}' timed out after {timeout}s"
                print_error(message)
                yield CreationFailed(FailureStage.TIMEOUT, message)
                return

            exit_code = await process.wait()
        finally:
            for pump in pumps:
                pump.cancel()
            await asyncio.gather(*pumps, return_exceptions=True)
            if process.returncode is None:
                process.kill()
                await process.wait()

        if exit_code != 0 and self.config.abort_on_failed_exit:
            message = f"'{' '.join([instruction, *args])}' exited with code {exit_code}"
            print_error(message)
            yield CreationFailed(FailureStage.PROCESS, message)
            return

        yield StatusUpdate(STATUS_DEPENDENCIES_INSTALLED)

        manifest_path = project_path / MANIFEST_FILENAME
        try:
            manifest = await load_json(manifest_path)
        except (OSError, ValueError) as exc:
            print_error(f"Could not read {manifest_path}: {exc}")
            yield CreationFailed(FailureStage.MANIFEST_READ, str(exc))
            return

        if not isinstance(manifest, dict):
            message = f"{manifest_path} does not contain a JSON object"
            print_error(message)
            yield CreationFailed(FailureStage.MANIFEST_READ, message)
            return

        metadata = GuppyMetadata(
            id=project_id,
            name=info.name,
            type=info.type,
            icon=info.icon,
            color=color_for_project(info.name),
            created_at=int(time.time() * 1000),
        )
        manifest["guppy"] = metadata.as_manifest_entry()

        try:
            await save_json(manifest, manifest_path)
        except OSError as exc:
            print_error(f"Could not write {manifest_path}: {exc}")
            yield CreationFailed(FailureStage.MANIFEST_WRITE, str(exc))
            return

        yield CreationComplete(manifest)

    async def _pump(
        self,
        stream: asyncio.StreamReader | None,
        event_type: Callable[[str], CreationEvent],
        queue: asyncio.Queue[Optional[CreationEvent]],
    ) -> None:
        """Forward raw chunks of *stream* to *queue*; ``None`` marks EOF."""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        try:
            if stream is None:
                return
            while True:
                chunk = await stream.read(self.config.chunk_size)
                if not chunk:
                    break
                text = decoder.decode(chunk)
                if text:
                    queue.put_nowait(event_type(text))
            tail = decoder.decode(b"", final=True)
            if tail:
                queue.put_nowait(event_type(tail))
        finally:
            queue.put_nowait(None)


async def create_project(
    info: ProjectInfo,
    on_status_update: Callable[[str], Any],
    on_error: Callable[[str], Any],
    on_complete: Callable[[dict[str, Any]], Any],
    on_failure: Callable[[FailureStage, str], Any] | None = None,
    config: Config | None = None,
) -> None:
    """Callback front end for ``ProjectCreator.create``.

    ``on_status_update`` and ``on_error`` fire any number of times (the latter
    only with the tool's stderr). ``on_complete`` fires at most once, with the
    rewritten manifest, and only if everything succeeded. Failures after the
    process starts go to ``on_failure`` when given; either way they are
    printed to the console.
    """
    creator = ProjectCreator(config)
    async with aclosing(creator.create(info)) as events:
        async for event in events:
            if isinstance(event, StatusUpdate):
                on_status_update(event.text)
            elif isinstance(event, ErrorOutput):
                on_error(event.text)
            elif isinstance(event, CreationComplete):
                on_complete(event.manifest)
            elif isinstance(event, CreationFailed) and on_failure is not None:
                on_failure(event.stage, event.message)

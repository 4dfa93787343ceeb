"""Shared pytest fixtures for the Guppy test suite.

Provides reusable fixtures for:
- A configuration pointing at a temporary projects folder
- A fake ``npx`` scaffolding tool (patched ``asyncio.create_subprocess_exec``)
- Callback recorders for the ``create_project`` facade
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from guppy.config import Config


# ---------------------------------------------------------------------------
# Paths & Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def parent_path(tmp_path: Path) -> Path:
    """Projects folder that does not exist yet (its parent does)."""
    return tmp_path / "guppy-projects"


@pytest.fixture
def guppy_config(parent_path: Path) -> Config:
    """Real-mode configuration rooted in the temporary projects folder."""
    return Config(parent_path=parent_path)


# ---------------------------------------------------------------------------
# Fake scaffolding tool
# ---------------------------------------------------------------------------

def make_stream(data: bytes = b"", eof: bool = True) -> asyncio.StreamReader:
    """A StreamReader pre-loaded with *data*. Must be called inside a loop."""
    reader = asyncio.StreamReader()
    if data:
        reader.feed_data(data)
    if eof:
        reader.feed_eof()
    return reader


class FakeScaffoldTool:
    """Stands in for ``npx create-react-app`` / ``npx gatsby new``.

    When spawned it optionally writes ``package.json`` into the target path
    (the last argument) and returns a process whose stdout/stderr streams
    replay the configured bytes.
    """

    def __init__(
        self,
        stdout: bytes = b"",
        stderr: bytes = b"",
        returncode: int | None = 0,
        manifest: dict[str, Any] | str | None = None,
        eof: bool = True,
    ) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.manifest = manifest
        self.eof = eof
        self.calls: list[list[str]] = []
        self.processes: list[MagicMock] = []
        self._patcher = patch("asyncio.create_subprocess_exec", side_effect=self._spawn)

    async def _spawn(self, *cmd: str, **kwargs: Any) -> MagicMock:
        self.calls.append(list(cmd))

        if self.manifest is not None:
            target = Path(cmd[-1])
            target.mkdir(parents=True, exist_ok=True)
            content = (
                self.manifest if isinstance(self.manifest, str) else json.dumps(self.manifest)
            )
            (target / "package.json").write_text(content, encoding="utf-8")

        process = MagicMock()
        process.stdout = make_stream(self.stdout, eof=self.eof)
        process.stderr = make_stream(self.stderr, eof=self.eof)
        process.returncode = self.returncode
        process.pid = 4242
        process.wait = AsyncMock(return_value=self.returncode)
        process.kill = MagicMock()
        self.processes.append(process)
        return process

    def __enter__(self) -> "FakeScaffoldTool":
        self._patcher.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._patcher.stop()


@pytest.fixture
def fake_tool():
    """Factory for ``FakeScaffoldTool`` context managers.

    Usage:
        def test_create(fake_tool):
            with fake_tool(manifest={"name": "my-app"}) as tool:
                ...
            assert tool.calls
    """
    return FakeScaffoldTool


# ---------------------------------------------------------------------------
# Callback recorders
# ---------------------------------------------------------------------------

class CallbackRecorder:
    """Records every callback ``create_project`` makes, in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def on_status_update(self, text: str) -> None:
        self.events.append(("status", text))

    def on_error(self, text: str) -> None:
        self.events.append(("error", text))

    def on_complete(self, manifest: dict[str, Any]) -> None:
        self.events.append(("complete", manifest))

    def on_failure(self, stage: Any, message: str) -> None:
        self.events.append(("failure", (stage, message)))

    def of(self, kind: str) -> list[Any]:
        return [payload for name, payload in self.events if name == kind]

    @property
    def kinds(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()

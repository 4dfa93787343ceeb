"""Guppy configuration.

Typed settings for project creation. All settings use Pydantic v2 models so
they can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def default_parent_path() -> Path:
    """Directory that holds every project Guppy creates: ``~/guppy-projects``."""
    return Path.home() / "guppy-projects"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class Config(BaseModel):
    """Global Guppy configuration.

    Instances are typically created once by the CLI entry point (or by the
    host application) and handed to ``ProjectCreator``.
    """

    parent_path: Path = Field(default_factory=default_parent_path)

    # Fixture mode: skip the scaffolding tool entirely and complete with a
    # canned manifest. Used while working on the creation flow.
    disable_creation: bool = Field(default=False)

    # Exit-code policy for the scaffolding tool. When False a nonzero exit
    # still proceeds to the manifest step.
    abort_on_failed_exit: bool = Field(default=False)

    process_timeout: Optional[int] = Field(
        default=None, ge=1, description="Scaffolding process timeout in seconds"
    )
    chunk_size: int = Field(
        default=4096, ge=1, description="Max bytes read from a child stream at once"
    )
    terminal_height: int = Field(
        default=200, ge=50, description="Height in pixels of rendered terminal output"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    def with_overrides(self, **overrides: Any) -> "Config":
        """Return a copy with *overrides* applied and re-validated.

        Raises:
            pydantic.ValidationError: If an override breaks a field constraint.
        """
        return type(self).model_validate({**self.model_dump(), **overrides})

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GUPPY_PARENT_PATH, GUPPY_DISABLE_CREATION,
            GUPPY_ABORT_ON_FAILED_EXIT, GUPPY_PROCESS_TIMEOUT.

        Raises:
            ValueError: If GUPPY_PROCESS_TIMEOUT is not a positive integer
                (``pydantic.ValidationError`` is a ``ValueError``).
        """
        kwargs: dict[str, Any] = {
            "disable_creation": _env_flag("GUPPY_DISABLE_CREATION"),
            "abort_on_failed_exit": _env_flag("GUPPY_ABORT_ON_FAILED_EXIT"),
        }
        if os.environ.get("GUPPY_PARENT_PATH"):
            kwargs["parent_path"] = Path(os.environ["GUPPY_PARENT_PATH"]).expanduser()
        if os.environ.get("GUPPY_PROCESS_TIMEOUT"):
            kwargs["process_timeout"] = int(os.environ["GUPPY_PROCESS_TIMEOUT"])

        return cls(**kwargs)

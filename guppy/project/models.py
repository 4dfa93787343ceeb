"""Data model for project creation.

``ProjectInfo`` and ``GuppyMetadata`` are Pydantic v2 models; the creation
events are small dataclasses, one per variant, consumed from
``ProjectCreator.create``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectType(str, Enum):
    """Scaffolding tools Guppy knows how to drive."""
    CREATE_REACT_APP = "create-react-app"
    GATSBY = "gatsby"


class FailureStage(str, Enum):
    """Where a creation attempt stopped."""
    PROCESS = "process"
    TIMEOUT = "timeout"
    MANIFEST_READ = "manifest-read"
    MANIFEST_WRITE = "manifest-write"


# ---------------------------------------------------------------------------
# Input & metadata models
# ---------------------------------------------------------------------------

class ProjectInfo(BaseModel):
    """What the user asked for in the "new project" flow."""
    name: str = Field(..., min_length=1, description="Human-readable project name")
    type: ProjectType = Field(..., description="Scaffolding tool to run")
    icon: str = Field(default="", description="Icon identifier shown on the dashboard")


class GuppyMetadata(BaseModel):
    """The ``guppy`` object injected into a project's ``package.json``."""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str
    name: str
    type: ProjectType
    icon: str
    color: str
    created_at: int = Field(..., alias="createdAt", description="Unix time in milliseconds")

    def as_manifest_entry(self) -> dict[str, Any]:
        """Plain dict in manifest key order and spelling."""
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Creation events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatusUpdate:
    """Progress text: Guppy's own milestones and the tool's stdout."""
    text: str


@dataclass(frozen=True)
class ErrorOutput:
    """A chunk of the scaffolding tool's stderr."""
    text: str


@dataclass(frozen=True)
class CreationComplete:
    """Terminal success event carrying the rewritten manifest."""
    manifest: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CreationFailed:
    """Terminal failure event."""
    stage: FailureStage
    message: str


CreationEvent = Union[StatusUpdate, ErrorOutput, CreationComplete, CreationFailed]

"""Guppy project creation.

Scaffolds new create-react-app / Gatsby projects through ``npx`` and tags the
generated ``package.json`` with Guppy metadata.

Quick usage::

    from guppy.project import ProjectCreator, ProjectInfo, ProjectType

    creator = ProjectCreator()
    info = ProjectInfo(name="My App", type=ProjectType.GATSBY, icon="icon_1")
    async for event in creator.create(info):
        ...
"""

from .build_instructions import (
    UnrecognizedProjectTypeError,
    get_build_instructions,
)
from .colors import PROJECT_COLORS, color_for_project
from .creator import InvalidProjectNameError, ProjectCreator, create_project
from .models import (
    CreationComplete,
    CreationEvent,
    CreationFailed,
    ErrorOutput,
    FailureStage,
    GuppyMetadata,
    ProjectInfo,
    ProjectType,
    StatusUpdate,
)

__all__ = [
    # Creation
    "ProjectCreator",
    "create_project",
    "InvalidProjectNameError",
    # Build instructions
    "get_build_instructions",
    "UnrecognizedProjectTypeError",
    # Colours
    "PROJECT_COLORS",
    "color_for_project",
    # Models & events
    "ProjectInfo",
    "ProjectType",
    "GuppyMetadata",
    "FailureStage",
    "CreationEvent",
    "StatusUpdate",
    "ErrorOutput",
    "CreationComplete",
    "CreationFailed",
]

"""Command lines for the external scaffolding tools."""

from __future__ import annotations

from guppy.platform import format_command_for_platform
from guppy.project.models import ProjectType


class UnrecognizedProjectTypeError(ValueError):
    """Raised when asked to build a project type Guppy has no tool for."""

    def __init__(self, project_type: object) -> None:
        self.project_type = project_type
        value = project_type.value if isinstance(project_type, ProjectType) else project_type
        super().__init__(f"Unrecognized project type: {value}")


def get_build_instructions(
    project_type: ProjectType | str,
    path: str,
    platform: str | None = None,
) -> list[str]:
    """Return ``[command, *args]`` that scaffolds *project_type* at *path*.

    Args:
        project_type: A ``ProjectType`` member or its string value.
        path: Target project directory, passed to the tool as-is.
        platform: Override for ``sys.platform`` (mainly for tests).

    Raises:
        UnrecognizedProjectTypeError: For anything outside ``ProjectType``.
    """
    try:
        kind = ProjectType(project_type)
    except ValueError:
        raise UnrecognizedProjectTypeError(project_type) from None

    command = format_command_for_platform("npx", platform)

    if kind is ProjectType.CREATE_REACT_APP:
        return [command, "create-react-app", path]
    if kind is ProjectType.GATSBY:
        return [command, "gatsby", "new", path]

    raise UnrecognizedProjectTypeError(project_type)

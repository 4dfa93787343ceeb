"""Deterministic colour assignment for projects."""

from __future__ import annotations

import random

from guppy.constants import COLORS

# The project colour is unused for freshly-created projects, but imported
# non-Guppy projects rely on it, so every project gets one.
PROJECT_COLORS: tuple[str, ...] = (
    COLORS["hotPink"][700],
    COLORS["pink"][700],
    COLORS["red"][700],
    COLORS["orange"][700],
    COLORS["green"][700],
    COLORS["teal"][700],
    COLORS["violet"][700],
    COLORS["purple"][700],
)


def color_for_project(project_name: str) -> str:
    """Return the palette colour for *project_name*.

    The name seeds a private PRNG (string seeds are hashed with SHA-512, so
    the draw is identical across runs and platforms) and one index is drawn
    uniformly from the palette. Different names may share a colour.
    """
    index = random.Random(project_name).randrange(len(PROJECT_COLORS))
    return PROJECT_COLORS[index]

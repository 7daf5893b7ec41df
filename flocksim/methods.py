"""Neighbour-search strategies used by the simulation."""

from __future__ import annotations

from enum import Enum


class Method(Enum):
    """How a boid finds the other boids near it."""

    HASH = 0
    TREE = 1
    FORCE = 2


def method_to_string(method) -> str:
    """Return the display name of a method, or ``"UNKNOWN"``."""
    try:
        return Method(method).name
    except ValueError:
        return "UNKNOWN"
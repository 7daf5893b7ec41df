"""Simulation settings and command-line parsing."""

from __future__ import annotations

import math
import sys
from collections import deque
from dataclasses import dataclass

from .methods import Method

DEG2RAD = math.pi / 180.0


@dataclass
class SimulationConfig:
    """Every tunable of the simulation, with its default."""

    width: int = 1200
    height: int = 800
    boid_count: int = 12000
    debug_mode: bool = False
    method: Method = Method.HASH

    k_mean: bool = False
    k_mean_clusters: int = 3
    k_mean_max_iter: int = 3

    separation_range: float = 10.0
    alignment_range: float = 60.0
    cohesion_range: float = 60.0

    separation_strength: float = 4.0
    alignment_strength: float = 1.5
    cohesion_strength: float = 1.5

    max_velocity: float = 2.0
    max_force: float = 0.10

    fov_angle_radians: float = 120.0 * DEG2RAD

    cell_size: int = 25
    max_boids_in_tree: int = 30

    max_neighbors: int = 10

    @property
    def separation_range_squared(self) -> float:
        return self.separation_range * self.separation_range

    @property
    def alignment_range_squared(self) -> float:
        return self.alignment_range * self.alignment_range

    @property
    def cohesion_range_squared(self) -> float:
        return self.cohesion_range * self.cohesion_range

    @property
    def cos_half_fov(self) -> float:
        return math.cos(self.fov_angle_radians / 2.0)


def parse_method(text: str) -> Method:
    """Map a command-line method name to a ``Method``."""
    methods = {"hash": Method.HASH, "qtree": Method.TREE, "brute": Method.FORCE}
    try:
        return methods[text]
    except KeyError:
        raise ValueError(f"Unknown method: {text}") from None


def _degrees(text: str) -> float:
    return float(text) * DEG2RAD


_VALUE_OPTIONS = {
    "-width": ("width", int),
    "-height": ("height", int),
    "-boids": ("boid_count", int),
    "-method": ("method", parse_method),
    "-sep_range": ("separation_range", float),
    "-ali_range": ("alignment_range", float),
    "-coh_range": ("cohesion_range", float),
    "-sep_str": ("separation_strength", float),
    "-ali_str": ("alignment_strength", float),
    "-coh_str": ("cohesion_strength", float),
    "-max_vel": ("max_velocity", float),
    "-max_force": ("max_force", float),
    "-fov": ("fov_angle_radians", _degrees),
    "-cell_size": ("cell_size", int),
    "-max_tree": ("max_boids_in_tree", int),
    "-max_neighbors": ("max_neighbors", int),
    "-k_mean_clusters": ("k_mean_clusters", int),
    "-k_mean_max_iter": ("k_mean_max_iter", int),
}

_FLAG_OPTIONS = {"-debug": "debug_mode", "-k_mean": "k_mean"}


def parse_args(argv: list[str] | None = None) -> SimulationConfig:
    """Build a config from arguments (without the program name).

    Unknown arguments, and options missing their value, are reported on
    stderr and skipped. Malformed values raise ``ValueError``.
    """
    args = deque(sys.argv[1:] if argv is None else argv)
    config = SimulationConfig()
    while args:
        arg = args.popleft()
        if arg in _VALUE_OPTIONS and args:
            name, convert = _VALUE_OPTIONS[arg]
            setattr(config, name, convert(args.popleft()))
        elif arg in _FLAG_OPTIONS:
            setattr(config, _FLAG_OPTIONS[arg], True)
        else:
            print(f"Unknown argument: {arg}", file=sys.stderr)
    return config
"""The boid and the steering rules that move it."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from .geometry import Vec2

_MIN_SEPARATION_DIST_SQR = 0.01


@dataclass(eq=False)
class Boid:
    """One flock member; compared and hashed by identity."""

    position: Vec2 = field(default_factory=Vec2)
    velocity_norm: Vec2 = field(default_factory=Vec2)
    speed: float = 0.0
    acceleration: Vec2 = field(default_factory=Vec2)
    hash_table_id: int = 0
    cluster_id: int = 0


def apply_boid_behaviors(
    boid: Boid,
    neighbors: Iterable[tuple[Boid, float]],
    sep_range_sqr: float,
    sep_strength: float,
    ali_range_sqr: float,
    ali_strength: float,
    coh_range_sqr: float,
    coh_strength: float,
) -> None:
    """Add separation, alignment and cohesion to the boid's acceleration.

    ``neighbors`` holds pairs of a neighbouring boid and its squared distance.
    """
    sep_force = Vec2()
    ali_force = Vec2()
    coh_center = Vec2()
    sep_count = ali_count = coh_count = 0

    for other, dist_sqr in neighbors:
        if _MIN_SEPARATION_DIST_SQR < dist_sqr < sep_range_sqr:
            # Closer boids push harder.
            inv_dist = 1.0 / math.sqrt(dist_sqr)
            away = (boid.position - other.position).normalized() * inv_dist
            sep_force = sep_force + away
            sep_count += 1

        if dist_sqr < ali_range_sqr:
            ali_force = ali_force + other.velocity_norm * other.speed
            ali_count += 1

        if dist_sqr < coh_range_sqr:
            coh_center = coh_center + other.position
            coh_count += 1

    if sep_count:
        boid.acceleration = boid.acceleration + sep_force.normalized() * sep_strength

    if ali_count:
        average = ali_force * (1.0 / ali_count)
        boid.acceleration = boid.acceleration + average.normalized() * ali_strength

    if coh_count:
        center = coh_center * (1.0 / coh_count)
        to_center = (center - boid.position).normalized() * coh_strength
        boid.acceleration = boid.acceleration + to_center


def fill_boids(
    boids_number: int,
    screen_width: int,
    screen_height: int,
    rng: random.Random | None = None,
) -> list[Boid]:
    """Create boids at random positions with random headings and speeds."""
    rng = rng or random.Random()
    return [
        Boid(
            position=Vec2(
                rng.uniform(0.0, float(screen_width)),
                rng.uniform(0.0, float(screen_height)),
            ),
            velocity_norm=Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)),
            speed=rng.uniform(1.0, 5.0),
        )
        for _ in range(boids_number)
    ]
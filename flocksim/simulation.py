"""The flocking simulation loop, independent of any display."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Iterator
from contextlib import contextmanager

from .boid import Boid, apply_boid_behaviors, fill_boids
from .config import SimulationConfig
from .geometry import Rect, Vec2
from .hash_table import HashTable
from .k_means import k_means
from .logger import PerformanceLogger
from .methods import Method
from .quad_tree import QuadTree

K_MEANS_INTERVAL = 60 * 3
MOUSE_RANGE_SQR = 40000.0
MIN_SPEED = 0.001


class Simulation:
    """A flock of boids moving in a wrapping rectangle.

    Neighbours are found through a uniform grid, a quad tree or by scanning
    every boid, as the config's ``method`` says. Timings go to ``logger``
    when one is given.
    """

    def __init__(
        self,
        config: SimulationConfig,
        rng: random.Random | None = None,
        logger: PerformanceLogger | None = None,
    ) -> None:
        self.config = config
        self.rng = rng or random.Random()
        self.logger = logger
        self.bounds = Rect(0.0, 0.0, float(config.width), float(config.height))

        scan_range = (
            max(int(config.alignment_range) // config.cell_size, 1)
            if config.cell_size > 0
            else 1
        )
        self.hash_table = HashTable(
            config.width, config.height, config.cell_size, scan_range
        )
        self.quad_tree = QuadTree(self.bounds)
        self.boids: list[Boid] = fill_boids(
            config.boid_count, config.width, config.height, self.rng
        )
        self.first_boid_neighbors: list[Boid] = []
        self.frame_count = 0

        if config.method is Method.HASH:
            with self._timed("build"):
                self.hash_table.build(self.boids)
        elif config.method is Method.TREE:
            with self._timed("build"):
                self.quad_tree.build(self.boids)

    @contextmanager
    def _timed(self, kind: str) -> Iterator[None]:
        start = time.perf_counter()
        yield
        if self.logger is not None:
            elapsed_us = (time.perf_counter() - start) * 1e6
            getattr(self.logger, f"record_{kind}_time")(elapsed_us)

    def _candidates(self, boid: Boid) -> list[Boid]:
        method = self.config.method
        if method is Method.HASH:
            return self.hash_table.get_boids_in_range(boid.hash_table_id)
        if method is Method.TREE:
            return self.quad_tree.query(boid.position, self.config.cohesion_range)
        if method is Method.FORCE:
            return list(self.boids)
        raise ValueError(f"unsupported method: {method!r}")

    def find_neighbors(self, boid: Boid) -> list[tuple[Boid, float]]:
        """Visible boids within cohesion range, with their squared distances.

        At most ``max_neighbors`` are returned; when more candidates exist
        they are shuffled first so the sample is random.
        """
        config = self.config
        with self._timed("retrieval"):
            candidates = self._candidates(boid)

        if len(candidates) > config.max_neighbors:
            self.rng.shuffle(candidates)

        range_sqr = config.cohesion_range_squared
        cos_half_fov = config.cos_half_fov
        neighbors: list[tuple[Boid, float]] = []
        with self._timed("check"):
            for other in candidates:
                if other is boid:
                    continue
                dist_sqr = boid.position.distance_sqr(other.position)
                if dist_sqr > range_sqr:
                    continue
                direction = (other.position - boid.position).normalized()
                if boid.velocity_norm.dot(direction) < cos_half_fov:
                    continue
                neighbors.append((other, dist_sqr))
                if len(neighbors) >= config.max_neighbors:
                    break
        return neighbors

    def apply_mouse(self, position: Vec2, attract: bool = True) -> None:
        """Pull boids near ``position`` towards it, or push them away."""
        for boid in self.boids:
            if boid.position.distance_sqr(position) < MOUSE_RANGE_SQR:
                to_mouse = position - boid.position
                if attract:
                    boid.acceleration = boid.acceleration + to_mouse
                else:
                    boid.acceleration = boid.acceleration - to_mouse

    def integrate(self) -> None:
        """Apply accelerations, limit force and speed, move and wrap."""
        config = self.config
        width = float(config.width)
        height = float(config.height)
        for boid in self.boids:
            acceleration = boid.acceleration
            acc_len = acceleration.length()
            if acc_len > config.max_force:
                acceleration = acceleration * (config.max_force / acc_len)

            velocity = boid.velocity_norm * boid.speed + acceleration
            speed = velocity.length()
            if speed > config.max_velocity:
                speed = config.max_velocity
                velocity = velocity.normalized() * speed

            boid.speed = speed
            boid.velocity_norm = (
                velocity * (1.0 / speed) if speed > MIN_SPEED else Vec2()
            )
            moved = boid.position + boid.velocity_norm * speed
            boid.position = Vec2(
                math.fmod(moved.x + width, width),
                math.fmod(moved.y + height, height),
            )
            boid.acceleration = Vec2()

    def rebuild_index(self) -> None:
        """Clear the spatial indexes and refill the one in use."""
        self.hash_table.reset()
        self.quad_tree = QuadTree(self.bounds)
        if self.config.method is Method.TREE:
            with self._timed("build"):
                self.quad_tree.build(self.boids)
        elif self.config.method is Method.HASH:
            with self._timed("build"):
                self.hash_table.build(self.boids)

    def run_k_means(self) -> list[Vec2]:
        """Cluster the flock using the spatial index of the current method."""
        indexes = {
            Method.FORCE: None,
            Method.HASH: self.hash_table,
            Method.TREE: self.quad_tree,
        }
        return k_means(
            self.boids,
            self.config.k_mean_clusters,
            self.config.k_mean_max_iter,
            indexes[self.config.method],
            self.rng,
        )

    def step(self, mouse_position: Vec2 | None = None, attract: bool = True) -> None:
        """Advance the flock by one frame."""
        config = self.config
        self.first_boid_neighbors = []
        first = self.boids[0] if self.boids else None
        for boid in self.boids:
            neighbors = self.find_neighbors(boid)
            if config.debug_mode and boid is first:
                self.first_boid_neighbors = [other for other, _ in neighbors]
            apply_boid_behaviors(
                boid,
                neighbors,
                config.separation_range_squared,
                config.separation_strength,
                config.alignment_range_squared,
                config.alignment_strength,
                config.cohesion_range_squared,
                config.cohesion_strength,
            )

        if mouse_position is not None:
            self.apply_mouse(mouse_position, attract)

        self.integrate()
        self.rebuild_index()

        if config.k_mean and self.frame_count == K_MEANS_INTERVAL:
            self.run_k_means()
            self.frame_count = 0
        self.frame_count += 1
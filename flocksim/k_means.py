"""K-means clustering of boid positions and cluster colours."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence

from .boid import Boid
from .geometry import Vec2
from .hash_table import HashTable
from .quad_tree import QuadTree

Color = tuple[int, int, int, int]

TREE_SEARCH_RADIUS = 50.0


def generate_random_colors(k: int, rng: random.Random | None = None) -> list[Color]:
    """Return ``k`` light opaque RGBA colours."""
    rng = rng or random.Random()
    return [
        (
            rng.randrange(128) + 127,
            rng.randrange(128) + 127,
            rng.randrange(128) + 127,
            255,
        )
        for _ in range(k)
    ]


def _mean(positions: Iterable[Vec2]) -> Vec2 | None:
    total = Vec2()
    count = 0
    for position in positions:
        total = total + position
        count += 1
    if not count:
        return None
    return total * (1.0 / count)


def _assign(boids: Iterable[Boid], centroids: Sequence[Vec2]) -> bool:
    """Move every boid to its nearest centroid; report whether any moved."""
    changed = False
    for boid in boids:
        best = min(
            range(len(centroids)),
            key=lambda i: boid.position.distance_sqr(centroids[i]),
        )
        if boid.cluster_id != best:
            boid.cluster_id = best
            changed = True
    return changed


def _update_from_all(boids: Sequence[Boid], centroids: list[Vec2]) -> list[Vec2]:
    members: list[list[Vec2]] = [[] for _ in centroids]
    for boid in boids:
        members[boid.cluster_id].append(boid.position)
    updated = []
    for centroid, positions in zip(centroids, members):
        mean = _mean(positions)
        updated.append(centroid if mean is None else mean)
    return updated


def _local_updater(
    nearby: Callable[[Vec2], Iterable[Boid]],
) -> Callable[[Sequence[Boid], list[Vec2]], list[Vec2]]:
    """Build an update step that averages only boids found near each centroid."""

    def update(_boids: Sequence[Boid], centroids: list[Vec2]) -> list[Vec2]:
        updated = []
        for cluster_id, centroid in enumerate(centroids):
            mean = _mean(
                boid.position
                for boid in nearby(centroid)
                if boid is not None and boid.cluster_id == cluster_id
            )
            updated.append(centroid if mean is None else mean)
        return updated

    return update


def k_means(
    boids: Sequence[Boid],
    k: int,
    max_iterations: int,
    index: HashTable | QuadTree | None = None,
    rng: random.Random | None = None,
) -> list[Vec2]:
    """Cluster boids into ``k`` groups, storing the result in ``cluster_id``.

    Without an index every boid contributes to its centroid. With a
    ``HashTable`` only boids in the cells seen from the centroid's cell count;
    with a ``QuadTree`` only boids within 50 units of the centroid count.
    Returns the final centroids.
    """
    if not boids or k <= 0:
        return []

    if index is None:
        update = _update_from_all
    elif isinstance(index, HashTable):
        update = _local_updater(
            lambda center: index.get_boids_in_range(index.get_cell_id(center))
        )
    elif isinstance(index, QuadTree):
        update = _local_updater(lambda center: index.query(center, TREE_SEARCH_RADIUS))
    else:
        raise TypeError(f"unsupported spatial index: {type(index).__name__}")

    rng = rng or random.Random()
    centroids = [boids[rng.randrange(len(boids))].position for _ in range(k)]

    changed = True
    iterations = 0
    while changed and iterations < max_iterations:
        iterations += 1
        changed = _assign(boids, centroids)
        centroids = update(boids, centroids)
    return centroids
"""Region quad tree over boid positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .boid import Boid
from .geometry import Rect, Vec2

DEFAULT_CAPACITY = 10


class QuadTree:
    """A quad tree whose leaves hold up to ``capacity`` boids.

    A full leaf splits into four quadrants. Children are visited in the
    order north-east, north-west, south-east, south-west.
    """

    def __init__(self, boundary: Rect, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.boundary = boundary
        self.capacity = capacity
        self.divided = False
        self._elements: list[Boid] = []
        self._children: tuple[QuadTree, ...] = ()

    def build(self, boids: Iterable[Boid]) -> None:
        for boid in boids:
            self.insert(boid)

    def reset(self) -> None:
        """Drop every child node.

        Boids held directly by this node while it is a leaf are kept.
        """
        self._children = ()
        self.divided = False

    def insert(self, boid: Boid) -> None:
        """Add a boid; once divided, boids outside every quadrant are dropped."""
        if not self.divided:
            if len(self._elements) < self.capacity:
                self._elements.append(boid)
                return
            self.subdivide()
        self._insert_into_child(boid)

    def _insert_into_child(self, boid: Boid) -> None:
        for child in self._children:
            if child.boundary.contains_point(boid.position):
                child.insert(boid)
                return

    def subdivide(self) -> None:
        """Split into four quadrants and hand the held boids down."""
        self.divided = True
        b = self.boundary
        half_w = b.width / 2.0
        half_h = b.height / 2.0
        northwest = QuadTree(Rect(b.x, b.y, half_w, half_h), self.capacity)
        northeast = QuadTree(Rect(b.x + half_w, b.y, half_w, half_h), self.capacity)
        southwest = QuadTree(Rect(b.x, b.y + half_h, half_w, half_h), self.capacity)
        southeast = QuadTree(
            Rect(b.x + half_w, b.y + half_h, half_w, half_h), self.capacity
        )
        self._children = (northeast, northwest, southeast, southwest)

        held, self._elements = self._elements, []
        for boid in held:
            self._insert_into_child(boid)

    def query(self, center: Vec2, radius: float) -> list[Boid]:
        """Boids within ``radius`` of ``center`` (inclusive)."""
        if self.divided:
            return [
                boid
                for child in self._children
                if child.boundary.intersects_circle(center, radius)
                for boid in child.query(center, radius)
            ]
        radius_sqr = radius * radius
        return [
            boid
            for boid in self._elements
            if boid.position.distance_sqr(center) <= radius_sqr
        ]

    def outlines(self, line_thickness: float) -> Iterator[tuple[Rect, float]]:
        """Every node's boundary with a line thickness shrinking by depth."""
        yield self.boundary, line_thickness
        thinner = max(line_thickness - 1, 1.0)
        for child in self._children:
            yield from child.outlines(thinner)

    def touched_leaves(
        self, center: Vec2, radius: float, line_thickness: float
    ) -> Iterator[tuple[Rect, float]]:
        """Boundaries of the leaves a query circle reaches, with thickness."""
        if not self.divided:
            yield self.boundary, line_thickness
            return
        thinner = max(line_thickness - 1, 1.0)
        for child in self._children:
            if child.boundary.intersects_circle(center, radius):
                yield from child.touched_leaves(center, radius, thinner)
"""Uniform grid that buckets boids by the cell they stand in."""

from __future__ import annotations

from collections.abc import Iterable

from .boid import Boid
from .geometry import Vec2


class HashTable:
    """A grid of cells over the simulation space.

    Each boid is stored in the cell holding its position; a range lookup
    returns the boids in the cells within ``scan_range`` of a cell.
    """

    def __init__(
        self, space_width: int, space_height: int, cell_size: int, scan_range: int
    ) -> None:
        if space_width <= 0 or space_height <= 0 or cell_size <= 0:
            raise ValueError("Width, height and cell size must be positive integers.")
        self.cell_size = cell_size
        self.scan_range = scan_range
        self.max_height_cells = space_height // cell_size
        self.max_width_cells = space_width // cell_size
        self.number_of_buckets = max(self.max_height_cells * self.max_width_cells, 1)
        self._cells: list[list[Boid]] = [[] for _ in range(self.number_of_buckets)]

    def build(self, boids: Iterable[Boid]) -> None:
        """Store every boid and record its cell on it."""
        for boid in boids:
            boid.hash_table_id = self.put(boid.position, boid)

    def put(self, position: Vec2, boid: Boid) -> int:
        """Store a boid under the cell of ``position`` and return the cell id."""
        cell_id = self.get_cell_id(position)
        self._cells[cell_id].append(boid)
        return cell_id

    def reset(self) -> None:
        """Empty every cell."""
        for cell in self._cells:
            cell.clear()

    def _window(self, cell_index: int) -> tuple[range, range]:
        cx = cell_index % self.max_width_cells
        cy = cell_index // self.max_width_cells
        rows = range(
            max(cy - self.scan_range, 0),
            min(cy + self.scan_range, self.max_height_cells - 1) + 1,
        )
        cols = range(
            max(cx - self.scan_range, 0),
            min(cx + self.scan_range, self.max_width_cells - 1) + 1,
        )
        return rows, cols

    def get_indexes_of_seen_cells(self, cell_index: int) -> list[int]:
        """Cell ids within ``scan_range`` of a cell, row by row."""
        rows, cols = self._window(cell_index)
        return [y * self.max_width_cells + x for y in rows for x in cols]

    def get_boids_in_range(self, cell_index: int) -> list[Boid]:
        """All boids stored in the cells seen from ``cell_index``."""
        return [
            boid
            for index in self.get_indexes_of_seen_cells(cell_index)
            for boid in self._cells[index]
        ]

    def get_boids_at_index(self, cell_index: int) -> list[Boid]:
        """The live list of boids held by one cell."""
        return self._cells[cell_index]

    def get_cell_id(self, position: Vec2) -> int:
        return (int(position.x) // self.cell_size) + (
            int(position.y) // self.cell_size
        ) * self.max_width_cells
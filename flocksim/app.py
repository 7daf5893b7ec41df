"""Window, drawing and main loop of the flocking simulation."""

from __future__ import annotations

import random
from collections.abc import Sequence

import pygame

from .config import parse_args
from .geometry import Rect, Vec2
from .k_means import generate_random_colors
from .logger import PerformanceLogger
from .methods import Method, method_to_string
from .simulation import Simulation

BOID_RADIUS = 2
TARGET_FPS = 60

BLACK = (0, 0, 0, 255)
LIGHTGRAY = (200, 200, 200, 255)
YELLOW = (253, 249, 0, 255)
RED = (230, 41, 55, 255)
BLUE = (0, 121, 241, 255)
GREEN = (0, 228, 48, 255)
LIME = (0, 158, 47, 255)
NEIGHBOR_COLOR = (138, 204, 106, 255)
TRANSPARENT_GRAY = (*LIGHTGRAY[:3], 80)
TRANSPARENT_YELLOW = (*YELLOW[:3], 80)


def _fade(surface: pygame.Surface, opacity: float) -> None:
    alpha = max(0, min(255, int(opacity * 255)))
    if alpha >= 255:
        surface.fill(BLACK)
        return
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def _outline(surface: pygame.Surface, rect: Rect, thickness: float, color) -> None:
    pygame.draw.rect(
        surface,
        color,
        pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height)),
        width=max(int(thickness), 1),
    )


def _draw_grid(surface: pygame.Surface, simulation: Simulation) -> None:
    config = simulation.config
    table = simulation.hash_table
    size = config.cell_size
    for i in range(table.max_width_cells):
        pygame.draw.line(surface, TRANSPARENT_GRAY, (size * i, 0), (size * i, config.height))
    for i in range(table.max_height_cells):
        pygame.draw.line(surface, TRANSPARENT_GRAY, (0, size * i), (config.width, size * i))
    for index in table.get_indexes_of_seen_cells(simulation.boids[0].hash_table_id):
        y, x = divmod(index, table.max_width_cells)
        pygame.draw.rect(
            surface, TRANSPARENT_YELLOW, pygame.Rect(x * size, y * size, size, size), width=1
        )


def _draw_tree(surface: pygame.Surface, simulation: Simulation) -> None:
    tree = simulation.quad_tree
    for rect, thickness in tree.outlines(3):
        _outline(surface, rect, thickness, TRANSPARENT_GRAY)
    first = simulation.boids[0].position
    for rect, thickness in tree.touched_leaves(first, simulation.config.cohesion_range, 3):
        _outline(surface, rect, thickness, TRANSPARENT_YELLOW)


def _point(position: Vec2) -> tuple[float, float]:
    return position.x, position.y


def render(surface: pygame.Surface, simulation: Simulation, colors: Sequence) -> None:
    """Draw one frame of the flock, with debug overlays when enabled."""
    config = simulation.config
    debug = config.debug_mode and bool(simulation.boids)
    _fade(surface, 1.0 if config.debug_mode else 0.12)

    if debug and config.method is Method.HASH:
        _draw_grid(surface, simulation)
    if debug and config.method is Method.TREE:
        _draw_tree(surface, simulation)

    for boid in simulation.boids:
        pygame.draw.circle(surface, colors[boid.cluster_id], _point(boid.position), BOID_RADIUS)

    if debug:
        for neighbor in simulation.first_boid_neighbors:
            pygame.draw.circle(surface, NEIGHBOR_COLOR, _point(neighbor.position), BOID_RADIUS)
        first = simulation.boids[0]
        pygame.draw.circle(surface, RED, _point(first.position), BOID_RADIUS)
        end = first.position + first.velocity_norm * (first.speed * 10.0)
        pygame.draw.line(surface, BLUE, _point(first.position), _point(end))
        pygame.draw.circle(surface, GREEN, _point(first.position), config.alignment_range, width=1)
        pygame.draw.circle(surface, GREEN, _point(first.position), config.separation_range, width=1)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the simulation until it is closed."""
    config = parse_args(argv)
    rng = random.Random()
    filename = f"../{method_to_string(config.method)}_{config.boid_count}.csv"

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption("Boids")
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 24)

        with PerformanceLogger(config.boid_count, config.method, filename) as logger:
            simulation = Simulation(config, rng, logger)
            colors = generate_random_colors(config.k_mean_clusters, rng)
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT or (
                        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                    ):
                        running = False
                if not running:
                    break

                buttons = pygame.mouse.get_pressed()
                left, right = buttons[0], buttons[2]
                mouse = Vec2(*map(float, pygame.mouse.get_pos())) if left or right else None
                simulation.step(mouse, attract=bool(left))

                render(screen, simulation, colors)
                fps_text = font.render(f"{round(clock.get_fps())} FPS", True, LIME)
                screen.blit(fps_text, (10, 10))
                logger.tick()
                pygame.display.flip()
                clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0
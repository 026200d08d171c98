"""Grid and path rendering."""
from __future__ import annotations

import pygame

from tick_haven import GRID_SIZE, HazardGrid, Outcome

from ui.constants import COLOR_GRID_LINE, GRID_PX, PATH_COLORS, TAG_COLORS, TILE_SIZE


def _center(coord: tuple[int, int], offset: int = 0) -> tuple[int, int]:
    x, y = coord
    half = TILE_SIZE // 2
    return x * TILE_SIZE + half + offset, y * TILE_SIZE + half + offset


def draw_grid(surface: pygame.Surface, grid: HazardGrid) -> None:
    """Draw each cell colored by its tag."""
    for x in range(GRID_SIZE):
        for y in range(GRID_SIZE):
            color = TAG_COLORS[grid.at((x, y))]
            rect = pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
            pygame.draw.rect(surface, color, rect)

    # Grid lines
    for i in range(GRID_SIZE + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (i * TILE_SIZE, 0), (i * TILE_SIZE, GRID_PX))
        pygame.draw.line(surface, COLOR_GRID_LINE, (0, i * TILE_SIZE), (GRID_PX, i * TILE_SIZE))


def draw_path(surface: pygame.Surface, outcome: Outcome, offset: int = 0) -> None:
    """Draw a winning path as a polyline with a dot on every cell."""
    if not outcome.won:
        return
    color = PATH_COLORS[outcome.algorithm]
    points = [_center(c, offset) for c in outcome.path]
    if len(points) > 1:
        pygame.draw.lines(surface, color, False, points, 3)
    for point in points:
        pygame.draw.circle(surface, color, point, 5)

"""Layout, color, and rendering constants."""
from __future__ import annotations

from tick_haven import GRID_SIZE, Algorithm, Tag

TILE_SIZE = 64
GRID_PX = GRID_SIZE * TILE_SIZE
STATUS_H = 56
SCREEN_W = GRID_PX
SCREEN_H = GRID_PX + STATUS_H
FPS = 30

COLOR_BG = (20, 20, 30)
COLOR_GRID_LINE = (30, 30, 30)
COLOR_TEXT = (200, 200, 200)

TAG_COLORS: dict[Tag, tuple[int, int, int]] = {
    Tag.EMPTY: (40, 80, 160),
    Tag.PURSUER: (240, 240, 240),
    Tag.PURSUER_HAZARD: (120, 40, 140),
    Tag.MONSTER: (200, 60, 60),
    Tag.ROCK: (110, 110, 110),
    Tag.GOAL: (230, 190, 60),
    Tag.HAVEN: (70, 170, 90),
    Tag.DANGER: (100, 50, 60),
}

PATH_COLORS: dict[Algorithm, tuple[int, int, int]] = {
    Algorithm.INFORMED: (255, 255, 0),
    Algorithm.GREEDY: (0, 220, 255),
}

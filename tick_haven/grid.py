"""HazardGrid - fixed 9x9 board with hazard tags and perception zones."""
from __future__ import annotations

import logging
from typing import Any

from tick_haven.types import Coord, Tag

logger = logging.getLogger(__name__)

GRID_SIZE = 9

# (dx, dy) in the order cells are examined by both searches.
_MOORE_DIRS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]
_VON_NEUMANN_DIRS = [(-1, 0), (0, -1), (0, 1), (1, 0)]

_PLACEABLE = (Tag.PURSUER, Tag.PURSUER_HAZARD, Tag.MONSTER, Tag.GOAL)

# Tags the board holds at most once; placing one again moves it.
_SINGLE = (Tag.PURSUER, Tag.GOAL, Tag.ROCK, Tag.HAVEN)


class HazardGrid:
    """Sparse tag storage over a 9x9 board.

    Only non-empty cells are stored. Every placement is recorded so that
    ``reset()`` can rebuild the pristine board after a search has defeated
    the monster.
    """

    def __init__(self) -> None:
        self._cells: dict[Coord, Tag] = {}
        self._hazards: dict[Coord, Tag] = {}
        self._placements: list[tuple[Tag, Coord]] = []
        self._start: Coord | None = None
        self._goal: Coord | None = None
        self._rock: Coord | None = None
        self._haven: Coord | None = None

    # --- Properties ---

    @property
    def size(self) -> int:
        return GRID_SIZE

    @property
    def start(self) -> Coord | None:
        """Where the pursuer starts, once placed."""
        return self._start

    @property
    def goal(self) -> Coord | None:
        return self._goal

    @property
    def rock(self) -> Coord | None:
        return self._rock

    @property
    def haven(self) -> Coord | None:
        return self._haven

    # --- Geometry ---

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE

    def _check_bounds(self, coord: Coord) -> None:
        x, y = coord
        if not self.is_valid_coordinate(x, y):
            raise ValueError(
                f"{coord} out of bounds for {GRID_SIZE}x{GRID_SIZE} grid"
            )

    def _neighbors(self, coord: Coord, dirs: list[tuple[int, int]]) -> list[Coord]:
        x, y = coord
        result: list[Coord] = []
        for dx, dy in dirs:
            nx, ny = x + dx, y + dy
            if self.is_valid_coordinate(nx, ny):
                result.append((nx, ny))
        return result

    def neighbors8(self, coord: Coord) -> list[Coord]:
        """Horizontally, vertically and diagonally adjacent cells."""
        return self._neighbors(coord, _MOORE_DIRS)

    def neighbors4(self, coord: Coord) -> list[Coord]:
        """Orthogonally adjacent cells."""
        return self._neighbors(coord, _VON_NEUMANN_DIRS)

    def perception_zone(self, tag: Tag, coord: Coord) -> list[Coord]:
        """Cells a hazard placed at ``coord`` would turn into danger zones."""
        if tag is Tag.MONSTER:
            return self.neighbors8(coord)
        if tag is Tag.PURSUER_HAZARD:
            return self.neighbors4(coord)
        return []

    # --- Queries ---

    def at(self, coord: Coord) -> Tag:
        return self._cells.get(coord, Tag.EMPTY)

    def of_tag(self, tag: Tag) -> list[Coord]:
        """Return all coordinates currently carrying ``tag``."""
        if tag is Tag.EMPTY:
            return [
                (x, y)
                for x in range(GRID_SIZE)
                for y in range(GRID_SIZE)
                if (x, y) not in self._cells
            ]
        return [c for c, t in self._cells.items() if t is tag]

    def in_danger(self, coord: Coord) -> bool:
        """Whether ``coord`` lies inside a live hazard's perception zone.

        Works from the recorded hazards rather than the tags, so a cell whose
        agent tag was kept over a projected zone still reports danger.
        """
        for hazard_coord, tag in self._hazards.items():
            if coord in self.perception_zone(tag, hazard_coord):
                return True
        return False

    # --- Mutation ---

    def _set(self, coord: Coord, tag: Tag) -> None:
        if tag is Tag.EMPTY:
            self._cells.pop(coord, None)
        else:
            self._cells[coord] = tag

    def place_agent(self, tag: Tag, coord: Coord) -> None:
        """Put an agent on the board, projecting its danger zone.

        The monster covers its 8-neighborhood and the pursuer-hazard its
        4-neighborhood. Cells already holding an agent keep their tag.
        """
        if tag not in _PLACEABLE:
            raise ValueError(f"place_agent does not accept {tag.name}")
        self._place(tag, coord)

    def place_rock(self, coord: Coord) -> None:
        """Tag the rock only if the cell is empty; always remember where it is."""
        self._place(Tag.ROCK, coord)

    def place_haven(self, coord: Coord) -> None:
        """Tag the haven only if the cell is empty; always remember where it is."""
        self._place(Tag.HAVEN, coord)

    def _place(self, tag: Tag, coord: Coord) -> None:
        """Record a placement and apply it.

        Repeating a placement records nothing new. Placing the pursuer, goal,
        rock or haven a second time drops the earlier entry and rebuilds the
        board, so the old cell is cleared. Hazards accumulate.
        """
        self._check_bounds(coord)
        if (tag, coord) in self._placements:
            self._apply(tag, coord)
            return
        moved = False
        if tag in _SINGLE:
            kept = [p for p in self._placements if p[0] is not tag]
            moved = len(kept) != len(self._placements)
            self._placements = kept
        self._placements.append((tag, coord))
        if moved:
            self.reset()
        else:
            self._apply(tag, coord)

    def _apply(self, tag: Tag, coord: Coord) -> None:
        if tag is Tag.ROCK or tag is Tag.HAVEN:
            if self.at(coord) is Tag.EMPTY:
                self._set(coord, tag)
            if tag is Tag.ROCK:
                self._rock = coord
            else:
                self._haven = coord
            return

        self._set(coord, tag)
        if tag is Tag.PURSUER:
            self._start = coord
        elif tag is Tag.GOAL:
            self._goal = coord
        else:
            self._hazards[coord] = tag
            for cell in self.perception_zone(tag, coord):
                if not self.at(cell).is_agent:
                    self._set(cell, Tag.DANGER)

    def defeat_monster(self, coord: Coord) -> None:
        """Clear the monster at ``coord`` and its 8-neighborhood.

        The rock's cell is left untouched. The change persists until
        ``reset()``.
        """
        logger.debug("monster at %s defeated", coord)
        self._hazards.pop(coord, None)
        for cell in [coord, *self.neighbors8(coord)]:
            if cell != self._rock:
                self._set(cell, Tag.EMPTY)

    def reset(self) -> None:
        """Rebuild the board from scratch by replaying every placement."""
        self._cells.clear()
        self._hazards.clear()
        self._start = self._goal = self._rock = self._haven = None
        for tag, coord in self._placements:
            self._apply(tag, coord)

    # --- Snapshot ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize the current tags.

        Returns a dict with 'cells' (coord_str -> tag value) plus the
        'rock' and 'haven' references. Empty cells are omitted.
        """
        cells: dict[str, str] = {}
        for coord, tag in sorted(self._cells.items()):
            key = ",".join(str(c) for c in coord)
            cells[key] = tag.value
        return {"cells": cells, "rock": self._rock, "haven": self._haven}

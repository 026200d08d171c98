"""Best-first search over a HazardGrid."""
from __future__ import annotations

import heapq
import logging

from tick_haven.config import SearchConfig
from tick_haven.grid import HazardGrid
from tick_haven.types import Coord, PathReconstructionError, Tag, manhattan

logger = logging.getLogger(__name__)


class BestFirstSearch:
    """Informed search ranking cells by g + Manhattan distance to the goal.

    Search state (g, h, f and predecessors) lives in dicts owned by a single
    ``search`` call, so the grid only ever carries tags.
    """

    def __init__(self, grid: HazardGrid, config: SearchConfig | None = None) -> None:
        self._grid = grid
        self._config = config or SearchConfig()

    @property
    def grid(self) -> HazardGrid:
        return self._grid

    def search(self, start: Coord, goal: Coord) -> list[Coord] | None:
        """Find a route from ``start`` to ``goal``.

        Returns the cells after ``start`` up to and including ``goal``, or
        None if the goal is unreachable. Starting from the haven defeats the
        monster as soon as it is discovered.
        """
        if start == goal:
            return []

        grid = self._grid
        from_haven = start == grid.haven

        g_score: dict[Coord, int] = {start: 0}
        f_score: dict[Coord, int] = {start: manhattan(start, goal)}
        came_from: dict[Coord, Coord] = {}

        open_set: list[tuple[int, int, Coord]] = [(f_score[start], 0, start)]
        in_open: set[Coord] = {start}
        closed: set[Coord] = set()
        counter = 1

        while open_set:
            _, _, current = heapq.heappop(open_set)
            if current in closed:
                continue
            in_open.discard(current)

            for neighbor in grid.neighbors8(current):
                if neighbor == goal:
                    came_from[neighbor] = current
                    return self._reconstruct(came_from, start, goal)

                if (
                    from_haven
                    and grid.at(neighbor) is Tag.MONSTER
                    and neighbor != grid.rock
                ):
                    grid.defeat_monster(neighbor)

                if grid.at(neighbor).blocks_search or neighbor in closed:
                    continue

                if neighbor not in in_open:
                    g_score[neighbor] = g_score[current] + 1
                    f_score[neighbor] = g_score[neighbor] + manhattan(neighbor, goal)
                    came_from[neighbor] = current
                    in_open.add(neighbor)
                    heapq.heappush(open_set, (f_score[neighbor], counter, neighbor))
                    counter += 1
                elif f_score[current] + 1 < f_score[neighbor]:
                    g_score[neighbor] = g_score[current] + 1
                    f_score[neighbor] = g_score[neighbor] + manhattan(neighbor, goal)
                    came_from[neighbor] = current
                    heapq.heappush(open_set, (f_score[neighbor], counter, neighbor))
                    counter += 1

            closed.add(current)

        logger.debug("no route from %s to %s", start, goal)
        return None

    @staticmethod
    def _reconstruct(
        came_from: dict[Coord, Coord], start: Coord, goal: Coord,
    ) -> list[Coord]:
        path: list[Coord] = []
        current = goal
        while current != start:
            path.append(current)
            if current not in came_from:
                raise PathReconstructionError(
                    current, f"{current} has no predecessor on the way back to {start}"
                )
            current = came_from[current]
        path.reverse()
        return path

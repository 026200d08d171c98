"""Greedy backtracking search with fork exploration and a haven fallback."""
from __future__ import annotations

import logging

from tick_haven.config import SearchConfig
from tick_haven.grid import HazardGrid
from tick_haven.types import Coord, Fork, Tag, manhattan

logger = logging.getLogger(__name__)


class GreedySearch:
    """Walks toward the target, always stepping to the closest free neighbor.

    Neighbors are ranked by Manhattan distance to the target. Ties with the
    running best are kept as forks and replayed once the main walk reaches
    the goal; the shortest walk wins. When the main walk dead-ends, a
    two-leg walk through the haven is attempted instead.
    """

    def __init__(self, grid: HazardGrid, config: SearchConfig | None = None) -> None:
        self._grid = grid
        self._config = config or SearchConfig()

    @property
    def grid(self) -> HazardGrid:
        return self._grid

    def search(self, start: Coord, goal: Coord) -> list[Coord]:
        """Return a walk from ``start``. It succeeded iff it ends at ``goal``."""
        forks: list[Fork] = []
        path, dead_end = self._walk([start], goal, forks=forks)

        if dead_end:
            logger.debug("greedy walk from %s dead-ended, trying the haven", start)
            return self._via_haven(start, goal)

        if path[-1] == goal and forks:
            path = self._explore_forks(path, forks, goal)
        return path

    # --- Walks ---

    def _step(
        self,
        current: Coord,
        target: Coord,
        visited: set[Coord],
        forks: list[Fork] | None,
        prefix: list[Coord],
        defeat: bool = False,
    ) -> Coord | None:
        grid = self._grid
        best: Coord | None = None
        for neighbor in grid.neighbors8(current):
            if defeat and grid.at(neighbor) is Tag.MONSTER:
                grid.defeat_monster(neighbor)
            if neighbor in visited or grid.at(neighbor).blocks_search:
                continue
            if best is None:
                best = neighbor
                continue
            distance = manhattan(neighbor, target)
            best_distance = manhattan(best, target)
            if distance < best_distance:
                best = neighbor
            elif distance == best_distance and forks is not None:
                forks.append(Fork(cell=neighbor, prefix=tuple(prefix)))
        return best

    def _walk(
        self,
        path: list[Coord],
        target: Coord,
        forks: list[Fork] | None = None,
        limit: int | None = None,
        defeat: bool = False,
    ) -> tuple[list[Coord], bool]:
        """Extend ``path`` greedily toward ``target``.

        Returns the path and whether it stopped on a dead end. A walk that
        hits ``limit`` (or the configured cell cap) stops without reaching
        the target and is not a dead end.
        """
        cap = self._config.max_path_cells
        if limit is not None:
            cap = min(cap, limit)
        visited = set(path)
        current = path[-1]
        while current != target:
            if len(path) >= cap:
                return path, False
            best = self._step(current, target, visited, forks, path, defeat=defeat)
            if best is None:
                return path, True
            path.append(best)
            visited.add(best)
            current = best
        return path, False

    def _explore_forks(
        self, path: list[Coord], forks: list[Fork], goal: Coord,
    ) -> list[Coord]:
        best = path
        pending = list(forks)
        while pending:
            fork = pending.pop(0)
            resumed = fork.resume()
            if len(resumed) > len(best):
                continue
            candidate, _ = self._walk(resumed, goal, limit=len(best))
            if candidate[-1] == goal and len(candidate) < len(best):
                best = candidate
        logger.debug(
            "explored %d forks, best walk has %d cells (main walk %d)",
            len(forks), len(best), len(path),
        )
        return best

    def _via_haven(self, start: Coord, goal: Coord) -> list[Coord]:
        haven = self._grid.haven
        if haven is None:
            return [start]

        # Leg 1 does not replay its forks.
        first, _ = self._walk([start], haven)
        if first[-1] != haven:
            return first

        second, _ = self._walk([haven], goal, defeat=True)
        return first + second[1:]

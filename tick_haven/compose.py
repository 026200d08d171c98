"""Path composer - runs a search directly or through the haven."""
from __future__ import annotations

import logging
import time
from typing import Iterable

from tick_haven.astar import BestFirstSearch
from tick_haven.backtrack import GreedySearch
from tick_haven.config import SearchConfig
from tick_haven.grid import HazardGrid
from tick_haven.layout import Layout
from tick_haven.types import Algorithm, Coord, Outcome

logger = logging.getLogger(__name__)


def _endpoints(grid: HazardGrid) -> tuple[Coord, Coord]:
    if grid.start is None or grid.goal is None:
        raise ValueError("grid needs both a pursuer and a goal before solving")
    return grid.start, grid.goal


def solve_informed(grid: HazardGrid, config: SearchConfig | None = None) -> Outcome:
    """Solve with the best-first search, falling back to a route via the haven.

    The grid is reset first, so a monster defeated by an earlier run is
    back in place.
    """
    grid.reset()
    start, goal = _endpoints(grid)
    if grid.in_danger(start):
        return Outcome(Algorithm.INFORMED, won=False)

    search = BestFirstSearch(grid, config)
    began = time.perf_counter()
    chain = search.search(start, goal)
    if chain is not None:
        path = [start, *chain]
    else:
        path = None
        haven = grid.haven
        if haven is not None:
            logger.debug("no direct route to %s, trying via haven %s", goal, haven)
            first = search.search(start, haven)
            second = search.search(haven, goal) if first is not None else None
            if first is not None and second is not None:
                path = [start, *first, *second]
    elapsed = time.perf_counter() - began

    if path is None:
        logger.debug("informed search lost in %.6fs", elapsed)
        return Outcome(Algorithm.INFORMED, won=False, elapsed=elapsed)
    return Outcome(Algorithm.INFORMED, won=True, path=tuple(path), elapsed=elapsed)


def solve_greedy(grid: HazardGrid, config: SearchConfig | None = None) -> Outcome:
    """Solve with the greedy backtracking search.

    The haven fallback happens inside the search itself.
    """
    grid.reset()
    start, goal = _endpoints(grid)
    if grid.in_danger(start):
        return Outcome(Algorithm.GREEDY, won=False)

    began = time.perf_counter()
    path = GreedySearch(grid, config).search(start, goal)
    elapsed = time.perf_counter() - began

    if path[-1] != goal:
        logger.debug("greedy search lost in %.6fs", elapsed)
        return Outcome(Algorithm.GREEDY, won=False, elapsed=elapsed)
    return Outcome(Algorithm.GREEDY, won=True, path=tuple(path), elapsed=elapsed)


_SOLVERS = {
    Algorithm.INFORMED: solve_informed,
    Algorithm.GREEDY: solve_greedy,
}


def solve(
    grid: HazardGrid,
    algorithm: Algorithm,
    config: SearchConfig | None = None,
) -> Outcome:
    return _SOLVERS[algorithm](grid, config)


def solve_layout(
    layout: Layout,
    algorithms: Iterable[Algorithm] = (Algorithm.INFORMED, Algorithm.GREEDY),
    config: SearchConfig | None = None,
) -> dict[Algorithm, Outcome]:
    """Validate ``layout`` and run each algorithm on the same grid in order.

    Raises InvalidLayoutError before any search if the layout is invalid.
    """
    layout.validate()
    grid = layout.build_grid()
    results: dict[Algorithm, Outcome] = {}
    for algorithm in algorithms:
        results[algorithm] = solve(grid, algorithm, config)
    return results

"""tick-haven - hazard-aware pathfinding for the treasure-and-haven puzzle."""
from __future__ import annotations

from tick_haven.types import (
    Algorithm,
    Coord,
    Fork,
    InvalidLayoutError,
    Outcome,
    PathReconstructionError,
    Tag,
    manhattan,
)
from tick_haven.config import SearchConfig
from tick_haven.grid import GRID_SIZE, HazardGrid
from tick_haven.layout import Layout
from tick_haven.astar import BestFirstSearch
from tick_haven.backtrack import GreedySearch
from tick_haven.compose import solve, solve_greedy, solve_informed, solve_layout

__all__ = [
    "Algorithm",
    "BestFirstSearch",
    "Coord",
    "Fork",
    "GRID_SIZE",
    "GreedySearch",
    "HazardGrid",
    "InvalidLayoutError",
    "Layout",
    "Outcome",
    "PathReconstructionError",
    "SearchConfig",
    "Tag",
    "manhattan",
    "solve",
    "solve_greedy",
    "solve_informed",
    "solve_layout",
]

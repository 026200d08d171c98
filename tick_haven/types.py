"""Shared types for tick-haven."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Tag(Enum):
    """What occupies a grid cell. A cell carries exactly one tag."""

    EMPTY = "empty"
    PURSUER = "pursuer"
    PURSUER_HAZARD = "pursuer_hazard"
    MONSTER = "monster"
    ROCK = "rock"
    GOAL = "goal"
    HAVEN = "haven"
    DANGER = "danger"

    @property
    def is_agent(self) -> bool:
        return self not in (Tag.EMPTY, Tag.DANGER)

    @property
    def blocks_search(self) -> bool:
        return self in (Tag.DANGER, Tag.ROCK, Tag.MONSTER, Tag.PURSUER_HAZARD)


class Algorithm(Enum):
    INFORMED = "informed"
    GREEDY = "greedy"


@dataclass(frozen=True)
class Fork:
    """An equally-ranked alternative recorded during a greedy walk.

    Attributes:
        cell: The alternative next cell.
        prefix: The walk from its start up to and including the fork's parent.
    """

    cell: Coord
    prefix: tuple[Coord, ...]

    @property
    def parent(self) -> Coord:
        return self.prefix[-1]

    def resume(self) -> list[Coord]:
        return [*self.prefix, self.cell]


@dataclass(frozen=True)
class Outcome:
    """Result of solving a puzzle with one algorithm.

    Attributes:
        algorithm: Which search produced this outcome.
        won: True if the path reaches the goal.
        path: Cells from start to goal inclusive. Empty on a loss.
        elapsed: Wall-clock seconds spent solving.
    """

    algorithm: Algorithm
    won: bool
    path: tuple[Coord, ...] = ()
    elapsed: float = 0.0

    @property
    def steps(self) -> int:
        return max(len(self.path) - 1, 0)


class InvalidLayoutError(ValueError):
    """Raised when agent coordinates violate a placement constraint."""


class PathReconstructionError(RuntimeError):
    """Raised when a predecessor chain is broken during path reconstruction."""

    def __init__(self, coord: Coord, message: str) -> None:
        self.coord = coord
        super().__init__(message)

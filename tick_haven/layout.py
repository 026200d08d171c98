"""Layout - the six agent coordinates that define a puzzle instance."""
from __future__ import annotations

from dataclasses import astuple, dataclass

from tick_haven.grid import GRID_SIZE, HazardGrid
from tick_haven.types import Coord, InvalidLayoutError, Tag

ORIGIN: Coord = (0, 0)


@dataclass(frozen=True)
class Layout:
    """Agent positions for one puzzle.

    Attributes:
        pursuer: Where the agent starts. Must be the origin.
        pursuer_hazard: Hazard perceiving its 4-neighborhood.
        monster: Defeatable hazard perceiving its 8-neighborhood.
        rock: Impassable cell.
        goal: Destination.
        haven: Waypoint that lets the agent defeat the monster.
    """

    pursuer: Coord
    pursuer_hazard: Coord
    monster: Coord
    rock: Coord
    goal: Coord
    haven: Coord

    def validate(self) -> None:
        """Reject layouts that break a placement constraint.

        Raises InvalidLayoutError describing the first violation found.
        """
        for name, coord in zip(_FIELD_NAMES, astuple(self)):
            x, y = coord
            if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
                raise InvalidLayoutError(f"{name} {coord} is out of bounds")

        if self.pursuer != ORIGIN:
            raise InvalidLayoutError(f"pursuer must start at {ORIGIN}, got {self.pursuer}")

        # Agents are pairwise distinct and the pursuer holds the origin.
        occupied: dict[Coord, str] = {}
        for name, coord in zip(_FIELD_NAMES, astuple(self)):
            if coord in occupied:
                raise InvalidLayoutError(f"{name} {coord} overlaps {occupied[coord]}")
            occupied[coord] = name

        grid = self.build_grid()
        hazard_moore = grid.neighbors8(self.pursuer_hazard)
        for name, coord in (("monster", self.monster), ("rock", self.rock)):
            if coord in hazard_moore:
                raise InvalidLayoutError(
                    f"{name} {coord} is adjacent to pursuer_hazard {self.pursuer_hazard}"
                )

        if grid.in_danger(self.goal):
            raise InvalidLayoutError(f"goal {self.goal} is inside a danger zone")
        if grid.in_danger(self.haven):
            raise InvalidLayoutError(f"haven {self.haven} is inside a danger zone")

    def build_grid(self) -> HazardGrid:
        """Place every agent on a fresh grid. Does not validate."""
        grid = HazardGrid()
        grid.place_agent(Tag.PURSUER, self.pursuer)
        grid.place_agent(Tag.PURSUER_HAZARD, self.pursuer_hazard)
        grid.place_agent(Tag.MONSTER, self.monster)
        grid.place_rock(self.rock)
        grid.place_agent(Tag.GOAL, self.goal)
        grid.place_haven(self.haven)
        return grid


_FIELD_NAMES = ("pursuer", "pursuer_hazard", "monster", "rock", "goal", "haven")

"""
Test suite for the path composer.

Tests cover:
- The end-to-end scenario for both algorithms
- Losing without searching when the start is threatened
- The two-leg route through the haven
- Grid restoration between algorithms
- Layout-level solving and dispatch
"""

import pytest
from tick_haven import (
    Algorithm,
    HazardGrid,
    InvalidLayoutError,
    Layout,
    Outcome,
    Tag,
    solve,
    solve_greedy,
    solve_informed,
    solve_layout,
)

SCENARIO = Layout(
    pursuer=(0, 0),
    pursuer_hazard=(2, 2),
    monster=(4, 4),
    rock=(8, 0),
    goal=(0, 8),
    haven=(8, 8),
)

THREATENED = Layout(
    pursuer=(0, 0),
    pursuer_hazard=(1, 0),
    monster=(4, 4),
    rock=(8, 0),
    goal=(0, 8),
    haven=(8, 8),
)


def _haven_grid():
    """Goal reachable only after defeating the monster from the haven."""
    grid = HazardGrid()
    grid.place_agent(Tag.PURSUER, (0, 0))
    grid.place_agent(Tag.GOAL, (8, 8))
    grid.place_haven((6, 6))
    grid.place_agent(Tag.PURSUER_HAZARD, (5, 7))
    grid.place_agent(Tag.PURSUER_HAZARD, (7, 5))
    grid.place_agent(Tag.MONSTER, (7, 7))
    return grid


class TestEndToEnd:
    """Test the reference scenario."""

    @pytest.mark.parametrize("algorithm", [Algorithm.INFORMED, Algorithm.GREEDY])
    def test_scenario_wins(self, algorithm):
        outcome = solve(SCENARIO.build_grid(), algorithm)

        assert outcome.won
        assert outcome.algorithm is algorithm
        assert outcome.path[0] == (0, 0)
        assert outcome.path[-1] == (0, 8)
        assert outcome.steps == len(outcome.path) - 1
        assert outcome.elapsed >= 0.0

    def test_scenario_informed_path(self):
        outcome = solve_informed(SCENARIO.build_grid())
        assert outcome.path == tuple((0, y) for y in range(9))
        assert outcome.steps == 8

    def test_scenario_greedy_path(self):
        outcome = solve_greedy(SCENARIO.build_grid())
        assert outcome.path == tuple((0, y) for y in range(9))

    def test_solve_layout_runs_both(self):
        results = solve_layout(SCENARIO)

        assert set(results) == {Algorithm.INFORMED, Algorithm.GREEDY}
        assert all(outcome.won for outcome in results.values())

    def test_solve_layout_selected_algorithm(self):
        results = solve_layout(SCENARIO, algorithms=[Algorithm.GREEDY])
        assert list(results) == [Algorithm.GREEDY]


class TestThreatenedStart:
    """Test that a threatened origin loses without searching."""

    @pytest.mark.parametrize("algorithm", [Algorithm.INFORMED, Algorithm.GREEDY])
    def test_loses(self, algorithm):
        outcome = solve(THREATENED.build_grid(), algorithm)

        assert outcome == Outcome(algorithm, won=False)
        assert outcome.path == ()
        assert outcome.steps == 0
        assert outcome.elapsed == 0.0

    def test_solve_layout_loses(self):
        results = solve_layout(THREATENED)
        assert not any(outcome.won for outcome in results.values())


class TestTwoLegRoute:
    """Test routes that go through the haven."""

    def test_informed_goes_through_haven(self):
        outcome = solve_informed(_haven_grid())

        assert outcome.won
        assert outcome.path[0] == (0, 0)
        assert outcome.path[-2:] == ((7, 7), (8, 8))
        assert outcome.path.count((6, 6)) == 1
        assert outcome.path.index((6, 6)) == len(outcome.path) - 3

    def test_greedy_goes_through_haven(self):
        outcome = solve_greedy(_haven_grid())

        assert outcome.won
        assert outcome.path == (
            (0, 0), (1, 1), (2, 2), (3, 3), (4, 4), (5, 5),
            (6, 6), (7, 7), (8, 8),
        )
        assert outcome.path.count((6, 6)) == 1

    def test_informed_loses_without_haven(self):
        grid = HazardGrid()
        grid.place_agent(Tag.PURSUER, (0, 0))
        grid.place_agent(Tag.GOAL, (8, 8))
        grid.place_agent(Tag.MONSTER, (7, 7))

        outcome = solve_informed(grid)
        assert not outcome.won
        assert outcome.path == ()

    def test_informed_loses_when_haven_unreachable(self):
        grid = HazardGrid()
        grid.place_agent(Tag.PURSUER, (0, 0))
        grid.place_agent(Tag.GOAL, (8, 8))
        grid.place_agent(Tag.MONSTER, (7, 7))
        grid.place_haven((4, 8))
        grid.place_agent(Tag.MONSTER, (4, 5))
        grid.place_agent(Tag.PURSUER_HAZARD, (2, 7))
        grid.place_agent(Tag.PURSUER_HAZARD, (6, 7))

        outcome = solve_informed(grid)
        assert not outcome.won


class TestGridRestoration:
    """Test that each solve starts from the pristine board."""

    def test_informed_then_greedy(self):
        grid = _haven_grid()
        pristine = grid.snapshot()

        informed = solve_informed(grid)
        assert grid.at((7, 7)) is Tag.EMPTY

        greedy = solve_greedy(grid)
        assert informed.won and greedy.won

        grid.reset()
        assert grid.snapshot() == pristine

    def test_repeated_solves_are_identical(self):
        grid = _haven_grid()
        first = solve_informed(grid)
        second = solve_informed(grid)
        assert first.path == second.path


class TestSolveErrors:
    """Test rejected inputs."""

    def test_invalid_layout_raises_before_search(self):
        bad = Layout(
            pursuer=(0, 0),
            pursuer_hazard=(2, 2),
            monster=(3, 3),
            rock=(8, 0),
            goal=(0, 8),
            haven=(8, 8),
        )
        with pytest.raises(InvalidLayoutError):
            solve_layout(bad)

    def test_grid_without_goal_raises(self):
        grid = HazardGrid()
        grid.place_agent(Tag.PURSUER, (0, 0))
        with pytest.raises(ValueError, match="goal"):
            solve_informed(grid)

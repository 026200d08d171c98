"""Tests for shared types and SearchConfig."""
from __future__ import annotations

import pytest

from tick_haven import (
    Algorithm,
    Outcome,
    PathReconstructionError,
    SearchConfig,
    Tag,
    manhattan,
)


class TestTag:
    def test_agent_tags(self) -> None:
        agents = {t for t in Tag if t.is_agent}
        assert agents == {
            Tag.PURSUER, Tag.PURSUER_HAZARD, Tag.MONSTER,
            Tag.ROCK, Tag.GOAL, Tag.HAVEN,
        }

    def test_blocking_tags(self) -> None:
        blocking = {t for t in Tag if t.blocks_search}
        assert blocking == {Tag.DANGER, Tag.ROCK, Tag.MONSTER, Tag.PURSUER_HAZARD}

    def test_goal_and_haven_are_passable(self) -> None:
        assert not Tag.GOAL.blocks_search
        assert not Tag.HAVEN.blocks_search
        assert not Tag.PURSUER.blocks_search


class TestOutcome:
    def test_steps(self) -> None:
        outcome = Outcome(Algorithm.GREEDY, won=True, path=((0, 0), (1, 1), (2, 2)))
        assert outcome.steps == 2

    def test_lose_defaults(self) -> None:
        outcome = Outcome(Algorithm.INFORMED, won=False)
        assert outcome.path == ()
        assert outcome.steps == 0
        assert outcome.elapsed == 0.0

    def test_frozen(self) -> None:
        outcome = Outcome(Algorithm.INFORMED, won=False)
        with pytest.raises(AttributeError):
            outcome.won = True  # type: ignore[misc]


class TestManhattan:
    def test_distance(self) -> None:
        assert manhattan((0, 0), (3, 4)) == 7
        assert manhattan((5, 2), (5, 2)) == 0
        assert manhattan((8, 0), (0, 8)) == 16


class TestPathReconstructionError:
    def test_carries_coord(self) -> None:
        err = PathReconstructionError((3, 4), "broken chain")
        assert err.coord == (3, 4)
        assert isinstance(err, RuntimeError)
        assert str(err) == "broken chain"


class TestSearchConfig:
    def test_defaults(self) -> None:
        config = SearchConfig()
        assert config.max_path_cells == 65
        assert config.variant == 1

    def test_variant_two_accepted(self) -> None:
        assert SearchConfig(variant=2).variant == 2

    def test_invalid_variant(self) -> None:
        with pytest.raises(ValueError, match="variant"):
            SearchConfig(variant=3)

    def test_invalid_cap(self) -> None:
        with pytest.raises(ValueError, match="max_path_cells"):
            SearchConfig(max_path_cells=1)

    def test_frozen(self) -> None:
        config = SearchConfig()
        with pytest.raises(AttributeError):
            config.variant = 2  # type: ignore[misc]

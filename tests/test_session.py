import random

import pytest

import levelgen.session as session_mod
from levelgen.generation.solver import solve
from levelgen.session import LevelSession

from tests.grid_test_utils import make_level

TILT_BOARD = (
    "#####",
    "#..G#",
    "#...#",
    "#S..#",
    "#####",
)

DUNGEON_BOARD = (
    "#######",
    "#S....#",
    "#.....#",
    "#....G#",
    "#######",
)


@pytest.fixture()
def fixed_levels(monkeypatch):
    """Replace generation with hand-built boards; records the level indices requested."""
    calls = []

    def fake_generate(level_index, rng, variant, settings=None):
        calls.append(level_index)
        board = TILT_BOARD if getattr(variant, "value", variant) == "tilt" else DUNGEON_BOARD
        return make_level(variant, *board, level_index=level_index)

    monkeypatch.setattr(session_mod, "generate", fake_generate)
    return calls


def test_tilt_moves_counted_only_on_change(fixed_levels):
    s = LevelSession("tilt", random.Random(1))
    assert s.position == (1, 3)
    s.move("left")  # wall: no change
    s.move("down")
    assert s.moves == 0 and s.total_moves == 0
    out = s.move("up")
    assert out.final_position == (1, 1) and not out.reached_goal
    assert s.moves == 1


def test_reaching_goal_advances_level(fixed_levels):
    s = LevelSession("tilt", random.Random(1))
    s.move("up")
    out = s.move("right")
    assert out.reached_goal
    assert s.levels_completed == 1
    assert s.level_index == 1
    assert s.moves == 0
    assert s.total_moves == 2
    assert s.position == s.level.start
    assert fixed_levels == [0, 1]


def test_dungeon_session_walks_and_places_entities(fixed_levels):
    s = LevelSession("dungeon", random.Random(2))
    assert s.entities.monsters or s.entities.loot
    for pos in s.entities.occupied():
        assert pos in s.level.reachable
    s.move("right")
    assert s.position == (2, 1)
    s.move("UP")  # wall, case-insensitive name
    assert s.moves == 1


def test_reset_starts_over(fixed_levels):
    s = LevelSession("tilt", random.Random(1))
    s.move("up")
    s.move("right")
    s.reset()
    assert (s.level_index, s.levels_completed, s.total_moves, s.moves) == (0, 0, 0, 0)
    assert fixed_levels[-1] == 0


def test_unknown_direction_raises(fixed_levels):
    s = LevelSession("tilt", random.Random(1))
    with pytest.raises(ValueError):
        s.move("diagonal")
    with pytest.raises(ValueError):
        s.move(None)


def test_real_generation_session():
    s = LevelSession("tilt", random.Random(42))
    for name in solve(s.level.grid, s.position):
        s.move(name)
    assert s.levels_completed == 1
    assert s.level_index == 1

import random
from dataclasses import replace

from levelgen.generation.difficulty import tilt_params
from levelgen.generation.grid import border_is_wall, single_goal
from levelgen.generation.scatter import build_tilt_layout, pick_start_goal
from levelgen.generation.tiles import FLOOR, GOAL, WALL


def test_start_goal_respect_separation_and_alignment():
    params = tilt_params(4)
    rng = random.Random(7)
    for _ in range(50):
        pair = pick_start_goal(params, rng)
        assert pair is not None
        (sx, sy), (gx, gy) = pair
        assert sx != gx and sy != gy
        assert abs(sx - gx) + abs(sy - gy) >= params.min_separation
        for x, y in pair:
            assert 1 <= x <= params.width - 2
            assert 1 <= y <= params.height - 2


def test_impossible_separation_gives_none():
    params = replace(tilt_params(0), min_separation=100)
    assert pick_start_goal(params, random.Random(1)) is None


def test_layout_shape():
    params = tilt_params(2)
    start, goal = (1, 1), (6, 5)
    g = build_tilt_layout(params, start, goal, random.Random(3))
    assert (g.width, g.height) == (9, 9)
    assert border_is_wall(g)
    assert single_goal(g)
    assert g[goal[0]][goal[1]] == GOAL
    assert g[start[0]][start[1]] == FLOOR


def test_density_extremes():
    start, goal = (1, 1), (7, 7)
    empty = build_tilt_layout(replace(tilt_params(0), wall_density=0.0), start, goal, random.Random(1))
    assert empty.count(WALL) == 9 * 9 - 7 * 7
    full = build_tilt_layout(replace(tilt_params(0), wall_density=1.0), start, goal, random.Random(1))
    assert full.open_positions() == [start, goal]


def test_same_seed_same_layout():
    params = tilt_params(5)
    a = build_tilt_layout(params, (1, 2), (6, 6), random.Random(11))
    b = build_tilt_layout(params, (1, 2), (6, 6), random.Random(11))
    assert a == b

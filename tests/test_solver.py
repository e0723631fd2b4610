from levelgen.generation.grid import Grid
from levelgen.generation.movement import tilt_step, walk_step
from levelgen.generation.reachability import compute_reachable
from levelgen.generation.solver import is_solvable, shortest_solution_length, solve
from levelgen.generation.tiles import FLOOR, GOAL, WALL

from tests.grid_test_utils import grid_from


def _open_board(width=9, height=9):
    cells = [[FLOOR] * height for _ in range(width)]
    for x in range(width):
        cells[x][0] = cells[x][height - 1] = WALL
    for y in range(height):
        cells[0][y] = cells[width - 1][y] = WALL
    return Grid(cells)


def test_open_board_single_tilt():
    g = _open_board().with_tiles({(7, 4): GOAL})
    assert shortest_solution_length(g, (1, 4), tilt_step) == 1
    assert solve(g, (1, 4), tilt_step) == ["right"]


def test_three_move_tilt_path():
    g, s = grid_from(
        "#######",
        "#S....#",
        "#####.#",
        "#G....#",
        "#######",
    )
    assert solve(g, s, tilt_step) == ["right", "down", "left"]


def test_tilt_goal_walled_in_is_unsolvable():
    g, s = grid_from(
        "#####",
        "#S#G#",
        "#####",
    )
    assert solve(g, s, tilt_step) is None
    assert shortest_solution_length(g, s) is None
    assert not is_solvable(g, s)


def test_tilt_centre_goal_never_crossed():
    # Every slide stops against the border, so no line ever passes (2, 2)
    # even though a walker reaches the goal in two steps.
    g, s = grid_from(
        "#####",
        "#S..#",
        "#.G.#",
        "#...#",
        "#####",
    )
    assert (2, 2) in compute_reachable(g, s)
    assert shortest_solution_length(g, s, tilt_step) is None
    assert shortest_solution_length(g, s, walk_step) == 2


def test_no_goal_and_start_on_goal():
    g, s = grid_from("#S.#")
    assert solve(g, s) is None
    g2 = Grid.from_rows(["#G.#"])
    assert solve(g2, (1, 0)) == []
    assert shortest_solution_length(g2, (1, 0)) == 0


def test_walking_solution_equals_bfs_distance():
    g, s = grid_from(
        "##########",
        "#S.#.....#",
        "#..#.###.#",
        "#......#G#",
        "##########",
    )
    goal = g.find(GOAL)
    dist = compute_reachable(g, s).distance(goal)
    assert dist is not None
    assert shortest_solution_length(g, s, walk_step) == dist

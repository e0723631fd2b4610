import random

import pytest

from levelgen.generation.reachability import ReachableSet, compute_reachable, farthest_positions, pick_farthest

from tests.grid_test_utils import bfs_reachable, grid_from


def test_reachable_matches_reference_bfs():
    g, s = grid_from(
        "##########",
        "#S..#....#",
        "#.#.#.##.#",
        "#...#....#",
        "##########",
    )
    r = compute_reachable(g, s)
    assert set(r) == bfs_reachable(g, s)
    assert (5, 1) not in r  # right half is walled off
    assert r.distance(s) == 0
    assert r.distance((3, 3)) == 4


def test_wall_start_is_empty():
    g, _ = grid_from("###", "#.#", "###")
    r = compute_reachable(g, (0, 0))
    assert len(r) == 0
    assert farthest_positions(r) == []
    assert pick_farthest(r, random.Random(1)) is None


def test_out_of_bounds_start_is_empty():
    g, _ = grid_from("...")
    assert len(compute_reachable(g, (5, 5))) == 0


def test_farthest_positions_ties_sorted():
    g, s = grid_from(
        "#####",
        "#...#",
        "#.S.#",
        "#...#",
        "#####",
    )
    r = compute_reachable(g, s)
    assert r.max_distance == 2
    assert farthest_positions(r) == [(1, 1), (1, 3), (3, 1), (3, 3)]
    assert pick_farthest(r, random.Random(5)) in farthest_positions(r)


def test_isolated_start_has_no_goal_candidate():
    g, s = grid_from("###", "#S#", "###")
    r = compute_reachable(g, s)
    assert list(r) == [s]
    assert pick_farthest(r) is None


def test_iteration_is_sorted():
    g, s = grid_from("S..", "...")
    assert list(compute_reachable(g, s)) == sorted(bfs_reachable(g, s))


def test_distances_are_read_only():
    g, s = grid_from("S..", "...")
    r = compute_reachable(g, s)
    with pytest.raises(TypeError):
        r.distances[s] = -99
    assert r.distance(s) == 0
    assert hash(r) == hash(compute_reachable(g, s))


def test_caller_dict_is_copied():
    dist = {(0, 0): 0, (1, 0): 1}
    r = ReachableSet(start=(0, 0), positions=frozenset(dist), distances=dist)
    dist[(1, 0)] = 50
    assert r.distance((1, 0)) == 1

from dataclasses import fields, replace

import pytest

from levelgen.generation.difficulty import (
    MAX_MIN_MOVES,
    MAX_MIN_REACHABLE,
    MAX_WALL_DENSITY,
    LayoutVariant,
    dungeon_params,
    params_for,
    relax,
    tilt_params,
)

LEVELS = range(0, 40)


def _numeric_fields(p):
    out = {}
    for f in fields(p):
        v = getattr(p, f.name)
        if f.name == "level_index":
            continue
        if isinstance(v, bool):
            continue
        if isinstance(v, (int, float)):
            out[f.name] = v
        elif isinstance(v, tuple):
            for i, part in enumerate(v):
                out[f"{f.name}[{i}]"] = part
    return out


@pytest.mark.parametrize("variant", list(LayoutVariant))
def test_params_non_decreasing(variant):
    prev = None
    for lvl in LEVELS:
        cur = _numeric_fields(params_for(variant, lvl))
        if prev is not None:
            for k, v in cur.items():
                assert v >= prev[k], f"{variant.value}.{k} decreased at level {lvl}"
        prev = cur


def test_tilt_curve_values():
    p0 = tilt_params(0)
    assert (p0.width, p0.height) == (9, 9)
    assert p0.min_solution_length == 3
    assert p0.wall_density == pytest.approx(0.15)
    assert p0.forbid_aligned and p0.min_separation == 4
    assert tilt_params(11).min_solution_length == MAX_MIN_MOVES
    assert tilt_params(13).wall_density == MAX_WALL_DENSITY
    assert tilt_params(12).wall_density < MAX_WALL_DENSITY


def test_dungeon_curve_values():
    p0 = dungeon_params(0)
    assert (p0.width, p0.height) == (30, 18)
    assert p0.room_count_range == (6, 10)
    assert p0.min_reachable_tiles == 40
    assert p0.monster_count_range == (3, 7)
    assert p0.loot_count_range == (5, 10)
    assert dungeon_params(4).room_count_range == (7, 11)
    assert dungeon_params(10).min_reachable_tiles == MAX_MIN_REACHABLE


@pytest.mark.parametrize("variant,cap", [(LayoutVariant.TILT, 13), (LayoutVariant.DUNGEON, 10)])
def test_beyond_cap_equals_cap(variant, cap):
    at_cap = params_for(variant, cap)
    for lvl in (cap + 1, cap + 7, 500):
        assert replace(params_for(variant, lvl), level_index=cap) == at_cap


def test_negative_level_clamps_to_zero():
    assert tilt_params(-3) == tilt_params(0)
    assert params_for("dungeon", -1) == dungeon_params(0)


def test_params_for_rejects_unknown_variant():
    with pytest.raises(ValueError):
        params_for("platformer", 0)


def test_relax_tilt_floor():
    r = relax(tilt_params(13))
    assert r.relaxed
    assert r.wall_density == pytest.approx(0.25)
    assert r.min_solution_length == 1
    assert r.min_separation == 1
    assert not r.forbid_aligned
    assert relax(tilt_params(0)).wall_density == pytest.approx(0.15 * 0.7)


def test_relax_dungeon_floor():
    r = relax(dungeon_params(8))
    assert r.relaxed
    assert r.min_reachable_tiles == 2
    assert r.room_count_range == dungeon_params(8).room_count_range

"""Generation controller.

States: GENERATING -> VALIDATING -> {ACCEPTED, RETRY, RELAXED_RETRY, FALLBACK}.

    1. Derive parameters from the level index.
    2. Bounded attempt loop: build a candidate, validate it, accept or retry.
    3. Relaxed retry: same loop with the constraint floor (any solvable /
       reachable layout).
    4. Fallback: a hand-built layout, verified once with the same solver and
       reachability code; a failed self-check is logged loudly, never raised.

``generate`` never raises for any rng state; the rng is borrowed for the call
and not retained.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from ..config import GeneratorSettings
from ..errors import GenerationRejected, InvariantViolation
from ..logging_utils import get_logger
from .difficulty import GenerationParams, LayoutVariant, params_for, relax
from .fallback import build_dungeon_fallback, build_tilt_fallback
from .grid import Grid, single_goal
from .metrics import init_metrics, record_rejection
from .movement import movement_for, tilt_step
from .reachability import ReachableSet, compute_reachable, pick_farthest
from .rooms import build_dungeon_layout
from .scatter import build_tilt_layout, pick_start_goal
from .solver import shortest_solution_length
from .tiles import GOAL, Coord2D

log = get_logger("generator")


class GenerationPhase(str, Enum):
    GENERATING = "generating"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    RETRY = "retry"
    RELAXED_RETRY = "relaxed_retry"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class GeneratedLevel:
    grid: Grid
    start: Coord2D
    goal: Coord2D
    reachable: ReachableSet
    variant: LayoutVariant
    level_index: int
    params: GenerationParams
    solution_length: Optional[int]
    phase: GenerationPhase
    attempts: int
    metrics: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def is_fallback(self) -> bool:
        return self.phase is GenerationPhase.FALLBACK

    def rows(self, start_char: str = "S") -> List[str]:
        return self.grid.rows({self.start: start_char})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variant": self.variant.value,
            "level_index": self.level_index,
            "width": self.grid.width,
            "height": self.grid.height,
            "rows": self.grid.rows(),
            "start": list(self.start),
            "goal": list(self.goal),
            "reachable_tiles": len(self.reachable),
            "solution_length": self.solution_length,
            "phase": self.phase.value,
            "attempts": self.attempts,
            "metrics": self.metrics,
        }


class _Candidate(NamedTuple):
    grid: Grid
    start: Coord2D
    goal: Coord2D
    reachable: ReachableSet
    solution_length: Optional[int]


# ----------------------------------------------------------------------
# Candidate builders (raise GenerationRejected on validation failure)
# ----------------------------------------------------------------------
def _dungeon_candidate(params: GenerationParams, rng, metrics: Dict[str, Any]) -> _Candidate:
    layout = build_dungeon_layout(params, rng)
    if metrics:
        metrics['rooms_placed'] = len(layout.rooms)
    floor = layout.grid.open_positions()
    if not floor:
        raise GenerationRejected("no_floor", f"{len(layout.rooms)} rooms placed")
    start = floor[rng.randrange(len(floor))]
    reachable = compute_reachable(layout.grid, start)
    if len(reachable) < params.min_reachable_tiles:
        raise GenerationRejected("too_small", f"{len(reachable)} < {params.min_reachable_tiles}")
    goal = pick_farthest(reachable, rng)
    if goal is None:
        raise GenerationRejected("no_goal_candidate")
    grid = layout.grid.with_tiles({goal: GOAL})
    return _Candidate(grid, start, goal, reachable, reachable.distance(goal))


def _tilt_candidate(params: GenerationParams, rng, metrics: Dict[str, Any]) -> _Candidate:
    pair = pick_start_goal(params, rng)
    if pair is None:
        raise GenerationRejected("placement_exhausted")
    start, goal = pair
    grid = build_tilt_layout(params, start, goal, rng)
    length = shortest_solution_length(grid, start, tilt_step)
    if length is None:
        raise GenerationRejected("unsolvable")
    if length < params.min_solution_length:
        raise GenerationRejected("too_short", f"{length} < {params.min_solution_length}")
    return _Candidate(grid, start, goal, compute_reachable(grid, start), length)


_BUILDERS: Dict[LayoutVariant, Callable[[GenerationParams, Any, Dict[str, Any]], _Candidate]] = {
    LayoutVariant.DUNGEON: _dungeon_candidate,
    LayoutVariant.TILT: _tilt_candidate,
}


def _attempt_loop(
    params: GenerationParams,
    rng,
    budget: int,
    metrics: Dict[str, Any],
    counter: str,
) -> Tuple[Optional[_Candidate], int]:
    """Run up to ``budget`` build/validate rounds; returns (candidate or None, attempts used)."""
    build = _BUILDERS[params.variant]
    for attempt in range(budget):
        if metrics:
            metrics[counter] += 1
        try:
            return build(params, rng, metrics), attempt + 1
        except GenerationRejected as exc:
            record_rejection(metrics, exc.reason)
            log.debug(
                event="candidate_rejected",
                variant=params.variant.value,
                level=params.level_index,
                attempt=attempt + 1,
                relaxed=params.relaxed,
                reason=exc.reason,
                detail=exc.detail,
            )
    return None, budget


# ----------------------------------------------------------------------
# Fallback
# ----------------------------------------------------------------------
def _verify_fallback(variant: LayoutVariant, grid: Grid, start: Coord2D, goal: Coord2D) -> Optional[int]:
    """Self-check for the fallback; returns the solution length or raises InvariantViolation."""
    if not single_goal(grid) or grid.tile(*goal) != GOAL:
        raise InvariantViolation("fallback grid must hold exactly one goal at the goal position", grid.rows())
    length = shortest_solution_length(grid, start, movement_for(variant))
    if length is None:
        raise InvariantViolation("fallback layout is unsolvable", grid.rows({start: "S"}))
    if variant is LayoutVariant.DUNGEON and goal not in compute_reachable(grid, start):
        raise InvariantViolation("fallback goal unreachable from start", grid.rows({start: "S"}))
    return length


def _fallback(params: GenerationParams, metrics: Dict[str, Any]) -> _Candidate:
    if params.variant is LayoutVariant.TILT:
        layout = build_tilt_fallback(params.width, params.height)
    else:
        layout = build_dungeon_fallback(params.width, params.height)
    log.warn(
        event="fallback_used",
        variant=params.variant.value,
        level=params.level_index,
        rejections=sum(metrics.get('rejections', {}).values()) if metrics else None,
    )
    length = None
    try:
        length = _verify_fallback(params.variant, layout.grid, layout.start, layout.goal)
        if metrics:
            metrics['fallback_verified'] = True
    except InvariantViolation as exc:
        log.error(
            event="fallback_invariant_violation",
            variant=params.variant.value,
            level=params.level_index,
            error=str(exc),
        )
        for i, row in enumerate(exc.rows):
            log.error(event="fallback_grid_dump", row=i, tiles=row)
    if metrics:
        metrics['fallback_used'] = True
    reachable = compute_reachable(layout.grid, layout.start)
    return _Candidate(layout.grid, layout.start, layout.goal, reachable, length)


# ----------------------------------------------------------------------
# Public entry point
# ----------------------------------------------------------------------
def generate(
    level_index: int,
    rng=None,
    variant=LayoutVariant.TILT,
    settings: Optional[GeneratorSettings] = None,
) -> GeneratedLevel:
    """Generate a verified level for ``variant`` at difficulty ``level_index``.

    ``variant`` accepts a ``LayoutVariant`` or its string value; an unknown
    variant is a programming error and raises ``ValueError``. Everything else
    degrades (relaxed constraints, then fallback) instead of raising.
    """
    variant = LayoutVariant(getattr(variant, "value", variant))
    if rng is None:
        rng = random
    if settings is None:
        settings = GeneratorSettings()
    params = params_for(variant, level_index)
    metrics: Dict[str, Any] = init_metrics() if settings.enable_metrics else {}

    if settings.enable_metrics:
        started = time.perf_counter()
        phase_times: Dict[str, int] = {}

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            return r
    else:
        def _phase(label, fn, *a, **k):
            return fn(*a, **k)

    phase = GenerationPhase.ACCEPTED
    used_params = params
    primary_budget = settings.attempts_for(variant)
    candidate, attempts = _phase('attempts', _attempt_loop, params, rng, primary_budget, metrics, 'attempts')

    if candidate is None:
        used_params = relax(params)
        phase = GenerationPhase.RELAXED_RETRY
        log.info(
            event="constraints_relaxed",
            variant=variant.value,
            level=params.level_index,
            attempts=primary_budget,
            wall_density=round(used_params.wall_density, 3) if variant is LayoutVariant.TILT else None,
            min_reachable=used_params.min_reachable_tiles if variant is LayoutVariant.DUNGEON else None,
        )
        relaxed_budget = settings.relaxed_attempts_for(variant)
        candidate, used = _phase(
            'relaxed', _attempt_loop, used_params, rng, relaxed_budget, metrics, 'relaxed_attempts'
        )
        attempts += used

    if candidate is None:
        phase = GenerationPhase.FALLBACK
        candidate = _phase('fallback', _fallback, used_params, metrics)

    if settings.enable_metrics:
        metrics['runtime_ms'] = int((time.perf_counter() - started) * 1000)
        metrics['phase_ms'] = phase_times

    level = GeneratedLevel(
        grid=candidate.grid,
        start=candidate.start,
        goal=candidate.goal,
        reachable=candidate.reachable,
        variant=variant,
        level_index=params.level_index,
        params=used_params,
        solution_length=candidate.solution_length,
        phase=phase,
        attempts=attempts,
        metrics=metrics,
    )
    log.debug(
        event="level_generated",
        variant=variant.value,
        level=params.level_index,
        phase=phase.value,
        solution_length=candidate.solution_length,
        min_solution_length=params.min_solution_length if variant is LayoutVariant.TILT else None,
        reachable=len(candidate.reachable),
        attempts=attempts,
    )
    return level


__all__ = ["GenerationPhase", "GeneratedLevel", "LayoutVariant", "generate"]

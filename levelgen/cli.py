"""Command line interface.

Generates tilt-puzzle and dungeon levels from a seed, prints them as ASCII (or
JSON), and solves tilt levels. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `levelgen --help` (or `python run.py --help` from a checkout) for details.
"""

import argparse
import json
import os
import random
import sys
from importlib import metadata
from textwrap import dedent
from typing import List, Optional

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from . import logging_utils
from .config import GeneratorSettings
from .generation import LayoutVariant, generate, place_entities, solve, tilt_step
from .generation.tiles import FLOOR, GOAL, WALL

_color_init()
# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()

DIST_NAME = "minigame-levelgen"
# Source checkout: VERSION sits at the repository root, one level above the package
_VERSION_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "VERSION")


def _load_version() -> str:
    try:
        with open(_VERSION_FILE, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        pass
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = _load_version()

MONSTER = "M"
LOOT = "$"
START = "S"

_TILE_COLORS = {
    WALL: Fore.BLUE,
    FLOOR: Style.DIM,
    GOAL: Fore.GREEN + Style.BRIGHT,
    START: Fore.CYAN + Style.BRIGHT,
    MONSTER: Fore.RED + Style.BRIGHT,
    LOOT: Fore.YELLOW,
}


def parse_args(argv: List[str]) -> argparse.Namespace:
    description = """
    levelgen: procedural level generator

    Generate verified tilt-puzzle and dungeon levels from a seed, or print the
    shortest solution of a tilt level. Configuration can be provided via CLI
    flags or environment variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          LEVELGEN_LOG_LEVEL          debug|info|warn|error (default: info)
          LEVELGEN_LOG_JSON           1 for JSON log lines
          LEVELGEN_TILT_ATTEMPTS      Tilt attempt budget (default: 50)
          LEVELGEN_DUNGEON_ATTEMPTS   Dungeon attempt budget (default: 20)
          LEVELGEN_RELAXED_ATTEMPTS   Relaxed-retry budget (default: same as primary)
          LEVELGEN_ENABLE_METRICS     0 to skip metrics collection

        Examples:
          # Tilt level 3 from seed 42
          python run.py generate --variant tilt --level 3 --seed 42

          # Dungeon with monsters and loot, as JSON
          python run.py generate --variant dungeon --level 5 --seed 7 --entities --json

          # Shortest tilt solution
          python run.py solve --level 3 --seed 42

          # Load variables from .env then generate
          python run.py --env-file .env generate
        """
    )

    parser = argparse.ArgumentParser(
        prog="levelgen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=sorted(logging_utils.LEVELS),
        default=None,
        help="Log threshold (default: env LEVELGEN_LOG_LEVEL or info)",
    )
    parser.add_argument(
        "--log-json",
        dest="log_json",
        action="store_true",
        help="Emit log lines as JSON objects",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"levelgen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a level and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate one level and print it as ASCII (S start, G goal, M monster, $ loot).",
    )
    gen_parser.add_argument(
        "--variant",
        choices=[v.value for v in LayoutVariant],
        default=LayoutVariant.TILT.value,
        help="Layout variant (default: tilt)",
    )
    gen_parser.add_argument("--level", type=int, default=0, help="Zero-based level index (default: 0)")
    gen_parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    gen_parser.add_argument("--json", dest="as_json", action="store_true", help="Print JSON instead of ASCII")
    gen_parser.add_argument(
        "--entities",
        action="store_true",
        help="Place monsters and loot on reachable tiles (dungeon levels)",
    )
    gen_parser.set_defaults(command="generate")

    # solve subcommand
    solve_parser = subparsers.add_parser(
        "solve",
        help="Generate a tilt level and print its shortest solution",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    solve_parser.add_argument("--level", type=int, default=0, help="Zero-based level index (default: 0)")
    solve_parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    solve_parser.set_defaults(command="solve")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def render(rows: List[str]) -> str:
    if not _COLOR_ENABLED:
        return "\n".join(rows)
    out = []
    for row in rows:
        out.append("".join(f"{_TILE_COLORS.get(ch, '')}{ch}{Style.RESET_ALL}" for ch in row))
    return "\n".join(out)


def _rng_for(seed):
    return random.Random(seed) if seed is not None else random.Random()


def _cmd_generate(args, settings: GeneratorSettings) -> int:
    rng = _rng_for(args.seed)
    level = generate(args.level, rng, args.variant, settings)
    marks = {level.start: START}
    entities = None
    if args.entities:
        entities = place_entities(level, rng)
        marks.update({p: MONSTER for p in entities.monsters})
        marks.update({p: LOOT for p in entities.loot})
    if args.as_json:
        payload = level.to_dict()
        payload["seed"] = args.seed
        if entities is not None:
            payload["monsters"] = [list(p) for p in entities.monsters]
            payload["loot"] = [list(p) for p in entities.loot]
        print(json.dumps(payload, indent=2))
        return 0
    header = f"{level.variant.value} level {level.level_index} ({level.phase.value}, par {level.solution_length})"
    if _COLOR_ENABLED:
        header = f"{Fore.MAGENTA}{header}{Style.RESET_ALL}"
    print(header)
    print(render(level.grid.rows(marks)))
    return 0


def _cmd_solve(args, settings: GeneratorSettings) -> int:
    level = generate(args.level, _rng_for(args.seed), LayoutVariant.TILT, settings)
    path = solve(level.grid, level.start, tilt_step)
    if path is None:
        err = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
        print(f"{err} level {level.level_index} has no solution", file=sys.stderr)
        return 1
    print(render(level.rows()))
    print(" ".join(path) if path else "(start is on the goal)")
    print(f"moves: {len(path)}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)
    # Load .env (explicit path or default lookup); existing env vars win
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    env_level = os.getenv("LEVELGEN_LOG_LEVEL")
    level_name = args.log_level or (env_level.lower() if env_level and env_level.lower() in logging_utils.LEVELS else None)
    json_mode = True if args.log_json else os.getenv("LEVELGEN_LOG_JSON", "0") in logging_utils._TRUTHY
    logging_utils.configure(level=level_name, json_mode=json_mode)

    settings = GeneratorSettings.from_env(args.env_file)
    logging_utils.log.debug(
        event="startup",
        command=args.command,
        tilt_attempts=settings.tilt_attempts,
        dungeon_attempts=settings.dungeon_attempts,
        metrics=settings.enable_metrics,
    )

    if args.command == "solve":
        return _cmd_solve(args, settings)
    return _cmd_generate(args, settings)


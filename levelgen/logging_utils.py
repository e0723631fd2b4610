"""Minimal structured logging helper.

Emits key=value pairs (or one JSON object per line) with a timestamp and
level, which keeps generation diagnostics easy to grep and parse.

Usage:
    from levelgen.logging_utils import get_logger
    log = get_logger("generator")
    log.warn(event="fallback_used", variant="tilt", level=3)

Environment:
    LEVELGEN_LOG_LEVEL  debug|info|warn|error (default info)
    LEVELGEN_LOG_JSON   1/true/yes/on for JSON lines

All non-numeric values are str()'d with spaces replaced. Reserved keys: level, ts.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")
CURRENT_LEVEL = LEVELS.get(os.getenv("LEVELGEN_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("LEVELGEN_LOG_JSON", "0") in _TRUTHY


def configure(level: Optional[str] = None, json_mode: Optional[bool] = None) -> None:
    """Override the env-derived threshold / output mode (used by the CLI)."""
    global CURRENT_LEVEL, JSON_MODE
    if level is not None:
        if level.lower() not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        CURRENT_LEVEL = LEVELS[level.lower()]
    if json_mode is not None:
        JSON_MODE = bool(json_mode)


def _format(level: str, **fields) -> str:
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: Optional[str] = None):
        self.name = name or "levelgen"

    def _log(self, lvl: str, **fields) -> None:
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields) -> None:
        self._log("debug", **fields)

    def info(self, **fields) -> None:
        self._log("info", **fields)

    def warn(self, **fields) -> None:
        self._log("warn", **fields)

    def error(self, **fields) -> None:
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("levelgen")

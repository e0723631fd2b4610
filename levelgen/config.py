from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_FALSY = {"0", "false", "no", "off", ""}


@dataclass
class GeneratorSettings:
    tilt_attempts: int = 50
    dungeon_attempts: int = 20
    relaxed_attempts: Optional[int] = None  # None => same as the variant's primary count
    enable_metrics: bool = True

    def __post_init__(self):
        self.tilt_attempts = max(0, int(self.tilt_attempts))
        self.dungeon_attempts = max(0, int(self.dungeon_attempts))
        if self.relaxed_attempts is not None:
            self.relaxed_attempts = max(0, int(self.relaxed_attempts))

    def attempts_for(self, variant) -> int:
        value = getattr(variant, "value", variant)
        return self.tilt_attempts if value == "tilt" else self.dungeon_attempts

    def relaxed_attempts_for(self, variant) -> int:
        if self.relaxed_attempts is None:
            return self.attempts_for(variant)
        return self.relaxed_attempts

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "GeneratorSettings":
        """Settings with environment overrides; loads ``.env`` (or ``env_file``) first."""
        load_dotenv(env_file)
        settings = cls()
        int_map = {
            'LEVELGEN_TILT_ATTEMPTS': 'tilt_attempts',
            'LEVELGEN_DUNGEON_ATTEMPTS': 'dungeon_attempts',
            'LEVELGEN_RELAXED_ATTEMPTS': 'relaxed_attempts',
        }
        for env_key, attr in int_map.items():
            raw = os.environ.get(env_key)
            if raw is None:
                continue
            try:
                setattr(settings, attr, max(0, int(raw)))
            except ValueError:
                # Keep the default on malformed values
                continue
        if 'LEVELGEN_ENABLE_METRICS' in os.environ:
            val = os.environ.get('LEVELGEN_ENABLE_METRICS', '').lower()
            settings.enable_metrics = val not in _FALSY
        return settings


__all__ = ["GeneratorSettings"]

"""Generation error taxonomy.

None of these cross the public ``generate()`` boundary: rejections drive the
retry loops and an invariant violation is logged, not raised.
"""
from __future__ import annotations

from typing import Optional, Sequence


class LevelGenError(Exception):
    """Base class for generation errors."""


class GenerationRejected(LevelGenError):
    """A candidate layout failed validation; the controller retries."""

    def __init__(self, reason: str, detail: Optional[str] = None):
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason}: {detail}" if detail else reason)


class InvariantViolation(LevelGenError):
    """The structurally guaranteed fallback failed its own self-check."""

    def __init__(self, message: str, rows: Sequence[str] = ()):
        self.rows = list(rows)
        super().__init__(message)


__all__ = ["LevelGenError", "GenerationRejected", "InvariantViolation"]

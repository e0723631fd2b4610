import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from levelgen import logging_utils  # noqa: E402

_ENV_KEYS = (
    "LEVELGEN_LOG_LEVEL",
    "LEVELGEN_LOG_JSON",
    "LEVELGEN_TILT_ATTEMPTS",
    "LEVELGEN_DUNGEON_ATTEMPTS",
    "LEVELGEN_RELAXED_ATTEMPTS",
    "LEVELGEN_ENABLE_METRICS",
)


@pytest.fixture(autouse=True)
def _isolate_env_and_logging():
    """Undo env vars loaded by python-dotenv and any logging_utils.configure() calls."""
    saved_env = {k: os.environ.get(k) for k in _ENV_KEYS}
    saved_level, saved_json = logging_utils.CURRENT_LEVEL, logging_utils.JSON_MODE
    try:
        yield
    finally:
        for k, v in saved_env.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v
        logging_utils.CURRENT_LEVEL = saved_level
        logging_utils.JSON_MODE = saved_json


@pytest.fixture()
def rng():
    return random.Random(1234)

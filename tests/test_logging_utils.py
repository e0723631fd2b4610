import json

import pytest

from levelgen import logging_utils
from levelgen.logging_utils import get_logger


def test_key_value_format():
    logging_utils.configure(json_mode=False)
    line = logging_utils._format("info", event="level generated", attempts=3, detail=None)
    assert line.startswith("level=info ts=")
    assert "event=level_generated" in line
    assert "attempts=3" in line
    assert "detail" not in line


def test_json_format():
    logging_utils.configure(json_mode=True)
    rec = json.loads(logging_utils._format("warn", event="fallback_used", level_index=2, skip=None))
    assert rec["level"] == "warn"
    assert rec["event"] == "fallback_used"
    assert rec["level_index"] == 2
    assert "skip" not in rec and "ts" in rec


def test_threshold_and_streams(capsys):
    logging_utils.configure(level="warn", json_mode=False)
    log = get_logger("test")
    log.debug(event="hidden")
    log.info(event="hidden")
    log.warn(event="shown")
    log.error(event="broken")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out
    assert "event=shown" in captured.out and "logger=test" in captured.out
    assert "event=broken" in captured.err
    assert "broken" not in captured.out


def test_logger_cache():
    assert get_logger("generator") is get_logger("generator")
    assert get_logger("a") is not get_logger("b")


def test_configure_rejects_unknown_level():
    with pytest.raises(ValueError):
        logging_utils.configure(level="loud")

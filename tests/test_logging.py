import io
import json
import logging

import pytest

from fars.utils.logging import JsonFormatter, configure_logging


@pytest.fixture
def fars_logger():
    logger = logging.getLogger("fars")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_json_formatter_merges_extra():
    record = logging.LogRecord(
        "fars.data.years", logging.WARNING, __file__, 1,
        "invalid year: %s", (9999,), None,
    )
    record.year = "9999"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "fars.data.years"
    assert payload["msg"] == "invalid year: 9999"
    assert payload["year"] == "9999"
    assert "args" not in payload


def test_configure_logging_does_not_stack_handlers(fars_logger):
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)
    configure_logging("INFO", json_output=True, stream=stream)

    ours = [h for h in fars_logger.handlers if getattr(h, "_fars_handler", False)]
    assert len(ours) == 1

    logging.getLogger("fars.reports").info("hello")
    assert json.loads(stream.getvalue().strip())["msg"] == "hello"

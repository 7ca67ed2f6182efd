import io
import json
import logging

import pytest
import structlog

from gmgn.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture
def restore_logging():
    gmgn_logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(gmgn_logger.handlers), gmgn_logger.level, gmgn_logger.propagate
    yield
    gmgn_logger.handlers[:] = handlers
    gmgn_logger.setLevel(level)
    gmgn_logger.propagate = propagate
    structlog.reset_defaults()


def test_setup_logging_only_touches_gmgn_logger(restore_logging):
    root_level = logging.getLogger().level

    gmgn_logger = setup_logging("warning")

    assert gmgn_logger.name == "gmgn"
    assert gmgn_logger.level == logging.WARNING
    assert len(gmgn_logger.handlers) == 1
    assert gmgn_logger.propagate is False
    assert isinstance(gmgn_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert logging.getLogger().level == root_level


def test_setup_logging_is_idempotent(restore_logging):
    setup_logging("info")
    gmgn_logger = setup_logging("info")
    assert len(gmgn_logger.handlers) == 1


def test_setup_logging_unknown_level_falls_back_to_info(restore_logging):
    assert setup_logging("chatty").level == logging.INFO


def test_setup_logging_writes_json_lines(restore_logging):
    stream = io.StringIO()
    setup_logging("info", stream=stream)

    structlog.stdlib.get_logger("gmgn.test").info("gmgn_request", method="GET")

    line = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert line["event"] == "gmgn_request"
    assert line["method"] == "GET"
    assert line["level"] == "info"
    assert line["logger"] == "gmgn.test"

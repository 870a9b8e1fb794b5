"""Tests for the package logger."""

import logging
import sys
from io import StringIO

import pytest

from mcflow.logging import (
    LOG_FORMAT,
    ROOT_LOGGER_NAME,
    get_logger,
    reset_logging,
    set_global_log_level,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_debug_records_follow_global_level():
    """INFO by default, DEBUG after raising verbosity, back to INFO afterwards."""
    logger = get_logger("mcflow.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    set_global_log_level(logging.DEBUG)
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    set_global_log_level(logging.INFO)
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    """Changing global level updates effective level of existing and new child loggers."""
    logger1 = get_logger("mcflow.algorithms.max_flow")
    logger2 = get_logger("mcflow.algorithms.min_cost_flow")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("mcflow.loader")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_single_handler_after_repeated_calls():
    get_logger("mcflow.a")
    get_logger("mcflow.b")
    set_global_log_level(logging.ERROR)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.ERROR
    assert root_logger.handlers[0].level == logging.ERROR


def test_default_handler_writes_to_stderr():
    """Solver output owns stdout, so the handler targets stderr."""
    get_logger("mcflow.test")
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1
    assert root_logger.handlers[0].stream is sys.stderr
    assert root_logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_reset_drops_handler():
    get_logger("mcflow.test")
    reset_logging()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.handlers == []
    assert root_logger.level == logging.NOTSET


def test_solver_logs_through_package_logger(caplog, square1):
    """Algorithm modules log under the mcflow hierarchy."""
    from mcflow.algorithms.min_cost_flow import cycle_canceling

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        cycle_canceling(square1)

    names = {record.name for record in caplog.records}
    assert "mcflow.algorithms.max_flow" in names
    assert "mcflow.algorithms.min_cost_flow" in names
    assert "mcflow.algorithms.residual" in names

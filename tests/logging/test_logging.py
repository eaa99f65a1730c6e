"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from graphengine.algorithms.spf import bellman_ford, dijkstra
from graphengine.graph.store import Graph
from graphengine.logging import (
    ROOT_LOGGER_NAME,
    algorithm_span,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


def _capture(logger: logging.Logger) -> StringIO:
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)
    return capture


def test_debug_toggles_effective_level():
    logger = get_logger("graphengine.test")
    capture = _capture(logger)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_global_level_reaches_existing_and_new_children():
    first = get_logger("graphengine.one")
    assert first.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert first.getEffectiveLevel() == logging.WARNING
    assert get_logger("graphengine.two").getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(StringIO()))
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_custom_format_string():
    capture = StringIO()
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(handler=logging.StreamHandler(capture), format_string=fmt)

    get_logger("graphengine.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:graphengine.test.format" in out
    assert "MSG:hello" in out


class TestAlgorithmSpan:
    def test_silent_below_debug(self):
        logger = get_logger("graphengine.test.span")
        capture = _capture(logger)
        with algorithm_span(logger, "walk", vertices=3) as stats:
            stats["visited"] = 3
        assert capture.getvalue() == ""

    def test_reports_inputs_and_counters(self):
        logger = get_logger("graphengine.test.span")
        capture = _capture(logger)
        enable_debug_logging()
        with algorithm_span(logger, "walk", vertices=3) as stats:
            stats["visited"] = 2
        out = capture.getvalue()
        assert "walk start: vertices=3" in out
        assert "walk done in" in out
        assert "visited=2" in out

    def test_closes_on_error(self):
        logger = get_logger("graphengine.test.span")
        capture = _capture(logger)
        enable_debug_logging()
        with pytest.raises(RuntimeError):
            with algorithm_span(logger, "walk"):
                raise RuntimeError("boom")
        assert "walk done in" in capture.getvalue()

    def test_algorithms_emit_debug_records(self, caplog, dijkstra_graph):
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
        dijkstra(dijkstra_graph, "A")
        assert "dijkstra start" in caplog.text
        assert "settled=5" in caplog.text

    def test_negative_cycle_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
        g = Graph.from_edges([("A", "B", -1), ("B", "A", -1)], directed=True)
        assert bellman_ford(g, "A").has_negative_cycle
        assert "Negative cycle reachable from 'A'" in caplog.text

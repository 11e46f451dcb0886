"""Tests for logging utilities."""

import importlib
import logging
from io import StringIO

import pytest

import socialgraph.logging as logging_module
from socialgraph.graphs import WeightedGraph, kruskal_mst
from socialgraph.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "socialgraph.test_module"


def test_get_logger_keeps_package_names():
    """Test that module names inside the package are not prefixed twice."""
    assert get_logger("socialgraph.graphs.core").name == "socialgraph.graphs.core"
    assert get_logger().name == "socialgraph"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_output():
    """Test that configured loggers write to the given stream."""
    captured = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level=logging.INFO, stream=captured)
        logger.info("Test message")

        output = captured.getvalue()
        assert "Test message" in output
        assert "[INFO] socialgraph.test_module" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_engine_debug_logging():
    """Test that engines log at DEBUG level once enabled."""
    captured = StringIO()
    try:
        configure_logging(level="DEBUG", stream=captured)
        kruskal_mst(WeightedGraph(4, [(0, 1, 1)]))

        output = captured.getvalue()
        assert "Built graph with 4 vertices and 1 edges" in output
        assert "spanning forest of 1 edges" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_set_log_level():
    """Test setting log level on cached loggers."""
    logger = get_logger("test_module")
    try:
        set_log_level(logging.DEBUG)
        assert logger.level == logging.DEBUG
        set_log_level("error")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" error ", logging.ERROR),
        ("verbose", logging.WARNING),
        ("basic_format", logging.WARNING),
    ],
)
def test_level_from_env(monkeypatch, value, expected):
    """Test that SOCIALGRAPH_LOG_LEVEL maps names to levels, falling back to WARNING."""
    monkeypatch.setenv("SOCIALGRAPH_LOG_LEVEL", value)
    assert logging_module._level_from_env() == expected


def test_level_from_env_unset(monkeypatch):
    monkeypatch.delenv("SOCIALGRAPH_LOG_LEVEL", raising=False)
    assert logging_module._level_from_env() == logging.WARNING


def test_log_level_env_on_reload(monkeypatch):
    """Test that the level is read from the environment at import time."""
    cached = dict(logging_module._loggers)
    monkeypatch.setenv("SOCIALGRAPH_LOG_LEVEL", "debug")
    try:
        importlib.reload(logging_module)
        assert logging_module._DEFAULT_LEVEL == logging.DEBUG
        assert logging_module.get_logger("env_reload_module").level == logging.DEBUG
    finally:
        monkeypatch.undo()
        importlib.reload(logging_module)
        # Engine modules keep the loggers created before the reload
        logging_module._loggers.update(cached)

"""Tests for log level resolution."""

import logging

import pytest

from cargo_with.console import resolve_log_level


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity(verbosity, level) -> None:
    assert resolve_log_level(verbosity) == level


def test_env_value_wins() -> None:
    assert resolve_log_level(0, "debug") == logging.DEBUG
    assert resolve_log_level(2, " error ") == logging.ERROR


def test_unknown_env_value_is_ignored() -> None:
    assert resolve_log_level(1, "chatty") == logging.INFO

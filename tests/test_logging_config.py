"""Tests for logging setup."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from generate_summary.utils.logging_config import configure_logging, get_logger


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("generate_summary")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_sets_level_and_single_handler(package_logger: logging.Logger) -> None:
    configure_logging("debug")
    configure_logging("DEBUG")

    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_unknown_level_falls_back_to_warning(package_logger: logging.Logger) -> None:
    configure_logging("LOUD")

    assert package_logger.level == logging.WARNING


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("generate_summary.builder").name == "generate_summary.builder"

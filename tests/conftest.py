"""Shared fixtures for the argsuggest test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_argsuggest_logger() -> Iterator[None]:
    """Undo configure_logging so caplog sees argsuggest records in every test."""
    yield
    logger = logging.getLogger("argsuggest")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

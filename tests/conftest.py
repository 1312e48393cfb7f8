"""Shared test fixtures for sheetaddr."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from loguru import logger

from sheetaddr.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear cached settings and any SHEETADDR_ overrides around each test."""
    monkeypatch.delenv("SHEETADDR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SHEETADDR_JSON_LOGS", raising=False)
    monkeypatch.delenv("SHEETADDR_DEFAULT_DELIMITER", raising=False)
    monkeypatch.delenv("SHEETADDR_STATS_PRECISION", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop sinks added by configure_logging() so they don't outlive capsys."""
    yield
    logger.remove()
    logger.disable("sheetaddr")
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)


@pytest.fixture
def sales_rows() -> list[list[str]]:
    """A small table as returned by a values.get call on A1:C5."""
    return [
        ["Region", "Units", "Revenue"],
        ["North", "5", "120.50"],
        ["south", "15", "80"],
        ["East", "25", "300"],
        ["West", "n/a", ""],
    ]

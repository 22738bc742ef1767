# topmark:header:start
#
#   project      : JDocFmt
#   file         : test_logging_env.py
#   file_relpath : tests/config/test_logging_env.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the JDOCFMT_LOG_LEVEL environment override and the TRACE level."""

from __future__ import annotations

import logging

import pytest

from tests.conftest import parametrize
from jdocfmt.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    JdocfmtLogger,
    get_logger,
    resolve_env_log_level,
)


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Info ", logging.INFO),
        ("WARN", logging.WARNING),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_unset_env_gives_none() -> None:
    # The autouse fixture in tests/conftest.py removes the variable.
    assert resolve_env_log_level() is None


def test_trace_level_is_named() -> None:
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger: JdocfmtLogger = get_logger("jdocfmt.tests.trace")
    assert isinstance(logger, JdocfmtLogger)

    with caplog.at_level(TRACE_LEVEL):
        logger.trace("detail %d", 42)

    assert [r.levelno for r in caplog.records] == [TRACE_LEVEL]
    assert caplog.records[0].getMessage() == "detail 42"

# topmark:header:start
#
#   project      : JDocFmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the JDocFmt test suite.

Sets up typed marker helpers, TRACE-level logging for test runs, and makes
sure a developer's ``JDOCFMT_LOG_LEVEL`` does not leak into tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from jdocfmt.config import logging

F = TypeVar("F", bound=Callable[..., object])

# A decorator taking a callable (F) and returning the same callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_javadoc: DecoratorType[Any] = as_typed_mark(pytest.mark.javadoc)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def javadoc(*lines: str, indent: int = 0) -> str:
    """Build a multi-line Javadoc comment the way the writer lays it out.

    Args:
        *lines (str): Content lines; an empty string produces a blank `` *`` line.
        indent (int): Block indentation of the comment.

    Returns:
        str: ``/**``, one `` * <line>`` per content line, then `` */``.
    """
    gutter: str = " " * (indent + 1) + "*"
    body: list[str] = [f"{gutter} {line}" if line else gutter for line in lines]
    return "\n".join(["/**", *body, f"{gutter}/"])


@pytest.fixture(autouse=True)
def silence_jdocfmt_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures come with full diagnostics.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)

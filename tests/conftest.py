"""Pytest configuration and shared test doubles."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallRecorder:
    """Callable stub that records every call and returns a fixed value.

    Use it wherever a test needs to prove a callback ran exactly 0 or 1 times.
    """

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@dataclass
class RecordingLogger:
    """Logger double exposing leveled methods and capturing each record."""

    records: list[tuple[str, str, dict[str, Any]]] = field(default_factory=list)

    def _record(self, level: str, msg: str, kwargs: dict[str, Any]) -> None:
        self.records.append((level, msg, kwargs.get("extra", {})))

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", msg, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("info", msg, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("warning", msg, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("error", msg, kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._record("critical", msg, kwargs)


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def fallible_logger() -> logging.Logger:
    """A real stdlib logger that propagates to ``caplog``."""
    logger = logging.getLogger("fallible.tests")
    logger.setLevel(logging.DEBUG)
    logger.propagate = True
    return logger

"""Failure logging through an injected logger.

The core result types never log. This module builds callbacks for
``Result.on_failure`` that write to a logger the caller supplies:

    result.on_failure(log_failure(logger))
    policy = FailureLogPolicy(status=404, level="warning")
    result.on_failure(log_failure(logger, policy))
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

from fallible.errors import ConfigurationError
from fallible.status import status_of

if TYPE_CHECKING:
    from collections.abc import Callable

LogLevel = Literal["debug", "info", "warning", "error", "critical"]

_LEVELS: dict[LogLevel, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Errors without a status attribute are treated as internal failures.
_DEFAULT_STATUS = 500


@runtime_checkable
class SupportsLogging(Protocol):
    """Leveled text logging, as offered by ``logging.Logger``."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@dataclass(frozen=True)
class FailureLogPolicy:
    """Which failures to log, and how.

    ``status=None`` logs every failure. ``message`` replaces the error text
    in the log line when set.
    """

    status: int | None = _DEFAULT_STATUS
    message: str | None = None
    level: LogLevel = "error"

    def __post_init__(self) -> None:
        """Validate fields so a bad policy fails at construction."""
        if self.level not in _LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.level!r}",
                hint=f"Use one of: {', '.join(_LEVELS)}",
            )
        if self.status is not None and (
            isinstance(self.status, bool)
            or not isinstance(self.status, int)
            or not 100 <= self.status <= 599
        ):
            raise ConfigurationError(
                f"status must be an HTTP-style code in 100..599, got {self.status!r}",
                hint="Pass status=None to log failures of any status.",
            )
        if self.message is not None and not self.message.strip():
            raise ConfigurationError(
                "message override must not be blank",
                hint="Omit message to log the error text itself.",
            )

    def matches(self, error: object) -> bool:
        if self.status is None:
            return True
        return status_of(error, _DEFAULT_STATUS) == self.status


def log_failure(
    logger: SupportsLogging,
    policy: FailureLogPolicy | None = None,
) -> Callable[[Exception], None]:
    """Return an ``on_failure`` callback that logs matching errors.

    Args:
        logger: Destination logger; any object with leveled methods works.
        policy: Filter and formatting options. Defaults to logging 500s at
            ``error`` level.
    """
    if not isinstance(logger, SupportsLogging):
        raise ConfigurationError(
            f"logger must expose leveled logging methods, got {type(logger).__name__}",
            hint="Pass a logging.Logger, e.g. logging.getLogger(__name__).",
        )
    active = policy or FailureLogPolicy()
    emit = getattr(logger, active.level)

    def _log(error: Exception) -> None:
        if not active.matches(error):
            return
        emit(
            active.message or str(error),
            extra={
                "status": status_of(error, _DEFAULT_STATUS),
                "details": getattr(error, "details", None),
            },
        )

    return _log


__all__ = ["FailureLogPolicy", "LogLevel", "SupportsLogging", "log_failure"]

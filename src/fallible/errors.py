"""Exception hierarchy for fallible.

Expected failures travel inside ``Failure``; the exceptions here are raised
only for misuse, such as unwrapping the wrong state or building an invalid
policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fallible.result import Result


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConfigurationError(FallibleError):
    """A policy or option failed validation."""


class UnwrapError(FallibleError):
    """A checked accessor was used on the wrong state.

    The offending result is kept on ``result`` so handlers can still inspect
    it; when unwrapping a ``Failure`` the wrapped error is also chained as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        result: Result[Any, Any],
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.result = result

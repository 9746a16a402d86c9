"""Status-bearing errors for results that model request outcomes."""

from __future__ import annotations

from fallible.errors import FallibleError

_NOT_FOUND = 404
_BAD_REQUEST = 400
_FORBIDDEN = 403
_INTERNAL = 500


class StatusError(FallibleError):
    """An error with a numeric status code and optional details.

    Example:
        failure(StatusError.not_found("user 42").with_details("deleted"))
    """

    def __init__(
        self,
        message: str,
        status: int,
        details: str | None = None,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status = status
        self.details = details

    def __repr__(self) -> str:
        return (
            f"StatusError({self.message!r}, status={self.status}, "
            f"details={self.details!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatusError):
            return NotImplemented
        return (self.message, self.status, self.details) == (
            other.message,
            other.status,
            other.details,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.status, self.details))

    @classmethod
    def not_found(cls, message: str = "Not Found") -> StatusError:
        return cls(message, _NOT_FOUND)

    @classmethod
    def bad_request(cls, message: str = "Bad Request") -> StatusError:
        return cls(message, _BAD_REQUEST)

    @classmethod
    def forbidden(cls, message: str = "Not Allowed") -> StatusError:
        return cls(message, _FORBIDDEN)

    @classmethod
    def internal(cls, message: str = "Internal Error") -> StatusError:
        return cls(message, _INTERNAL)

    def with_details(self, details: str) -> StatusError:
        """Return a copy carrying ``details``; the receiver is unchanged."""
        return type(self)(self.message, self.status, details, hint=self.hint)


def status_of(error: object, default: int | None = None) -> int | None:
    """Return the integer ``status`` attribute of ``error``, or ``default``."""
    status = getattr(error, "status", None)
    if isinstance(status, int) and not isinstance(status, bool):
        return status
    return default


__all__ = ["StatusError", "status_of"]

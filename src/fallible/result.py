"""Result type for explicit success/failure propagation.

A ``Result`` is either ``Success(value)`` or ``Failure(error)``. Both are
frozen dataclasses: operations never mutate a result, they return a new one
(or the receiver itself when nothing changes).

Usage:
    def find_user(user_id: int) -> Result[User, StatusError]:
        return from_nullable(users.get(user_id))(StatusError.not_found())

    message = (
        find_user(42)
        .map(lambda user: user.name)
        .fold(lambda name: f"hello {name}", lambda error: error.message)
    )

    match find_user(42):
        case Success(user):
            ...
        case Failure(error):
            ...

Exceptions raised by functions passed to any operation propagate to the
caller as-is; they are never turned into a ``Failure``.
"""

from __future__ import annotations

from collections.abc import Sequence, Sized
import dataclasses
from types import ModuleType
from typing import TYPE_CHECKING, Any, Literal, Never

from fallible.errors import UnwrapError
from fallible.status import status_of

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_TEXT_TYPES = (str, bytes, bytearray)
_NUMERIC_TYPES = (int, float, complex)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[V, E: Exception]:
    """A successful outcome wrapping ``value``."""

    value: V

    @property
    def error(self) -> None:
        """Always ``None``; a success carries no error."""
        return None

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False

    def unwrap(self) -> V:
        """Return the wrapped value."""
        return self.value

    def unwrap_or(self, default: object) -> V:
        del default
        return self.value

    def unwrap_error(self) -> Never:
        """Raise ``UnwrapError``: a success has no error to return."""
        raise UnwrapError(
            "Called unwrap_error() on a Success",
            result=self,
            hint="Check is_failure() first or use fold().",
        )

    def map[T](self, func: Callable[[V], T]) -> Success[T, E]:
        """Apply ``func`` to the value and wrap its output."""
        return Success(func(self.value))

    def map_error[F: Exception](self, func: Callable[[E], F]) -> Success[V, F]:
        del func
        return Success(self.value)

    def and_then[T](self, func: Callable[[V], Result[T, E]]) -> Result[T, E]:
        """Chain a function that itself returns a result."""
        return func(self.value)

    def fold[R, L](
        self, on_success: Callable[[V], R], on_failure: Callable[[E], L]
    ) -> R | L:
        """Collapse into ``on_success(value)``."""
        del on_failure
        return on_success(self.value)

    def fail_if(self, predicate: Callable[[V], bool], error: E) -> Result[V, E]:
        """Turn into ``Failure(error)`` when ``predicate(value)`` holds."""
        if predicate(self.value):
            return Failure(error)
        return self

    def recover_with(
        self,
        fallback: V,
        when: Callable[[E], bool] | None = None,
        *,
        status: int | Iterable[int] | None = None,
    ) -> Success[V, E]:
        del fallback, when, status
        return self

    def on_success(self, func: Callable[[V], object]) -> Success[V, E]:
        """Call ``func(value)`` for its side effect and return ``self``.

        Fires for every success, including falsy values such as ``0`` or ``""``.
        """
        func(self.value)
        return self

    def on_failure(self, func: Callable[[E], object]) -> Success[V, E]:
        del func
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[V, E: Exception]:
    """A failed outcome wrapping ``error``."""

    error: E

    @property
    def value(self) -> None:
        """Placeholder that is always ``None``.

        A failure has no value. Check ``is_success()`` first, or use
        ``unwrap()``/``unwrap_or()`` when a checked read is wanted.
        """
        return None

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def unwrap(self) -> Never:
        """Raise ``UnwrapError`` chained from the wrapped error."""
        raise UnwrapError(
            f"Called unwrap() on a Failure: {self.error}",
            result=self,
            hint="Check is_success() first, or use unwrap_or() or fold().",
        ) from self.error

    def unwrap_or[D](self, default: D) -> D:
        return default

    def unwrap_error(self) -> E:
        """Return the wrapped error."""
        return self.error

    def map[T](self, func: Callable[[V], T]) -> Failure[T, E]:
        """Propagate the error; ``func`` is not called."""
        del func
        return Failure(self.error)

    def map_error[F: Exception](self, func: Callable[[E], F]) -> Failure[V, F]:
        """Apply ``func`` to the error and wrap its output."""
        return Failure(func(self.error))

    def and_then[T](self, func: Callable[[V], Result[T, E]]) -> Failure[T, E]:
        del func
        return Failure(self.error)

    def fold[R, L](
        self, on_success: Callable[[V], R], on_failure: Callable[[E], L]
    ) -> R | L:
        """Collapse into ``on_failure(error)``."""
        del on_success
        return on_failure(self.error)

    def fail_if(self, predicate: Callable[[V], bool], error: E) -> Failure[V, E]:
        del predicate, error
        return self

    def recover_with(
        self,
        fallback: V,
        when: Callable[[E], bool] | None = None,
        *,
        status: int | Iterable[int] | None = None,
    ) -> Result[V, E]:
        """Replace this failure with ``Success(fallback)``.

        Without ``when`` or ``status`` the replacement is unconditional.
        ``when`` is a predicate on the error; ``status`` is a status code (or
        several) compared with the error's ``status`` attribute. When both
        are given, both must match. A non-matching failure is returned as-is.
        """
        if status is not None and not _status_matches(self.error, status):
            return self
        if when is not None and not when(self.error):
            return self
        return Success(fallback)

    def on_success(self, func: Callable[[V], object]) -> Failure[V, E]:
        del func
        return self

    def on_failure(self, func: Callable[[E], object]) -> Failure[V, E]:
        """Call ``func(error)`` for its side effect and return ``self``."""
        func(self.error)
        return self


type Result[V, E: Exception] = Success[V, E] | Failure[V, E]


def success[V](value: V) -> Success[V, Any]:
    """Wrap ``value`` as a success. No validation: ``success(None)`` is valid."""
    return Success(value)


def failure[E: Exception](error: E) -> Failure[Any, E]:
    """Wrap ``error`` as a failure."""
    return Failure(error)


def from_nullable[V, E: Exception](
    data: V | None,
    *,
    empty: Callable[[object], bool] | None = None,
) -> Callable[[E], Result[V, E]]:
    """Lift a possibly-empty value into a result.

    Returns a function that takes the error to use when ``data`` is empty.
    Emptiness follows ``is_empty`` unless another predicate is passed as
    ``empty``.

    Example:
        from_nullable(rows)(StatusError.not_found("no rows"))
        from_nullable(value, empty=lambda v: v is None)(error)
    """
    is_missing = (empty or is_empty)(data)

    def with_error(error: E) -> Result[V, E]:
        if is_missing:
            return Failure(error)
        return Success(data)  # type: ignore[arg-type]

    return with_error


def is_empty(data: object) -> bool:
    """Return True for values ``from_nullable`` treats as missing.

    Checked in order: ``None``; an empty sequence; an empty keyed or
    structural value (empty mapping or set, a dataclass without fields, an
    object with no instance attributes and no slot set, a bare ``object()``).
    Text, bytes and numbers are primitives and never empty, so ``""`` and
    ``0`` are kept as values.
    """
    if data is None:
        return True
    if isinstance(data, _TEXT_TYPES):
        return False
    if isinstance(data, Sequence):
        return len(data) == 0
    return _is_structurally_empty(data)


def _is_structurally_empty(data: object) -> bool:
    if isinstance(data, (*_NUMERIC_TYPES, type, ModuleType)) or callable(data):
        return False
    if isinstance(data, Sized):
        return len(data) == 0
    if dataclasses.is_dataclass(data):
        return not dataclasses.fields(data)
    attrs = getattr(data, "__dict__", None)
    if isinstance(attrs, dict):
        return not attrs
    slots = _declared_slots(type(data))
    if slots is not None:
        return not any(hasattr(data, name) for name in slots)
    return type(data) is object


def _declared_slots(cls: type) -> list[str] | None:
    """Return attribute names of slots declared across the MRO.

    ``None`` means no class declares ``__slots__``; built-ins such as
    ``datetime`` fall in that case and are never treated as empty.
    """
    names: list[str] = []
    declared = False
    for klass in cls.__mro__:
        if klass is object or "__slots__" not in klass.__dict__:
            continue
        declared = True
        slots = klass.__dict__["__slots__"]
        for name in (slots,) if isinstance(slots, str) else slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                # private slots are stored under their mangled name
                names.append(f"_{klass.__name__.lstrip('_')}{name}")
            else:
                names.append(name)
    return names if declared else None


def _status_matches(error: object, status: int | Iterable[int]) -> bool:
    codes = _status_codes(status)
    actual = status_of(error)
    return actual is not None and actual in codes


def _status_codes(status: int | Iterable[int]) -> frozenset[int]:
    if isinstance(status, bool | str | bytes):
        raise TypeError(
            f"status must be an int or an iterable of ints, got {status!r}"
        )
    if isinstance(status, int):
        return frozenset((status,))
    codes = frozenset(status)
    for code in codes:
        if isinstance(code, bool) or not isinstance(code, int):
            raise TypeError(f"status codes must be ints, got {code!r}")
    return codes


__all__ = [
    "Failure",
    "Result",
    "Success",
    "failure",
    "from_nullable",
    "is_empty",
    "success",
]

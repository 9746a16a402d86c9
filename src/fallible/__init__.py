"""fallible: explicit success/failure values instead of exceptions.

Public API:
    - success(), failure(): Build a Result
    - from_nullable(): Lift a possibly-empty value into a Result
    - Success, Failure, Result: The result types
    - StatusError: Error carrying a numeric status code
    - log_failure(), FailureLogPolicy: Log failures through an injected logger
"""

from __future__ import annotations

from fallible.errors import ConfigurationError, FallibleError, UnwrapError
from fallible.logs import FailureLogPolicy, SupportsLogging, log_failure
from fallible.result import (
    Failure,
    Result,
    Success,
    failure,
    from_nullable,
    is_empty,
    success,
)
from fallible.status import StatusError, status_of

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "ConfigurationError",
    "Failure",
    "FailureLogPolicy",
    "FallibleError",
    "Result",
    "StatusError",
    "Success",
    "SupportsLogging",
    "UnwrapError",
    "failure",
    "from_nullable",
    "is_empty",
    "log_failure",
    "status_of",
    "success",
]

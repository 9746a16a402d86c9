from __future__ import annotations

import pytest

from fallible import FallibleError, StatusError, failure, status_of

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("factory", "status", "message"),
    [
        (StatusError.not_found, 404, "Not Found"),
        (StatusError.bad_request, 400, "Bad Request"),
        (StatusError.forbidden, 403, "Not Allowed"),
        (StatusError.internal, 500, "Internal Error"),
    ],
)
def test_named_constructors_use_default_messages(factory, status, message) -> None:
    err = factory()

    assert err.status == status
    assert err.message == message
    assert str(err) == message
    assert err.details is None


def test_named_constructor_accepts_custom_message() -> None:
    err = StatusError.not_found("user 42")

    assert err.message == "user 42"
    assert err.status == 404


def test_with_details_returns_copy() -> None:
    base = StatusError.bad_request("invalid body")

    detailed = base.with_details("field 'name' is required")

    assert detailed is not base
    assert detailed.details == "field 'name' is required"
    assert (detailed.message, detailed.status) == ("invalid body", 400)
    assert base.details is None


def test_status_error_is_a_fallible_error() -> None:
    err = StatusError("teapot", 418, hint="brew coffee elsewhere")

    assert isinstance(err, FallibleError)
    assert err.hint == "brew coffee elsewhere"
    with pytest.raises(StatusError):
        raise err


def test_equality_and_repr() -> None:
    assert StatusError.internal() == StatusError("Internal Error", 500)
    assert StatusError.internal() != StatusError.internal().with_details("db")
    assert len({StatusError.forbidden(), StatusError.forbidden()}) == 1
    assert repr(StatusError("gone", 410, "moved")) == (
        "StatusError('gone', status=410, details='moved')"
    )


def test_status_of() -> None:
    assert status_of(StatusError.forbidden()) == 403
    assert status_of(ValueError("x")) is None
    assert status_of(ValueError("x"), 500) == 500


def test_status_error_as_failure_payload() -> None:
    result = failure(StatusError.not_found()).map_error(
        lambda e: e.with_details("looked in cache")
    )

    assert result.error.details == "looked in cache"

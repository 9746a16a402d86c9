from __future__ import annotations

import pytest

from fallible import ConfigurationError, FallibleError, UnwrapError, failure

pytestmark = pytest.mark.unit


def test_fallible_error_carries_message_and_hint() -> None:
    err = FallibleError("boom", hint="do this")

    assert str(err) == "boom"
    assert err.message == "boom"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    assert FallibleError("fail").hint is None


def test_subclass_hierarchy() -> None:
    result = failure(ValueError("x"))
    unwrap_err = UnwrapError("bad unwrap", result=result)

    assert isinstance(unwrap_err, FallibleError)
    assert isinstance(ConfigurationError("bad config"), FallibleError)
    assert unwrap_err.result is result

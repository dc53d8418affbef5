from __future__ import annotations

import pytest

from verdict import failure, success
from verdict.errors import (
    ConfigurationError,
    ContractViolationError,
    EmptyAccessError,
    InvalidArgumentError,
    VerdictError,
)

pytestmark = pytest.mark.unit


def test_error_renders_hint_after_message() -> None:
    err = VerdictError("boom", hint="do this")

    assert str(err) == "boom. do this"
    assert err.hint == "do this"
    assert err.args == ("boom",)


def test_error_without_hint_is_just_the_message() -> None:
    err = InvalidArgumentError("fail")

    assert err.hint is None
    assert str(err) == "fail"


def test_subclass_hierarchy() -> None:
    """Contract violations are catchable by the matching builtin as well."""
    assert issubclass(EmptyAccessError, ContractViolationError)
    assert issubclass(EmptyAccessError, LookupError)
    assert issubclass(InvalidArgumentError, ContractViolationError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(ContractViolationError, VerdictError)
    assert issubclass(ConfigurationError, VerdictError)
    assert not issubclass(ConfigurationError, ContractViolationError)


def test_empty_access_carries_actionable_hint() -> None:
    with pytest.raises(EmptyAccessError) as on_failure:
        failure("e").get_result()
    with pytest.raises(EmptyAccessError) as on_success:
        success(1).get_error()

    assert "is_success()" in str(on_failure.value)
    assert "is_failure()" in str(on_success.value)

"""Validation tests: accumulation order, merge rules, and the Attempt bridge."""

from __future__ import annotations

import dataclasses

import pytest

from tests.helpers import Recorder, unreachable
from verdict import (
    Failure,
    InvalidArgumentError,
    Success,
    Validation,
    config_scope,
    invalid,
    merge_all,
    valid,
)

pytestmark = pytest.mark.unit


def test_valid_validation(recorder: Recorder) -> None:
    validation = valid("subject")

    assert validation.is_valid()
    assert not validation.is_invalid()
    assert validation.get_subject() == "subject"
    assert validation.get_errors() == ()
    assert validation.if_invalid(unreachable) is validation
    assert validation.if_valid(recorder) is validation
    assert recorder.calls == [("subject",)]
    assert validation.to_attempt() == Success("subject")


def test_invalid_validation(recorder: Recorder) -> None:
    validation = invalid("subject", 0, 1)

    assert validation.is_invalid()
    assert not validation.is_valid()
    assert validation.get_errors() == (0, 1)
    assert validation.if_valid(unreachable) is validation
    validation.if_invalid(recorder)
    assert recorder.calls == [("subject", (0, 1))]
    assert validation.to_attempt() == Failure((0, 1))


@pytest.mark.parametrize(
    "errors", [(None,), (0, None), (None, 1, 2)], ids=["only", "second", "first"]
)
def test_invalid_rejects_none_errors(errors: tuple[object, ...]) -> None:
    with pytest.raises(InvalidArgumentError, match="must not be None"):
        invalid("subject", *errors)


def test_errors_are_a_frozen_copy() -> None:
    """Mutating the sequence handed to the constructor changes nothing."""
    source = [1]
    validation = Validation("subject", source)
    source.append(2)

    assert validation.get_errors() == (1,)
    assert isinstance(validation.get_errors(), tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        validation.errors = (3,)  # type: ignore[misc]


def test_validate_accumulates_in_declaration_order() -> None:
    validation = (
        valid("subject")
        .validate(lambda s: s == "", 0)
        .validate(lambda n: n > 0, 1, field=len)
        .validate_with(lambda s: [2, 3])
        .validate_with(lambda c: [] if c == "s" else [4], field=lambda s: s[0])
    )

    assert validation == invalid("subject", 0, 2, 3)


def test_validate_keeps_checking_after_a_failure(recorder: Recorder) -> None:
    """Earlier errors never stop later checks from running."""

    def predicate(subject: str) -> bool:
        recorder(subject)
        return False

    validation = invalid("s", "first").validate(predicate, "second")

    assert recorder.calls == [("s",)]
    assert validation.get_errors() == ("first", "second")


def test_combinators_never_mutate_the_receiver() -> None:
    base = invalid("s", 1)

    base.validate(lambda _: False, 2)
    base.merge_errors([3])
    base.merge(invalid("t", 4))

    assert base.get_errors() == (1,)


def test_validate_requires_an_error_value() -> None:
    with pytest.raises(InvalidArgumentError, match="error: must not be None"):
        valid("s").validate(lambda _: True, None)


def test_validate_with_requires_an_iterable_result() -> None:
    with pytest.raises(InvalidArgumentError, match="rule"):
        valid("s").validate_with(lambda _: None)  # type: ignore[arg-type,return-value]


def test_merge_chains_every_source_in_order() -> None:
    validation = (
        invalid(12345, 0)
        .merge_with(lambda s: invalid(s, 1))
        .merge_with(lambda s: invalid(s, 2), field=str)
        .merge(Validation(0, [3]))
        .merge_errors([4])
    )

    assert validation == invalid(12345, 0, 1, 2, 3, 4)


def test_merge_with_a_valid_validation_is_a_no_op() -> None:
    validation = invalid("s", "a")

    assert validation.merge(valid("other")) is validation


def test_merge_into_a_valid_validation_keeps_own_subject() -> None:
    merged = valid("s").merge(invalid("other", "a", "b"))

    assert merged == invalid("s", "a", "b")


def test_merge_concatenates_two_invalid_validations() -> None:
    merged = invalid("s", "a").merge(invalid("s", "b"))

    assert merged.get_errors() == ("a", "b")


def test_merge_with_accepts_objects_defining_validate() -> None:
    class Rule:
        def validate(self, subject: str) -> Validation[str, str]:
            return invalid(subject, f"bad:{subject}")

    merged = valid("parent").merge_with(Rule(), field=str.upper)

    assert merged == invalid("parent", "bad:PARENT")


def test_merge_with_rejects_an_existing_validation() -> None:
    with pytest.raises(InvalidArgumentError, match="use merge"):
        valid("s").merge_with(invalid("s", 1))  # type: ignore[arg-type]


def test_merge_rejects_non_validations() -> None:
    with pytest.raises(InvalidArgumentError, match="other: must be a Validation"):
        valid("s").merge([1, 2])  # type: ignore[arg-type]


def test_merge_all_overrides_subject_and_concatenates() -> None:
    merged = merge_all(
        "subject",
        iter([valid("subject"), invalid(1, 0, 1), invalid(None, 2, 3)]),
    )

    assert merged == invalid("subject", 0, 1, 2, 3)
    assert merge_all("subject", []) == valid("subject")


def test_flat_map_replaces_the_whole_validation() -> None:
    outcome = (
        valid("subject")
        .if_invalid(unreachable)
        .flat_map(lambda v: invalid(v.get_subject(), 0))
        .if_valid(unreachable)
    )

    assert outcome == invalid("subject", 0)


def test_to_attempt_keeps_every_error() -> None:
    failed = valid("").validate(bool, "e1").merge_errors(["e2"])
    passed = valid("s").validate(bool, "e1")

    assert failed.to_attempt() == Failure(("e1", "e2"))
    assert passed.to_attempt() == Success("s")


def test_subject_may_be_none() -> None:
    validation = valid(None).validate(lambda s: s is not None, "missing")

    assert validation == invalid(None, "missing")


def test_dev_validate_rejects_rules_returning_plain_values() -> None:
    with (
        config_scope(dev_validate=True),
        pytest.raises(InvalidArgumentError, match="validator: must return Validation"),
    ):
        valid("s").merge_with(lambda s: [s])  # type: ignore[arg-type,return-value]


@pytest.mark.parametrize("lone", ["too short", b"raw"], ids=["str", "bytes"])
def test_a_lone_string_is_not_a_sequence_of_errors(lone: str | bytes) -> None:
    """A rule returning one string must not be split into characters."""
    with pytest.raises(
        InvalidArgumentError, match="rule: must be an iterable of errors"
    ):
        valid("s").validate_with(lambda _: lone)  # type: ignore[arg-type,return-value]
    with pytest.raises(InvalidArgumentError, match="errors: must be an iterable"):
        valid("s").merge_errors(lone)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="errors: must be an iterable"):
        Validation("s", lone)  # type: ignore[arg-type]


def test_validate_with_rejects_non_iterable_results() -> None:
    with pytest.raises(InvalidArgumentError, match="got int"):
        valid("s").validate_with(lambda _: 3)  # type: ignore[arg-type,return-value]


def test_merge_all_rejects_non_validations() -> None:
    with pytest.raises(
        InvalidArgumentError, match=r"validations\[1\]: must be a Validation"
    ):
        merge_all("s", [valid("s"), ["e"]])  # type: ignore[list-item]

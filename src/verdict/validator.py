"""Reusable validation rules.

A ``Validator`` wraps a function ``subject -> Validation`` so that rules can
be named, stored, and combined. Every validator runs all of its rules: a
rule failure is an accumulated error, never a raised exception.
"""

from __future__ import annotations

import dataclasses
import typing

from verdict._validation import _require_callable, _require_not_none
from verdict.validation import (
    SupportsValidate,
    Validation,
    _require_validator,
    _run,
    invalid,
    merge_all,
    valid,
)

if typing.TYPE_CHECKING:
    from collections.abc import Callable

type ValidatorLike[S, E] = (
    Callable[[S], Validation[typing.Any, E]] | SupportsValidate[S, E]
)


@dataclasses.dataclass(frozen=True, slots=True)
class Validator[S, E]:
    """A named, composable validation rule.

    Example:
        not_blank = Validator.ensuring_predicate(lambda s: s.strip() != "", "blank")
        short = Validator.ensuring_predicate(lambda s: len(s) < 10, "too long")
        username = Validator.validating_all(not_blank, short)
        username.validate("   ").get_errors()  # ("blank",)
    """

    rule: Callable[[S], Validation[S, E]]

    def __post_init__(self) -> None:
        """Reject a missing or non-callable rule at construction."""
        _require_callable(self.rule, "rule")

    def validate(self, subject: S) -> Validation[S, E]:
        """Apply the rule to ``subject``."""
        return _run(self.rule, subject, "rule")

    def __call__(self, subject: S) -> Validation[S, E]:
        return self.validate(subject)

    @staticmethod
    def ensuring_predicate[T, X](
        predicate: Callable[[T], bool], error: X
    ) -> Validator[T, X]:
        """Build a validator reporting ``error`` when ``predicate`` is false."""
        _require_callable(predicate, "predicate")
        _require_not_none(error, "error")

        def rule(subject: T) -> Validation[T, X]:
            return valid(subject) if predicate(subject) else invalid(subject, error)

        return Validator(rule)

    @staticmethod
    def validating_all[T, X](*validators: ValidatorLike[T, X]) -> Validator[T, X]:
        """Build a validator running every given one, in listing order.

        No validator is skipped, even after an earlier one reported errors;
        the errors are concatenated in the same order.
        """
        for idx, validator in enumerate(validators):
            _require_validator(validator, f"validators[{idx}]")
        rules = tuple(validators)

        def rule(subject: T) -> Validation[T, X]:
            return merge_all(subject, (_run(v, subject) for v in rules))

        return Validator(rule)

    @staticmethod
    def validating_field[T, F, X](
        field: Callable[[T], F], validator: ValidatorLike[F, X]
    ) -> Validator[T, X]:
        """Build a validator of a parent from a validator of one of its fields.

        The field's errors are reported against the parent subject.
        """
        _require_callable(field, "field")
        _require_validator(validator, "validator")

        def rule(subject: T) -> Validation[T, X]:
            return valid(subject).merge_with(validator, field=field)

        return Validator(rule)

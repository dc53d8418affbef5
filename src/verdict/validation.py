"""Error-accumulating validation container.

A ``Validation`` pairs a subject with the ordered errors reported against
it. Unlike ``Attempt`` it never short-circuits: every check runs and its
errors are appended after the ones already collected, so one pass reports
every violation. Instances are immutable; each combinator returns a new
``Validation`` (or ``self`` when nothing changes).
"""

from __future__ import annotations

import dataclasses
import typing

from verdict._validation import (
    _require,
    _require_callable,
    _require_errors,
    _require_instance,
    _require_not_none,
)
from verdict.attempts import Attempt, Failure, Success
from verdict.config import current_config

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterable


@typing.runtime_checkable
class SupportsValidate[S, E](typing.Protocol):
    """Anything exposing ``validate(subject) -> Validation``."""

    def validate(self, subject: S, /) -> Validation[S, E]: ...


@dataclasses.dataclass(frozen=True, slots=True)
class Validation[S, E]:
    """The subject of a validation and the errors reported against it.

    ``errors`` is always stored as a tuple; any iterable passed to the
    constructor is copied.
    """

    subject: S
    errors: tuple[E, ...] = ()

    def __post_init__(self) -> None:
        """Freeze the error sequence into a tuple."""
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", _require_errors(self.errors, "errors"))

    def is_valid(self) -> bool:
        return not self.errors

    def is_invalid(self) -> bool:
        return bool(self.errors)

    def get_subject(self) -> S:
        return self.subject

    def get_errors(self) -> tuple[E, ...]:
        return self.errors

    def if_valid(self, consumer: Callable[[S], object]) -> Validation[S, E]:
        """Call ``consumer`` with the subject when no error was reported."""
        _require_callable(consumer, "consumer")
        if self.is_valid():
            consumer(self.subject)
        return self

    def if_invalid(
        self, consumer: Callable[[S, tuple[E, ...]], object]
    ) -> Validation[S, E]:
        """Call ``consumer`` with the subject and errors when some were reported."""
        _require_callable(consumer, "consumer")
        if self.is_invalid():
            consumer(self.subject, self.errors)
        return self

    # --- Checks ---

    def validate[F](
        self,
        predicate: Callable[[F], bool],
        error: E,
        *,
        field: Callable[[S], F] | None = None,
    ) -> Validation[S, E]:
        """Append ``error`` if ``predicate`` rejects the subject.

        Args:
            predicate: Test applied to the subject, or to ``field(subject)``
                when ``field`` is given.
            error: Error reported when the test fails. Must not be None.
            field: Optional accessor projecting the subject onto the value
                that ``predicate`` tests.

        Returns:
            ``self`` when the test passes, otherwise a new ``Validation``
            with ``error`` appended after the existing errors.
        """
        _require_callable(predicate, "predicate")
        _require_not_none(error, "error")
        if predicate(self._project(field)):
            return self
        return self.merge_errors((error,))

    def validate_with[F](
        self,
        rule: Callable[[F], Iterable[E]],
        *,
        field: Callable[[S], F] | None = None,
    ) -> Validation[S, E]:
        """Append every error produced by ``rule``, in the order produced."""
        _require_callable(rule, "rule")
        return self.merge_errors(_require_errors(rule(self._project(field)), "rule"))

    # --- Merging ---

    def merge_with[F](
        self,
        validator: Callable[[F], Validation[typing.Any, E]] | SupportsValidate[F, E],
        *,
        field: Callable[[S], F] | None = None,
    ) -> Validation[S, E]:
        """Run another validator on the subject (or a field) and fold in its errors."""
        _require_validator(validator, "validator")
        return self.merge(_run(validator, self._project(field)))

    def merge(self, other: Validation[typing.Any, E]) -> Validation[S, E]:
        """Fold the errors of ``other`` into this validation.

        The subject of ``other`` is ignored. Errors of ``self`` come first,
        followed by those of ``other``, each in their original order.
        """
        _require(
            condition=isinstance(other, Validation),
            message=f"must be a Validation, got {type(other).__name__}",
            field_name="other",
        )
        if other.is_valid():
            return self
        if self.is_valid():
            return Validation(self.subject, other.errors)
        return self.merge_errors(other.errors)

    def merge_errors(self, errors: Iterable[E]) -> Validation[S, E]:
        """Append a literal sequence of errors."""
        extra = _require_errors(errors, "errors")
        if not extra:
            return self
        return Validation(self.subject, self.errors + extra)

    # --- Conversion ---

    def flat_map[SS, EE](
        self, mapper: Callable[[Validation[S, E]], Validation[SS, EE]]
    ) -> Validation[SS, EE]:
        """Apply ``mapper`` to this whole ``Validation``."""
        _require_callable(mapper, "mapper")
        return _checked(mapper(self), "mapper")

    def to_attempt(self) -> Attempt[S, tuple[E, ...]]:
        """Collapse into an ``Attempt``, keeping every accumulated error."""
        if self.is_valid():
            return Success(self.subject)
        return Failure(self.errors)

    def _project(self, field: Callable[[S], typing.Any] | None) -> typing.Any:
        if field is None:
            return self.subject
        _require_callable(field, "field")
        return field(self.subject)


def valid[S](subject: S) -> Validation[S, typing.Any]:
    """Return a ``Validation`` of ``subject`` with no errors."""
    return Validation(subject)


def invalid[S, E](subject: S, error: E, *errors: E) -> Validation[S, E]:
    """Return a ``Validation`` of ``subject`` reporting one or more errors.

    Raises:
        InvalidArgumentError: If any error is None.
    """
    reported = (error, *errors)
    _require(
        condition=all(e is not None for e in reported),
        message="errors must not be None",
        field_name="invalid",
    )
    return Validation(subject, reported)


def merge_all[S, E](
    subject: S, validations: Iterable[Validation[typing.Any, E]]
) -> Validation[S, E]:
    """Combine many validations into one about ``subject``.

    Errors are concatenated in iteration order; the subjects of the merged
    validations are discarded.
    """
    _require_not_none(validations, "validations")
    errors: list[E] = []
    for idx, v in enumerate(validations):
        _require(
            condition=isinstance(v, Validation),
            message=f"must be a Validation, got {type(v).__name__}",
            field_name=f"validations[{idx}]",
        )
        errors.extend(v.errors)
    return Validation(subject, tuple(errors))


def _require_validator(validator: object, field_name: str) -> None:
    """Accept callables and ``SupportsValidate`` objects, never a ``Validation``."""
    _require_not_none(validator, field_name)
    _require(
        condition=not isinstance(validator, Validation),
        message="got a Validation, use merge() to fold in an existing result",
        field_name=field_name,
    )
    _require(
        condition=callable(validator) or isinstance(validator, SupportsValidate),
        message=(
            "must be callable or define validate(), "
            f"got {type(validator).__name__}"
        ),
        field_name=field_name,
    )


def _run[F, E](
    validator: Callable[[F], Validation[typing.Any, E]] | SupportsValidate[F, E],
    subject: F,
    field_name: str = "validator",
) -> Validation[typing.Any, E]:
    _require_validator(validator, field_name)
    if callable(validator):
        return _checked(validator(subject), field_name)
    return _checked(validator.validate(subject), field_name)


def _checked[T](outcome: T, field_name: str) -> T:
    if current_config().dev_validate:
        _require_instance(outcome, Validation, field_name)
    return outcome

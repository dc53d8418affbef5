"""Fail-fast result container.

An ``Attempt`` holds exactly one of a result (``Success``) or an error
(``Failure``). Result-side combinators short-circuit on ``Failure`` and
error-side combinators short-circuit on ``Success``, so a chain stops doing
work as soon as its state no longer matches.

Both variants are frozen dataclasses and therefore support structural
pattern matching::

    match parse(text):
        case Success(value):
            ...
        case Failure(error):
            ...
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import final

from verdict._validation import (
    _require_callable,
    _require_exception_types,
    _require_instance,
)
from verdict.config import current_config
from verdict.errors import HINTS, ContractViolationError, EmptyAccessError

if typing.TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)


class Attempt[R, E]:
    """Either a result from a success or an error from a failure.

    The base is sealed: ``Success`` and ``Failure`` are its only variants,
    and subclassing it anywhere else raises ``TypeError``. Construct
    instances with ``success()``, ``failure()`` or ``attempt()``; annotate
    exhaustive matches with ``AttemptVariant``.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: typing.Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"{cls.__name__}: Attempt is sealed; use Success or Failure"
            )

    def is_success(self) -> bool:
        raise NotImplementedError

    def is_failure(self) -> bool:
        return not self.is_success()

    def get_result(self) -> R:
        """Return the result.

        Raises:
            EmptyAccessError: If this is a ``Failure``.
        """
        raise NotImplementedError

    def get_error(self) -> E:
        """Return the error.

        Raises:
            EmptyAccessError: If this is a ``Success``.
        """
        raise NotImplementedError

    # --- Side-effect hooks ---

    def if_success(self, consumer: Callable[[R], object]) -> Attempt[R, E]:
        """Call ``consumer`` with the result when successful; return ``self``."""
        _require_callable(consumer, "consumer")
        if self.is_success():
            consumer(self.get_result())
        return self

    def if_failure(self, consumer: Callable[[E], object]) -> Attempt[R, E]:
        """Call ``consumer`` with the error when failed; return ``self``."""
        _require_callable(consumer, "consumer")
        if self.is_failure():
            consumer(self.get_error())
        return self

    # --- Result side ---

    def transform_result[RR, IE](
        self,
        mapper: Callable[[R], Attempt[RR, typing.Any]],
        error_adapter: Callable[[IE], E] | None = None,
    ) -> Attempt[RR, E]:
        """Chain a step that may itself fail.

        Args:
            mapper: Called with the result of a ``Success``; its ``Attempt``
                becomes the new state. Not called on a ``Failure``.
            error_adapter: Optional conversion applied to the error of a
                failed ``mapper`` outcome, for steps whose error type differs
                from this chain's.

        Returns:
            ``self`` unchanged if this is a ``Failure``, otherwise the
            (adapted) outcome of ``mapper``.
        """
        _require_callable(mapper, "mapper")
        if error_adapter is not None:
            _require_callable(error_adapter, "error_adapter")
        if self.is_failure():
            return typing.cast("Attempt[RR, E]", self)
        outcome = _checked(mapper(self.get_result()), "mapper")
        if error_adapter is None:
            return outcome
        return outcome.map_error(error_adapter)

    def map_result[RR](self, mapper: Callable[[R], RR]) -> Attempt[RR, E]:
        """Apply ``mapper`` to the result of a ``Success``."""
        _require_callable(mapper, "mapper")
        return self.transform_result(lambda result: success(mapper(result)))

    # --- Error side ---

    def recover_error[EE, IR](
        self,
        mapper: Callable[[E], Attempt[typing.Any, EE]],
        result_adapter: Callable[[IR], R] | None = None,
    ) -> Attempt[R, EE]:
        """Chain a step that may recover from the error.

        Mirror of ``transform_result``: ``mapper`` only runs on a ``Failure``
        and ``result_adapter`` converts the result of a recovered outcome.
        """
        _require_callable(mapper, "mapper")
        if result_adapter is not None:
            _require_callable(result_adapter, "result_adapter")
        if self.is_success():
            return typing.cast("Attempt[R, EE]", self)
        outcome = _checked(mapper(self.get_error()), "mapper")
        if result_adapter is None:
            return outcome
        return outcome.map_result(result_adapter)

    def map_error[EE](self, mapper: Callable[[E], EE]) -> Attempt[R, EE]:
        """Apply ``mapper`` to the error of a ``Failure``."""
        _require_callable(mapper, "mapper")
        return self.recover_error(lambda error: failure(mapper(error)))

    # --- Whole container ---

    def transform[RR, EE](
        self,
        on_result: Callable[[R], Attempt[RR, EE]],
        on_failure: Callable[[E], Attempt[RR, EE]],
    ) -> Attempt[RR, EE]:
        """Run exactly one of the two branches and return its ``Attempt``."""
        _require_callable(on_result, "on_result")
        _require_callable(on_failure, "on_failure")
        if self.is_success():
            return _checked(on_result(self.get_result()), "on_result")
        return _checked(on_failure(self.get_error()), "on_failure")

    def flat_map[RR, EE](
        self, mapper: Callable[[Attempt[R, E]], Attempt[RR, EE]]
    ) -> Attempt[RR, EE]:
        """Apply ``mapper`` to this whole ``Attempt``, whatever its variant."""
        _require_callable(mapper, "mapper")
        return _checked(mapper(self), "mapper")


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Success[R, E](Attempt[R, E]):
    """A successful attempt holding its result."""

    result: R

    def is_success(self) -> bool:
        return True

    def get_result(self) -> R:
        return self.result

    def get_error(self) -> E:
        raise EmptyAccessError(
            "get_error() called on a Success", hint=HINTS["error_of_success"]
        )


@final
@dataclasses.dataclass(frozen=True, slots=True)
class Failure[R, E](Attempt[R, E]):
    """A failed attempt holding its error."""

    error: E

    def is_success(self) -> bool:
        return False

    def get_result(self) -> R:
        raise EmptyAccessError(
            "get_result() called on a Failure", hint=HINTS["result_of_failure"]
        )

    def get_error(self) -> E:
        return self.error


type AttemptVariant[R, E] = Success[R, E] | Failure[R, E]


def success[R](result: R) -> Attempt[R, typing.Any]:
    """Return a successful ``Attempt`` wrapping ``result``."""
    return Success(result)


def failure[E](error: E) -> Attempt[typing.Any, E]:
    """Return a failed ``Attempt`` wrapping ``error``."""
    return Failure(error)


def attempt[R](
    thunk: Callable[[], R],
    *,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> Attempt[R, BaseException]:
    """Run ``thunk`` and capture a raised exception as a ``Failure``.

    This is the single seam where raised exceptions enter the ``Attempt``
    model. Exceptions outside ``catch`` propagate, and so do contract
    violations (``ContractViolationError``) regardless of ``catch``.

    Example:
        attempt(lambda: int("42"))    # Success(result=42)
        attempt(lambda: int("four"))  # Failure(error=ValueError(...))
    """
    _require_callable(thunk, "thunk")
    captured = _require_exception_types(catch, "catch")
    try:
        value = thunk()
    except ContractViolationError:
        raise
    except captured as exc:
        log.debug(
            "attempt() captured %s: %s",
            type(exc).__name__,
            exc,
            exc_info=current_config().trace_faults,
        )
        return Failure(exc)
    return Success(value)


def _checked[T](outcome: T, field_name: str) -> T:
    if current_config().dev_validate:
        _require_instance(outcome, Attempt, field_name)
    return outcome

"""Internal argument checks shared by the combinator modules.

These helpers centralise contract checking so every combinator reports
misuse with the same exception type and message shape.
"""

from __future__ import annotations

from collections.abc import Iterable
import typing

from verdict.errors import HINTS, InvalidArgumentError

T = typing.TypeVar("T")


def _require(
    *,
    condition: bool,
    message: str,
    field_name: str | None = None,
    hint: str | None = None,
) -> None:
    """Raise ``InvalidArgumentError`` with optional field context."""
    if not condition:
        if field_name:
            raise InvalidArgumentError(f"{field_name}: {message}", hint=hint)
        raise InvalidArgumentError(message, hint=hint)


def _require_not_none(value: T | None, field_name: str) -> T:
    _require(
        condition=value is not None,
        message="must not be None",
        field_name=field_name,
    )
    return typing.cast("T", value)


def _require_callable(func: typing.Any, field_name: str) -> None:
    """Validate that ``func`` is present and callable."""
    _require_not_none(func, field_name)
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=field_name,
    )


def _require_instance(value: object, typ: type, field_name: str) -> None:
    """Check a callback's return type; only invoked when dev validation is on."""
    _require(
        condition=isinstance(value, typ),
        message=f"must return {typ.__name__}, got {type(value).__name__}",
        field_name=field_name,
        hint=HINTS["dev_validate"],
    )


def _is_tuple_of(value: object, typ: type | tuple[type, ...]) -> bool:
    return isinstance(value, tuple) and all(isinstance(v, typ) for v in value)


def _require_exception_types(
    catch: object, field_name: str
) -> tuple[type[BaseException], ...]:
    """Normalise an ``except``-style class or tuple of classes."""
    types = catch if isinstance(catch, tuple) else (catch,)
    _require(
        condition=bool(types)
        and _is_tuple_of(types, type)
        and all(issubclass(t, BaseException) for t in types),
        message="must be an exception class or a non-empty tuple of them",
        field_name=field_name,
    )
    return typing.cast("tuple[type[BaseException], ...]", types)


def _require_errors(errors: object, field_name: str) -> tuple[typing.Any, ...]:
    """Freeze an iterable of errors, refusing a lone string mistaken for one."""
    _require_not_none(errors, field_name)
    _require(
        condition=not isinstance(errors, (str, bytes)),
        message=f"must be an iterable of errors, not {type(errors).__name__}",
        field_name=field_name,
    )
    _require(
        condition=isinstance(errors, Iterable),
        message=f"must be an iterable of errors, got {type(errors).__name__}",
        field_name=field_name,
    )
    return tuple(typing.cast("Iterable[typing.Any]", errors))

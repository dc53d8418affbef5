"""Exception hierarchy for Verdict.

Business errors never travel through this hierarchy: they are carried as
payloads inside ``Failure`` and ``Validation``. The exceptions below signal
misuse of the combinators themselves and are meant to fail loudly.
"""

from __future__ import annotations


class VerdictError(Exception):
    """Base exception for all Verdict errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is attached."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ContractViolationError(VerdictError):
    """A programming contract of the combinator algebra was broken."""


class EmptyAccessError(ContractViolationError, LookupError):
    """The requested payload is not held by this variant."""


class InvalidArgumentError(ContractViolationError, ValueError):
    """An argument was missing, not callable, or of the wrong kind."""


class ConfigurationError(VerdictError):
    """Configuration validation or resolution failed."""


HINTS = {
    "result_of_failure": (
        "Check is_success() first, or use transform() to handle both variants"
    ),
    "error_of_success": (
        "Check is_failure() first, or use transform() to handle both variants"
    ),
    "dev_validate": (
        "Callbacks must return the container they are chained into; "
        "set VERDICT_DEV_VALIDATE=0 to disable this check"
    ),
}

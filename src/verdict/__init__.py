"""Verdict: composable error handling with Attempt and Validation.

Public API:
    - Attempt / Success / Failure: fail-fast result container (sealed;
      AttemptVariant is the closed union of its variants)
    - success(), failure(), attempt(): Attempt constructors
    - Validation, valid(), invalid(), merge_all(): error-accumulating container
    - Validator: reusable, composable validation rules
"""

from __future__ import annotations

import logging

from verdict.attempts import (
    Attempt,
    AttemptVariant,
    Failure,
    Success,
    attempt,
    failure,
    success,
)
from verdict.config import FrozenConfig, config_scope, resolve_config
from verdict.errors import (
    ConfigurationError,
    ContractViolationError,
    EmptyAccessError,
    InvalidArgumentError,
    VerdictError,
)
from verdict.validation import (
    SupportsValidate,
    Validation,
    invalid,
    merge_all,
    valid,
)
from verdict.validator import Validator

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("verdict")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("verdict").addHandler(logging.NullHandler())

__all__ = [
    "Attempt",
    "AttemptVariant",
    "ConfigurationError",
    "ContractViolationError",
    "EmptyAccessError",
    "Failure",
    "FrozenConfig",
    "InvalidArgumentError",
    "Success",
    "SupportsValidate",
    "Validation",
    "Validator",
    "VerdictError",
    "attempt",
    "config_scope",
    "failure",
    "invalid",
    "merge_all",
    "resolve_config",
    "success",
    "valid",
]

# src/verdict/config/core.py

"""Configuration schema and resolution for Verdict.

Resolve once, freeze, then read: the Pydantic ``Settings`` schema validates
the merged layers and the result is frozen into a ``FrozenConfig``. Hot paths
only ever call ``current_config()``, which is a contextvar lookup backed by a
cached process default.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from enum import Enum
from functools import cache
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from verdict.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)


# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic schema for configuration fields, defaults and validation."""

    model_config = ConfigDict(extra="forbid", strict=True)

    #: Check that callbacks return the container they are chained into.
    dev_validate: bool = Field(default=False)
    #: Attach tracebacks when ``attempt()`` logs a captured fault.
    trace_faults: bool = Field(default=False)


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


# --- Immutable runtime payload ---


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable, validated configuration read by the combinators."""

    dev_validate: bool = False
    trace_faults: bool = False


class Origin(str, Enum):
    """Source layer a configuration value came from."""

    DEFAULT = "default"
    PROJECT = "project"
    ENV = "env"
    OVERRIDES = "overrides"


SourceMap = dict[str, Origin]


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "verdict_ambient_config", default=None
)

_DOTENV_LOADED: bool = False


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


def resolve_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    explain: bool = False,
) -> FrozenConfig | tuple[FrozenConfig, SourceMap]:
    """Resolve configuration from all layers into a ``FrozenConfig``.

    Precedence: defaults < ``[tool.verdict]`` < ``VERDICT_*`` env < overrides.

    Args:
        overrides: Programmatic overrides (highest precedence).
        explain: If True, also return the origin of every field.

    Raises:
        ConfigurationError: If a layer holds an unknown key or a bad value.
    """
    _load_dotenv_once()
    frozen, sources = _resolve(overrides or {})
    return (frozen, sources) if explain else frozen


def _resolve(overrides: Mapping[str, Any]) -> tuple[FrozenConfig, SourceMap]:
    from .loaders import load_env, load_pyproject

    merged, sources = _resolve_layers(
        overrides=overrides,
        env=load_env(),
        project=load_pyproject(),
    )

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(part) for part in err.get("loc", ())) or "config"
        raise ConfigurationError(
            f"Configuration validation failed: {loc}: {err.get('msg')}",
            hint=f"Known fields: {', '.join(sorted(Settings.model_fields))}",
        ) from e

    frozen = FrozenConfig(**settings.model_dump())
    log.debug("Resolved %s from %s", frozen, {k: v.value for k, v in sources.items()})
    return frozen, sources


def _resolve_layers(
    *,
    overrides: Mapping[str, Any],
    env: Mapping[str, Any],
    project: Mapping[str, Any],
) -> tuple[dict[str, Any], SourceMap]:
    """Merge layers last-wins while recording where each value came from."""
    out: dict[str, Any] = dict(_default_settings())
    src: SourceMap = dict.fromkeys(out, Origin.DEFAULT)
    for origin, layer in (
        (Origin.PROJECT, project),
        (Origin.ENV, env),
        (Origin.OVERRIDES, overrides),
    ):
        for k, v in layer.items():
            out[k] = v
            src[k] = origin
    return out, src


@cache
def _default_config() -> FrozenConfig:
    # Reached from the combinators: never loads .env and never raises.
    try:
        return _resolve({})[0]
    except ConfigurationError as e:
        log.warning("Ignoring invalid verdict configuration: %s", e)
        return FrozenConfig()


def current_config() -> FrozenConfig:
    """Return the scoped configuration, or the cached process default.

    The default is resolved from ``[tool.verdict]`` and ``VERDICT_*`` only;
    ``.env`` files are read by ``resolve_config()`` and ``config_scope()``.
    An invalid default layer is logged and replaced by ``FrozenConfig()``.
    """
    return _AMBIENT.get() or _default_config()


def reset_config_cache() -> None:
    """Forget the cached process default so the next read re-resolves it."""
    _default_config.cache_clear()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration without touching global state.

    Example:
        with config_scope(dev_validate=True):
            success(1).transform_result(lambda r: r + 1)  # raises
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        _load_dotenv_once()
        cfg = _resolve({**(cfg_or_overrides or {}), **overrides})[0]
    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)

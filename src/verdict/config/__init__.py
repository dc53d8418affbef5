# src/verdict/config/__init__.py

"""Configuration management for Verdict.

Configuration is resolved once into an immutable ``FrozenConfig``; the
combinators read it through ``current_config()``.
"""

from .core import (
    FrozenConfig,
    Origin,
    Settings,
    SourceMap,
    config_scope,
    current_config,
    reset_config_cache,
    resolve_config,
)
from .loaders import load_env, load_pyproject

__all__ = [
    "FrozenConfig",
    "Origin",
    "Settings",
    "SourceMap",
    "config_scope",
    "current_config",
    "load_env",
    "load_pyproject",
    "reset_config_cache",
    "resolve_config",
]

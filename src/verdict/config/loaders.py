# src/verdict/config/loaders.py

"""Configuration loaders for environment and ``pyproject.toml``.

Each loader returns a plain dictionary; validation happens in the resolver.
"""

from __future__ import annotations

import os
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

CONFIG_TOOL_NAME = "verdict"
ENV_PREFIX = "VERDICT_"

# Control variables that steer resolution but aren't config fields
META_ENV_FIELDS = {"pyproject_path"}


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


def load_env() -> Mapping[str, Any]:
    """Load configuration from ``VERDICT_*`` environment variables.

    Only variables naming a schema field are read, so unrelated ``VERDICT_*``
    variables never break resolution. Boolean fields are coerced here.
    """
    from .core import Settings  # local import to keep loaders import-light

    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in META_ENV_FIELDS:
            continue
        info = Settings.model_fields.get(field_name)
        if info is None:
            continue
        config[field_name] = _coerce_bool(value) if info.annotation is bool else value
    return config


def get_pyproject_path() -> Path:
    """Return the ``pyproject.toml`` consulted for ``[tool.verdict]``."""
    override = os.environ.get(f"{ENV_PREFIX}PYPROJECT_PATH")
    return Path(override) if override else Path.cwd() / "pyproject.toml"


def load_pyproject(path: Path | None = None) -> Mapping[str, Any]:
    """Load the ``[tool.verdict]`` table, or an empty mapping when absent."""
    data = _read_toml(path or get_pyproject_path())
    section = data.get("tool", {}).get(CONFIG_TOOL_NAME, {})
    return dict(section) if isinstance(section, dict) else {}


def _read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file, returning an empty dict when missing or unparsable."""
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}

"""Test helpers (small, reusable doubles)."""

from __future__ import annotations

from typing import NoReturn

import pytest


def unreachable(*_args: object) -> NoReturn:
    """Callback for branches that must never run."""
    pytest.fail("callback should not have been called")


class Recorder:
    """Callback test double capturing every call's arguments."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, ...]] = []

    def __call__(self, *args: object) -> None:
        self.calls.append(args)

"""Shared test fixtures for macaudit tests."""

from __future__ import annotations

from typing import Callable

import pytest

from macaudit.collectors.base import CommandRunner
from macaudit.errors import DataUnavailable


class FakeRunner(CommandRunner):
    """Returns canned output per command line; anything else is unavailable."""

    def __init__(self, outputs: dict[str, str] | None = None) -> None:
        super().__init__(timeout=1.0)
        self.outputs = dict(outputs or {})
        self.calls: list[str] = []

    def run(self, command: list[str]) -> str:
        key = " ".join(command)
        self.calls.append(key)
        if key not in self.outputs:
            raise DataUnavailable(f"{command[0]}: no canned output")
        return self.outputs[key]


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    """Factory fixture: ``fake_runner({"sw_vers -productVersion": "15.1"})``."""
    return FakeRunner

"""Tests for macaudit.collectors.base: CommandRunner, parsing helpers, BaseCollector."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from macaudit.collectors.base import (
    BaseCollector,
    CommandRunner,
    lookup,
    parse_key_values,
    to_int,
)
from macaudit.errors import DataUnavailable
from macaudit.models import PowerState


def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> MagicMock:
    result = MagicMock()
    result.stdout = stdout
    result.stderr = stderr
    result.returncode = returncode
    return result


class TestCommandRunner:
    def test_returns_stripped_stdout(self):
        runner = CommandRunner(timeout=3)
        with patch("macaudit.collectors.base.subprocess.run", return_value=_completed("15.1\n")) as run:
            assert runner.run(["sw_vers", "-productVersion"]) == "15.1"
        assert run.call_args.kwargs["timeout"] == 3

    def test_missing_binary(self):
        with patch("macaudit.collectors.base.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(DataUnavailable, match="not found"):
                CommandRunner().run(["csrutil", "status"])

    def test_timeout(self):
        err = subprocess.TimeoutExpired(cmd="top", timeout=1)
        with patch("macaudit.collectors.base.subprocess.run", side_effect=err):
            with pytest.raises(DataUnavailable, match="timed out"):
                CommandRunner(timeout=1).run(["top", "-l", "1"])

    def test_nonzero_exit(self):
        with patch(
            "macaudit.collectors.base.subprocess.run",
            return_value=_completed("", returncode=1, stderr="does not exist"),
        ):
            with pytest.raises(DataUnavailable, match="exit status 1"):
                CommandRunner().run(["defaults", "read", "x", "y"])

    def test_empty_output(self):
        with patch("macaudit.collectors.base.subprocess.run", return_value=_completed("  \n")):
            with pytest.raises(DataUnavailable, match="no output"):
                CommandRunner().run(["profiles", "list"])

    def test_default_timeout_from_settings(self):
        from macaudit.config import settings
        assert CommandRunner().timeout == settings.command_timeout


class TestParsing:
    def test_parse_key_values(self):
        text = """
Hardware:

    Hardware Overview:

      Model Name: MacBook Pro
      Chip: Apple M1 Pro
      Serial Number (system): C02XYZ123
"""
        fields = parse_key_values(text)
        assert fields["Model Name"] == "MacBook Pro"
        assert fields["Chip"] == "Apple M1 Pro"
        assert "Hardware" not in fields  # header lines carry no value

    def test_first_occurrence_wins(self):
        fields = parse_key_values("Condition: Normal\nCondition: Other\n")
        assert fields["Condition"] == "Normal"

    def test_none_input(self):
        assert parse_key_values(None) == {}

    def test_lookup_by_prefix(self):
        fields = {"Serial Number (system)": "C02XYZ123"}
        assert lookup(fields, "Serial Number") == "C02XYZ123"
        assert lookup(fields, "Chip") is None

    @pytest.mark.parametrize(
        "value,expected",
        [("87%", 87), (" 312 ", 312), ("n/a", None), (None, None)],
    )
    def test_to_int(self, value, expected):
        assert to_int(value) == expected


class _StubCollector(BaseCollector):
    name = "stub"

    def collect(self) -> PowerState:
        return PowerState(condition=self.query("pmset", "-g"))


class TestBaseCollector:
    def test_query_returns_output(self, fake_runner):
        collector = _StubCollector(fake_runner({"pmset -g": "Normal"}))
        assert collector.collect().condition == "Normal"

    def test_failed_query_yields_none(self, fake_runner):
        collector = _StubCollector(fake_runner())
        assert collector.collect().condition is None

    def test_read_default(self, fake_runner):
        runner = fake_runner({"defaults read com.apple.screensaver askForPassword": "1"})
        collector = _StubCollector(runner)
        assert collector.read_default("com.apple.screensaver", "askForPassword") == "1"
        assert collector.read_default("com.apple.screensaver", "idleTime") is None
        assert runner.calls == [
            "defaults read com.apple.screensaver askForPassword",
            "defaults read com.apple.screensaver idleTime",
        ]

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseCollector()  # type: ignore[abstract]

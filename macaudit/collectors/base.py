from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from pydantic import BaseModel

from macaudit.config import settings
from macaudit.errors import DataUnavailable

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs an external command and returns its stdout.

    Every failure mode (missing binary, non-zero exit, timeout, no output)
    surfaces as ``DataUnavailable``.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = settings.command_timeout if timeout is None else timeout

    def run(self, command: list[str]) -> str:
        logger.debug("Executing: %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise DataUnavailable(f"{command[0]}: not found") from e
        except subprocess.TimeoutExpired as e:
            raise DataUnavailable(
                f"{command[0]}: timed out after {self.timeout:.0f}s"
            ) from e
        except OSError as e:
            raise DataUnavailable(f"{command[0]}: {e}") from e

        if result.returncode != 0:
            raise DataUnavailable(
                f"{command[0]}: exit status {result.returncode}: {result.stderr.strip()}"
            )
        output = result.stdout.strip()
        if not output:
            raise DataUnavailable(f"{command[0]}: no output")
        return output


def parse_key_values(text: str | None) -> dict[str, str]:
    """Parse ``Key: Value`` lines (system_profiler style) into a dict.

    Keys and values are stripped; the first occurrence of a key wins.
    """
    fields: dict[str, str] = {}
    for line in (text or "").splitlines():
        key, sep, value = line.strip().partition(": ")
        if not sep or not value.strip():
            continue
        fields.setdefault(key.strip(), value.strip())
    return fields


def lookup(fields: dict[str, str], prefix: str) -> str | None:
    """Value of the first key starting with ``prefix``."""
    for key, value in fields.items():
        if key.startswith(prefix):
            return value
    return None


def to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip().rstrip("%").strip())
    except ValueError:
        return None


class BaseCollector(ABC):
    """Abstract base for all host collectors.

    Subclasses implement ``collect()`` which returns one snapshot model.
    ``query()`` runs a command best-effort: a failed query is logged and
    yields ``None`` so the rest of the snapshot can still be filled in.
    """

    name: str = "base"

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner or CommandRunner()

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    def collect(self) -> BaseModel:
        """Gather host data and return a snapshot."""
        ...

    # ── helpers ─────────────────────────────────────────

    def query(self, *command: str) -> str | None:
        try:
            return self._runner.run(list(command))
        except DataUnavailable as e:
            logger.debug("Collector [%s] query unavailable: %s", self.name, e)
            return None

    def read_default(self, *args: str) -> str | None:
        """``defaults read`` a preference key, ``None`` when unset."""
        return self.query("defaults", "read", *args)

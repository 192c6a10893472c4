from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable

import psutil

from macaudit.collectors.base import BaseCollector, CommandRunner
from macaudit.config import settings
from macaudit.models.usage import RebootEvent, UsageMetrics

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def parse_reboot_history(text: str | None) -> list[RebootEvent]:
    """Parse ``last reboot`` output into events, oldest first.

    ``last`` prints the most recent event first; blank lines and the
    trailing ``wtmp begins`` line are skipped.
    """
    events: list[RebootEvent] = []
    for line in (text or "").splitlines():
        line = line.rstrip()
        kind = line.split(None, 1)[0] if line.strip() else ""
        if kind not in ("reboot", "shutdown"):
            continue
        when = line[len(kind):].strip().lstrip("~").strip()
        events.append(RebootEvent(kind=kind, when=when, raw=line))
    events.reverse()
    return events


class UsageCollector(BaseCollector):
    """Install/setup dates, uptime and reboot history."""

    name = "usage"

    def __init__(
        self,
        runner: CommandRunner | None = None,
        setup_marker: str | Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(runner)
        self.setup_marker = Path(setup_marker or settings.setup_marker)
        self._clock = clock

    def collect(self) -> UsageMetrics:
        metrics = UsageMetrics(
            uptime=self.query("uptime"),
            last_boot=self._boot_time(),
            events=parse_reboot_history(self.query("last", "reboot")),
        )
        self._fill_setup_dates(metrics)
        return metrics

    def _fill_setup_dates(self, metrics: UsageMetrics) -> None:
        born, modified = self._read_marker_times()
        now = self._clock().timestamp()

        if born is not None:
            metrics.installed_at = datetime.fromtimestamp(born)
            metrics.days_since_install = int((now - born) // SECONDS_PER_DAY)
        if modified is not None:
            metrics.last_setup_at = datetime.fromtimestamp(modified)

        if modified is not None and born is not None and modified != born:
            metrics.days_since_setup = int((now - modified) // SECONDS_PER_DAY)
        else:
            metrics.days_since_setup = metrics.days_since_install

    def _read_marker_times(self) -> tuple[float | None, float | None]:
        """(birth time, modification time) of the setup-done marker.

        Birth time marks when the current OS was first installed; the
        modification time is the last completed setup.
        """
        try:
            st = os.stat(self.setup_marker)
        except OSError:
            logger.debug("Setup marker not readable: %s", self.setup_marker)
            return None, None
        return getattr(st, "st_birthtime", None), st.st_mtime

    @staticmethod
    def _boot_time() -> datetime | None:
        try:
            return datetime.fromtimestamp(psutil.boot_time())
        except (OSError, RuntimeError):
            logger.debug("Boot time unavailable", exc_info=True)
            return None

from __future__ import annotations

import logging

import psutil

from macaudit.collectors.base import BaseCollector
from macaudit.models.resources import LoadGauge

logger = logging.getLogger(__name__)


class LoadCollector(BaseCollector):
    """Load average against the logical CPU count."""

    name = "load"

    def collect(self) -> LoadGauge:
        gauge = LoadGauge(
            uptime=self.query("uptime"),
            cpu_usage=self._cpu_usage_line(),
            core_count=psutil.cpu_count(),
        )
        try:
            gauge.load_average = round(psutil.getloadavg()[0], 2)
        except OSError:
            logger.debug("Load average unavailable", exc_info=True)
        return gauge

    def _cpu_usage_line(self) -> str | None:
        output = self.query("top", "-l", "1", "-n", "0")
        for line in (output or "").splitlines():
            if line.startswith("CPU usage"):
                return line.strip()
        return None

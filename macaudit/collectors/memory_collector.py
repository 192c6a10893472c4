from __future__ import annotations

import psutil

from macaudit.collectors.base import BaseCollector
from macaudit.models.resources import MemoryUsage


class MemoryCollector(BaseCollector):
    """Free/active/inactive/wired memory counters."""

    name = "memory"

    def collect(self) -> MemoryUsage:
        vm = psutil.virtual_memory()
        # active/inactive/wired are only reported on macOS and BSD
        return MemoryUsage(
            total=vm.total,
            free=getattr(vm, "free", None),
            active=getattr(vm, "active", None),
            inactive=getattr(vm, "inactive", None),
            wired=getattr(vm, "wired", None),
        )

from __future__ import annotations

from macaudit.collectors.base import BaseCollector, lookup, parse_key_values
from macaudit.models.host import HardwareInfo


class HardwareCollector(BaseCollector):
    """Reads the hardware overview from ``system_profiler``."""

    name = "hardware"

    def collect(self) -> HardwareInfo:
        fields = parse_key_values(self.query("system_profiler", "SPHardwareDataType"))
        return HardwareInfo(
            model_name=lookup(fields, "Model Name"),
            model_identifier=lookup(fields, "Model Identifier"),
            # Intel Macs report a processor instead of a chip
            chip=lookup(fields, "Chip") or lookup(fields, "Processor Name"),
            core_count=lookup(fields, "Total Number of Cores"),
            memory=lookup(fields, "Memory"),
            serial_number=lookup(fields, "Serial Number"),
        )

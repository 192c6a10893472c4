from __future__ import annotations

from macaudit.collectors.base import BaseCollector, lookup, parse_key_values, to_int
from macaudit.models.power import PowerState


class BatteryCollector(BaseCollector):
    """Battery health from ``system_profiler SPPowerDataType``."""

    name = "battery"

    def collect(self) -> PowerState:
        fields = parse_key_values(self.query("system_profiler", "SPPowerDataType"))
        state = PowerState(
            cycle_count=to_int(lookup(fields, "Cycle Count")),
            max_capacity=to_int(lookup(fields, "Maximum Capacity")),
            condition=lookup(fields, "Condition"),
            state_of_charge=to_int(lookup(fields, "State of Charge")),
        )
        # Desktops report power settings but no battery information
        state.present = any(
            v is not None
            for v in (state.cycle_count, state.max_capacity, state.condition)
        )
        return state

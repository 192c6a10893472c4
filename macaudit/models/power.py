from __future__ import annotations

from pydantic import BaseModel


class PowerState(BaseModel):
    present: bool = True
    cycle_count: int | None = None
    max_capacity: int | None = None
    condition: str | None = None
    state_of_charge: int | None = None

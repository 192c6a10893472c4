from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class RebootEvent(BaseModel):
    """One line of the reboot/shutdown history."""

    kind: Literal["reboot", "shutdown"]
    when: str = ""
    raw: str = ""


class UsageMetrics(BaseModel):
    """Install dates, uptime and reboot history for the host.

    ``events`` is chronological, oldest first.
    """

    installed_at: datetime | None = None
    last_setup_at: datetime | None = None
    days_since_install: int | None = None
    days_since_setup: int | None = None
    uptime: str | None = None
    last_boot: datetime | None = None
    events: list[RebootEvent] = Field(default_factory=list)

    @property
    def reboot_count(self) -> int:
        return sum(1 for e in self.events if e.kind == "reboot")

    @property
    def shutdown_count(self) -> int:
        return sum(1 for e in self.events if e.kind == "shutdown")

    @property
    def total_events(self) -> int:
        return len(self.events)

    @property
    def setup_differs(self) -> bool:
        return (
            self.last_setup_at is not None
            and self.installed_at is not None
            and self.last_setup_at != self.installed_at
        )

    @property
    def years_since_install(self) -> float | None:
        if self.days_since_install is None:
            return None
        return round(self.days_since_install / 365, 1)

    @property
    def average_days_between_events(self) -> float | None:
        """Days covered by the history divided by the number of events.

        Uses days since last setup, falling back to days since install.
        ``None`` unless there are at least two events.
        """
        days = self.days_since_setup
        if days is None:
            days = self.days_since_install
        if days is None or self.total_events <= 1:
            return None
        return round(days / self.total_events, 1)

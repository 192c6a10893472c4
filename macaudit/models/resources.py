from __future__ import annotations

from pydantic import BaseModel, Field

GIB = 1024 ** 3


def to_gb(value: int | None) -> float | None:
    if value is None:
        return None
    return round(value / GIB, 2)


class LoadGauge(BaseModel):
    load_average: float | None = None
    core_count: int | None = None
    uptime: str | None = None
    cpu_usage: str | None = None


class MemoryUsage(BaseModel):
    """Memory counters in bytes. ``used`` is active + inactive + wired."""

    total: int | None = None
    free: int | None = None
    active: int | None = None
    inactive: int | None = None
    wired: int | None = None

    @property
    def used(self) -> int | None:
        if None in (self.active, self.inactive, self.wired):
            return None
        return self.active + self.inactive + self.wired

    @property
    def used_percent(self) -> int | None:
        used = self.used
        if used is None or not self.total:
            return None
        return int(used / self.total * 100)


class Volume(BaseModel):
    device: str
    mountpoint: str
    total: int
    used: int
    available: int
    percent: float


class StorageUsage(BaseModel):
    mountpoint: str | None = None
    is_data_volume: bool = False
    total: int | None = None
    used: int | None = None
    available: int | None = None
    used_percent: int | None = None
    volumes: list[Volume] = Field(default_factory=list)


class ResourceGauges(BaseModel):
    """Point-in-time load, memory and storage readings."""

    load: LoadGauge = Field(default_factory=LoadGauge)
    memory: MemoryUsage = Field(default_factory=MemoryUsage)
    storage: StorageUsage = Field(default_factory=StorageUsage)

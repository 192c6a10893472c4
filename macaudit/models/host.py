from __future__ import annotations

from pydantic import BaseModel


class HostSnapshot(BaseModel):
    """Operating system identity, read once per run."""

    hostname: str
    architecture: str
    os_name: str | None = None
    os_version: str | None = None
    os_build: str | None = None
    kernel_version: str | None = None


class HardwareInfo(BaseModel):
    model_name: str | None = None
    model_identifier: str | None = None
    chip: str | None = None
    core_count: str | None = None
    memory: str | None = None
    serial_number: str | None = None

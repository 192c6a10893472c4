from __future__ import annotations

from pydantic import BaseModel, Field


class NetworkState(BaseModel):
    interface: str
    ip_address: str | None = None
    status: str | None = None  # "active" / "inactive"
    wireless: dict[str, str] = Field(default_factory=dict)
    signal_dbm: int | None = None

    @property
    def is_wireless(self) -> bool:
        return self.signal_dbm is not None

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

FILE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


class AuditOptions(BaseModel):
    save_to_file: bool = False


class RunMetadata(BaseModel):
    """Values resolved once at the start of a run and shared by later sections."""

    timestamp: datetime = Field(default_factory=datetime.now)
    hostname: str
    architecture: str
    output_path: Path | None = None

    @property
    def report_filename(self) -> str:
        stamp = self.timestamp.strftime(FILE_TIMESTAMP_FORMAT)
        safe_host = self.hostname.replace("/", "-")
        return f"mac_audit_{safe_host}_{stamp}.txt"

    @property
    def apple_silicon(self) -> bool:
        return self.architecture == "arm64"


class ReportOutcome(BaseModel):
    text: str
    saved_to: Path | None = None
    sections: list[str] = Field(default_factory=list)

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Rating(StrEnum):
    HEALTHY = "healthy"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"
    FAIR = "fair"
    REPLACE_SOON = "replace_soon"
    EXCELLENT = "excellent"
    GOOD = "good"
    WEAK = "weak"
    POOR = "poor"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    INFREQUENT = "infrequent"
    FREQUENT = "frequent"


class Marker(StrEnum):
    OK = "✓"
    WARN = "⚠"
    FAIL = "✗"
    INFO = "ℹ"


class Assessment(BaseModel):
    """Outcome of applying a threshold rule to one metric."""

    rating: Rating
    marker: Marker
    label: str

    def __str__(self) -> str:
        return f"{self.marker} {self.label}"

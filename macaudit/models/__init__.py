from .assessment import Assessment, Marker, Rating
from .host import HardwareInfo, HostSnapshot
from .network import NetworkState
from .power import PowerState
from .report import AuditOptions, ReportOutcome, RunMetadata
from .resources import LoadGauge, MemoryUsage, ResourceGauges, StorageUsage, Volume
from .security import MAX_SECURITY_SCORE, FirewallState, ScreenLock, SecurityPosture
from .usage import RebootEvent, UsageMetrics

__all__ = [
    "Assessment",
    "Marker",
    "Rating",
    "HardwareInfo",
    "HostSnapshot",
    "NetworkState",
    "PowerState",
    "AuditOptions",
    "ReportOutcome",
    "RunMetadata",
    "LoadGauge",
    "MemoryUsage",
    "ResourceGauges",
    "StorageUsage",
    "Volume",
    "MAX_SECURITY_SCORE",
    "FirewallState",
    "ScreenLock",
    "SecurityPosture",
    "RebootEvent",
    "UsageMetrics",
]

from .base import BaseCollector, CommandRunner
from .battery_collector import BatteryCollector
from .hardware_collector import HardwareCollector
from .load_collector import LoadCollector
from .memory_collector import MemoryCollector
from .network_collector import NetworkCollector
from .security_collector import SecurityCollector
from .storage_collector import StorageCollector
from .system_collector import SystemCollector, resolve_hostname
from .usage_collector import UsageCollector

__all__ = [
    "BaseCollector",
    "CommandRunner",
    "BatteryCollector",
    "HardwareCollector",
    "LoadCollector",
    "MemoryCollector",
    "NetworkCollector",
    "SecurityCollector",
    "StorageCollector",
    "SystemCollector",
    "resolve_hostname",
    "UsageCollector",
]

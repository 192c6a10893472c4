from __future__ import annotations

import logging
import re
import socket

import psutil

from macaudit.collectors.base import BaseCollector, CommandRunner
from macaudit.config import settings
from macaudit.models.network import NetworkState

logger = logging.getLogger(__name__)

CURRENT_NETWORK_HEADER = "Current Network Information:"
WIRELESS_FIELDS = ("PHY Mode", "Channel", "Security", "Signal / Noise")
_SIGNAL_RE = re.compile(r"(-?\d+)\s*dBm")


def parse_current_network(text: str | None) -> dict[str, str]:
    """Extract the connected network's details from SPAirPortDataType output.

    Returns the wanted fields (plus ``Network`` for the SSID line) found in
    the block following the current-network header.
    """
    lines = (text or "").splitlines()
    details: dict[str, str] = {}
    for i, line in enumerate(lines):
        if line.strip() != CURRENT_NETWORK_HEADER:
            continue
        header_indent = len(line) - len(line.lstrip())
        for entry in lines[i + 1:]:
            stripped = entry.strip()
            if not stripped:
                continue
            if len(entry) - len(entry.lstrip()) <= header_indent:
                break
            if stripped.endswith(":") and "Network" not in details:
                details["Network"] = stripped[:-1]
                continue
            key, sep, value = stripped.partition(": ")
            if sep and key in WIRELESS_FIELDS:
                details.setdefault(key, value.strip())
        break
    return details


def parse_signal(value: str | None) -> int | None:
    """First dBm figure of a ``Signal / Noise`` value."""
    match = _SIGNAL_RE.search(value or "")
    return int(match.group(1)) if match else None


class NetworkCollector(BaseCollector):
    """Address, link status and Wi-Fi signal of the primary interface."""

    name = "network"

    def __init__(
        self,
        runner: CommandRunner | None = None,
        interface: str | None = None,
    ) -> None:
        super().__init__(runner)
        self.interface = interface or settings.network_interface

    def collect(self) -> NetworkState:
        wireless = parse_current_network(self.query("system_profiler", "SPAirPortDataType"))
        return NetworkState(
            interface=self.interface,
            ip_address=self._ipv4_address(),
            status=self._link_status(),
            wireless=wireless,
            signal_dbm=parse_signal(wireless.get("Signal / Noise")),
        )

    def _ipv4_address(self) -> str | None:
        for addr in psutil.net_if_addrs().get(self.interface, []):
            if addr.family == socket.AF_INET:
                return addr.address
        return None

    def _link_status(self) -> str | None:
        output = self.query("ifconfig", self.interface)
        for line in (output or "").splitlines():
            key, sep, value = line.strip().partition(":")
            if sep and key == "status":
                return value.strip()
        stats = psutil.net_if_stats().get(self.interface)
        if stats is None:
            return None
        return "active" if stats.isup else "inactive"

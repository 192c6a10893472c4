from __future__ import annotations

import logging
import platform
import socket

from macaudit.collectors.base import BaseCollector, CommandRunner
from macaudit.errors import DataUnavailable
from macaudit.models.host import HostSnapshot
from macaudit.releases import ReleaseCatalog

logger = logging.getLogger(__name__)


def resolve_hostname(runner: CommandRunner | None = None) -> str:
    """The user-facing computer name, or the network hostname as fallback."""
    runner = runner or CommandRunner()
    try:
        return runner.run(["scutil", "--get", "ComputerName"])
    except DataUnavailable:
        logger.debug("ComputerName unavailable, using socket hostname")
        return socket.gethostname()


class SystemCollector(BaseCollector):
    """Reads OS name, version, build and kernel."""

    name = "system"

    def __init__(
        self,
        hostname: str,
        architecture: str,
        runner: CommandRunner | None = None,
        catalog: ReleaseCatalog | None = None,
    ) -> None:
        super().__init__(runner)
        self.hostname = hostname
        self.architecture = architecture
        self.catalog = catalog or ReleaseCatalog.load()

    def collect(self) -> HostSnapshot:
        version = self.query("sw_vers", "-productVersion")
        return HostSnapshot(
            hostname=self.hostname,
            architecture=self.architecture,
            os_name=self.catalog.name_for(version),
            os_version=version,
            os_build=self.query("sw_vers", "-buildVersion"),
            kernel_version=platform.release() or None,
        )

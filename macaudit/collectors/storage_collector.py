from __future__ import annotations

import logging

import psutil

from macaudit.collectors.base import BaseCollector, CommandRunner
from macaudit.config import settings
from macaudit.models.resources import StorageUsage, Volume

logger = logging.getLogger(__name__)

MAX_LISTED_VOLUMES = 5


def df_capacity(used: int, free: int) -> int | None:
    """Capacity the way df prints it: used over used plus available, rounded up."""
    denominator = used + free
    if denominator <= 0:
        return None
    return -(-used * 100 // denominator)


class StorageCollector(BaseCollector):
    """Usage of the primary data volume plus a listing of mounted disks.

    Falls back to the root volume when the data volume is not mounted.
    """

    name = "storage"

    def __init__(
        self,
        runner: CommandRunner | None = None,
        data_volume: str | None = None,
    ) -> None:
        super().__init__(runner)
        self.data_volume = data_volume or settings.data_volume

    def collect(self) -> StorageUsage:
        volumes = self._list_volumes()
        mounted = {v.mountpoint for v in volumes}
        is_data = self.data_volume in mounted
        mountpoint = self.data_volume if is_data else "/"

        storage = StorageUsage(
            mountpoint=mountpoint,
            is_data_volume=is_data,
            volumes=volumes[:MAX_LISTED_VOLUMES],
        )
        try:
            usage = psutil.disk_usage(mountpoint)
        except OSError:
            logger.debug("Disk usage unavailable for %s", mountpoint, exc_info=True)
            return storage

        storage.total = usage.total
        storage.used = usage.used
        storage.available = usage.free
        storage.used_percent = df_capacity(usage.used, usage.free)
        return storage

    @staticmethod
    def _list_volumes() -> list[Volume]:
        volumes: list[Volume] = []
        for part in psutil.disk_partitions(all=False):
            if not part.device.startswith("/dev/disk"):
                continue
            try:
                usage = psutil.disk_usage(part.mountpoint)
            except OSError:
                continue
            volumes.append(
                Volume(
                    device=part.device,
                    mountpoint=part.mountpoint,
                    total=usage.total,
                    used=usage.used,
                    available=usage.free,
                    percent=usage.percent,
                )
            )
        return volumes

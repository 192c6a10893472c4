from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from macaudit.config import settings

logger = logging.getLogger(__name__)


class ReleaseCatalog(BaseModel):
    """Ordered mapping of macOS major version to marketing name.

    ``legacy`` maps the minor version of 10.x releases. Versions missing
    from either table fall back to ``macOS <major>`` / ``macOS 10.<minor>``.
    """

    releases: dict[int, str] = Field(default_factory=dict)
    legacy: dict[int, str] = Field(default_factory=dict)

    @classmethod
    def load(cls, path: str | Path | None = None) -> ReleaseCatalog:
        path = Path(path or settings.releases_file)
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls(**raw)

    def name_for(self, version: str | None) -> str | None:
        if not version:
            return None
        parts = version.strip().split(".")
        try:
            major = int(parts[0])
        except ValueError:
            logger.debug("Unparseable OS version: %r", version)
            return None

        if major == 10:
            minor = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else None
            if minor in self.legacy:
                return f"macOS {self.legacy[minor]}"
            return f"macOS 10.{minor if minor is not None else 'x'}"

        codename = self.releases.get(major)
        if codename is None:
            return f"macOS {major}"
        return f"macOS {codename}"

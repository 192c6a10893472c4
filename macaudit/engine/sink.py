from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from macaudit.errors import OutputSinkFailure

logger = logging.getLogger(__name__)


class ReportSink:
    """Writes the rendered report to a stream and, optionally, a file."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved late so redirected stdout is honoured
        return self._stream or sys.stdout

    def prepare(self, path: Path) -> None:
        """Create the report directory. Called before any data is gathered."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputSinkFailure(
                f"Cannot create reports directory {path.parent}: {e}"
            ) from e

    def emit(self, text: str, path: Path | None = None) -> Path | None:
        self.stream.write(text)
        self.stream.flush()
        if path is None:
            return None
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputSinkFailure(f"Cannot write report to {path}: {e}") from e
        logger.info("Report saved to %s", path)
        return path

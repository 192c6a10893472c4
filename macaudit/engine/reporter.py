from __future__ import annotations

import logging
import platform
from datetime import datetime
from pathlib import Path
from typing import Callable

from macaudit.collectors import (
    BaseCollector,
    BatteryCollector,
    CommandRunner,
    HardwareCollector,
    LoadCollector,
    MemoryCollector,
    NetworkCollector,
    SecurityCollector,
    StorageCollector,
    SystemCollector,
    UsageCollector,
    resolve_hostname,
)
from macaudit.config import Settings, settings as default_settings
from macaudit.engine.sections import (
    DISPLAY_TIME_FORMAT,
    RULE,
    SECTIONS,
    RenderContext,
    Section,
    heading,
)
from macaudit.engine.sink import ReportSink
from macaudit.models import AuditOptions, ReportOutcome, RunMetadata
from macaudit.releases import ReleaseCatalog

logger = logging.getLogger(__name__)

CollectorFactory = Callable[[RunMetadata, CommandRunner, Settings], dict[str, BaseCollector]]


def default_collectors(
    metadata: RunMetadata,
    runner: CommandRunner,
    settings: Settings,
) -> dict[str, BaseCollector]:
    """The live collectors for every report section, keyed by section."""
    return {
        "system": SystemCollector(
            metadata.hostname,
            metadata.architecture,
            runner=runner,
            catalog=ReleaseCatalog.load(settings.releases_file),
        ),
        "hardware": HardwareCollector(runner),
        "usage": UsageCollector(runner, setup_marker=settings.setup_marker),
        "load": LoadCollector(runner),
        "memory": MemoryCollector(runner),
        "storage": StorageCollector(runner, data_volume=settings.data_volume),
        "battery": BatteryCollector(runner),
        "security": SecurityCollector(metadata.architecture, runner=runner),
        "network": NetworkCollector(runner, interface=settings.network_interface),
    }


class AuditReporter:
    """Runs every section in order and emits the composed report.

    A section whose collector fails is rendered as unavailable and the run
    continues; only output-sink failures abort it.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        runner: CommandRunner | None = None,
        collector_factory: CollectorFactory | None = None,
        sink: ReportSink | None = None,
        clock: Callable[[], datetime] = datetime.now,
        hostname_resolver: Callable[[CommandRunner], str] = resolve_hostname,
    ) -> None:
        self.settings = settings or default_settings
        self._runner = runner or CommandRunner(timeout=self.settings.command_timeout)
        self._collector_factory = collector_factory or default_collectors
        self.sink = sink or ReportSink()
        self._clock = clock
        self._resolve_hostname = hostname_resolver

    def resolve_metadata(self, options: AuditOptions) -> RunMetadata:
        metadata = RunMetadata(
            timestamp=self._clock(),
            hostname=self._resolve_hostname(self._runner),
            architecture=platform.machine() or "unknown",
        )
        if options.save_to_file:
            metadata.output_path = Path(self.settings.reports_dir) / metadata.report_filename
        return metadata

    def run(self, options: AuditOptions) -> ReportOutcome:
        metadata = self.resolve_metadata(options)
        if metadata.output_path is not None:
            self.sink.prepare(metadata.output_path)

        ctx = RenderContext(metadata, self.settings)
        collectors = self._collector_factory(metadata, self._runner, self.settings)

        lines = self._header(metadata)
        titles: list[str] = []
        for section in SECTIONS:
            lines += heading(section.title)
            lines += self._render_section(section, collectors.get(section.key), ctx)
            titles.append(section.title)
        lines += self._footer(metadata)

        text = "\n".join(lines) + "\n"
        saved_to = self.sink.emit(text, metadata.output_path)
        logger.info("Audit complete (%d sections)", len(titles))
        return ReportOutcome(text=text, saved_to=saved_to, sections=titles)

    # ── internals ───────────────────────────────────────

    @staticmethod
    def _render_section(
        section: Section,
        collector: BaseCollector | None,
        ctx: RenderContext,
    ) -> list[str]:
        if collector is None:
            logger.warning("No collector configured for section [%s]", section.key)
            return ["Unavailable: no data source"]
        try:
            snapshot = collector.collect()
        except Exception as e:
            logger.exception("Collector [%s] error during collect()", collector.name)
            return [f"Unavailable: {e}"]

        ctx.results[section.key] = snapshot
        try:
            return section.render(snapshot, ctx)
        except Exception as e:
            logger.exception("Section [%s] failed to render", section.key)
            return [f"Unavailable: {e}"]

    def _header(self, metadata: RunMetadata) -> list[str]:
        output = metadata.output_path or "Display only (use --file to save)"
        return [
            self.settings.app_name,
            f"Generated : {metadata.timestamp.strftime(DISPLAY_TIME_FORMAT)}",
            f"Hostname  : {metadata.hostname}",
            f"Arch      : {metadata.architecture}",
            f"Output    : {output}",
        ]

    @staticmethod
    def _footer(metadata: RunMetadata) -> list[str]:
        lines = ["", RULE, "AUDIT COMPLETE"]
        if metadata.output_path is not None:
            lines.append(f"Report saved to: {metadata.output_path}")
        lines.append(RULE)
        return lines

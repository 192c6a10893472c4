from .classifier import (
    classify_battery,
    classify_link,
    classify_load,
    classify_memory,
    classify_reboot_cadence,
    classify_security,
    classify_signal,
    classify_storage,
)
from .reporter import AuditReporter, default_collectors
from .sections import SECTIONS, RenderContext, Section
from .sink import ReportSink

__all__ = [
    "classify_battery",
    "classify_link",
    "classify_load",
    "classify_memory",
    "classify_reboot_cadence",
    "classify_security",
    "classify_signal",
    "classify_storage",
    "AuditReporter",
    "default_collectors",
    "SECTIONS",
    "RenderContext",
    "Section",
    "ReportSink",
]

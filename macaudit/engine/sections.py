"""Renderers that turn one snapshot into the lines of a report section."""

from __future__ import annotations

from typing import Any, Callable, NamedTuple

from pydantic import BaseModel

from macaudit.config import Settings
from macaudit.engine.classifier import (
    classify_battery,
    classify_link,
    classify_load,
    classify_memory,
    classify_reboot_cadence,
    classify_security,
    classify_signal,
    classify_storage,
)
from macaudit.models import (
    FirewallState,
    HardwareInfo,
    HostSnapshot,
    LoadGauge,
    MemoryUsage,
    NetworkState,
    PowerState,
    RunMetadata,
    SecurityPosture,
    StorageUsage,
    UsageMetrics,
)
from macaudit.models.resources import GIB, to_gb

RULE = "=" * 48
SCORE_RULE = "─" * 45
UNKNOWN = "Unknown"
DISPLAY_TIME_FORMAT = "%a %b %d %H:%M:%S %Y"
SETUP_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LISTED_PROFILES = 5


class RenderContext:
    """Values shared with later sections.

    ``results`` holds each section's snapshot by key as soon as it has been
    collected, so later renderers can read earlier ones explicitly.
    """

    def __init__(self, metadata: RunMetadata, settings: Settings) -> None:
        self.metadata = metadata
        self.settings = settings
        self.results: dict[str, BaseModel] = {}


class Section(NamedTuple):
    key: str
    title: str
    render: Callable[[Any, RenderContext], list[str]]


def heading(title: str) -> list[str]:
    return ["", RULE, title, RULE]


def on_off(flag: bool) -> str:
    return "On" if flag else "Off"


def check(passed: bool, passed_text: str, failed_text: str) -> str:
    return f"  ✓ Check: {passed_text}" if passed else f"  ✗ Check: {failed_text}"


def human_size(value: int | None) -> str:
    """Binary size in the short form ``df -h`` prints, e.g. ``228Gi``."""
    if value is None:
        return UNKNOWN
    size = float(value)
    for unit in ("B", "Ki", "Mi", "Gi", "Ti"):
        if size < 1024 or unit == "Ti":
            break
        size /= 1024
    if unit == "B":
        return f"{int(size)}B"
    return f"{size:.0f}{unit}" if size >= 10 else f"{size:.1f}{unit}"


# ── SYSTEM INFO ────────────────────────────────────────


def render_system(host: HostSnapshot, ctx: RenderContext) -> list[str]:
    return [
        f"OS Name: {host.os_name or UNKNOWN}",
        f"Version: {host.os_version or UNKNOWN}",
        f"Build: {host.os_build or UNKNOWN}",
        f"Kernel: {host.kernel_version or UNKNOWN}",
        f"Architecture: {host.architecture}",
    ]


# ── HARDWARE ───────────────────────────────────────────


_HARDWARE_LABELS = (
    ("model_name", "Model Name"),
    ("model_identifier", "Model Identifier"),
    ("chip", "Chip"),
    ("core_count", "Total Number of Cores"),
    ("memory", "Memory"),
    ("serial_number", "Serial Number"),
)


def render_hardware(hw: HardwareInfo, ctx: RenderContext) -> list[str]:
    lines = [
        f"{label}: {getattr(hw, attr)}"
        for attr, label in _HARDWARE_LABELS
        if getattr(hw, attr) is not None
    ]
    return lines or ["Hardware details: Unavailable"]


# ── DEVICE USAGE ───────────────────────────────────────


def render_usage(usage: UsageMetrics, ctx: RenderContext) -> list[str]:
    hardware = ctx.results.get("hardware")
    serial = getattr(hardware, "serial_number", None)
    lines = [
        f"Serial Number: {serial or UNKNOWN}",
        f"Warranty Check: {ctx.settings.warranty_url}",
    ]

    if usage.installed_at is not None:
        lines += [
            "",
            f"Current macOS Installed: {usage.installed_at.strftime(DISPLAY_TIME_FORMAT)}",
            f"Time Since Install: {usage.days_since_install} days "
            f"(~{usage.years_since_install} years)",
        ]
    if usage.setup_differs:
        lines += [
            "",
            f"Last Setup Completed: {usage.last_setup_at.strftime(SETUP_TIME_FORMAT)}",
            f"Days Since Setup: {usage.days_since_setup} days",
        ]

    lines += ["", "Current Uptime:", f"  {usage.uptime or UNKNOWN}"]
    last_boot = usage.last_boot.strftime(DISPLAY_TIME_FORMAT) if usage.last_boot else UNKNOWN
    lines.append(f"  Last Boot: {last_boot}")

    limit = ctx.settings.reboot_history_limit
    lines += ["", f"Recent Reboots (Last {limit}):"]
    recent = list(reversed(usage.events))[:limit]
    lines += [f"  {event.raw}" for event in recent] or ["  None recorded"]

    average = usage.average_days_between_events
    cadence = classify_reboot_cadence(average)
    if cadence is not None:
        lines += [
            "",
            f"Total Reboot/Shutdown Events: {usage.total_events} "
            f"(Reboots: {usage.reboot_count}, Shutdowns: {usage.shutdown_count})",
            f"Average Days Between Reboots/Shutdowns: ~{average} days",
            f"Usage Pattern: {cadence}",
        ]
    return lines


# ── CPU & LOAD ─────────────────────────────────────────


def render_load(load: LoadGauge, ctx: RenderContext) -> list[str]:
    lines = [line for line in (load.uptime, load.cpu_usage) if line]
    lines.append("")
    status = classify_load(load.load_average, load.core_count)
    if status is None:
        lines.append("Status: Unknown (load average unavailable)")
    else:
        lines.append(f"Status: {status}")
    lines.append("Reference: Healthy when load average < number of CPU cores")
    return lines


# ── MEMORY ─────────────────────────────────────────────


def _gb(value: int | None) -> str:
    gb = to_gb(value)
    return UNKNOWN if gb is None else f"{gb:.2f}GB"


def render_memory(memory: MemoryUsage, ctx: RenderContext) -> list[str]:
    total = f"{memory.total // GIB}GB" if memory.total else UNKNOWN
    lines = [
        f"Total RAM: {total}",
        "",
        "Memory Usage:",
        f"  Active:   {_gb(memory.active)}",
        f"  Inactive: {_gb(memory.inactive)}",
        f"  Wired:    {_gb(memory.wired)}",
        f"  Free:     {_gb(memory.free)}",
        f"  Used:     {_gb(memory.used)}",
        "",
    ]
    status = classify_memory(memory.used_percent)
    lines.append(f"Status: {status}" if status else "Status: Unknown (memory counters unavailable)")
    lines.append("Reference: Healthy < 80%, Warning 80-90%, Critical > 90%")
    return lines


# ── STORAGE ────────────────────────────────────────────


def render_storage(storage: StorageUsage, ctx: RenderContext) -> list[str]:
    lines = [f"{'Filesystem':<20} {'Size':>6} {'Used':>6} {'Avail':>6} {'Capacity':>8}  Mounted on"]
    for v in storage.volumes:
        lines.append(
            f"{v.device:<20} {human_size(v.total):>6} {human_size(v.used):>6} "
            f"{human_size(v.available):>6} {f'{v.percent:.0f}%':>8}  {v.mountpoint}"
        )
    lines.append("")

    kind = "Data Volume" if storage.is_data_volume else "Root Volume"
    lines += [
        f"Primary Storage ({kind}):",
        f"  Total: {human_size(storage.total)}",
        f"  Available: {human_size(storage.available)}",
        f"  Usage: {storage.used_percent if storage.used_percent is not None else UNKNOWN}%",
        "",
    ]
    status = classify_storage(storage.used_percent)
    lines.append(f"Status: {status}" if status else "Status: Unknown (volume usage unavailable)")
    lines += [
        "Reference: Healthy < 80%, Warning 80-90%, High 90-95%, Critical > 95%",
        "           Keep at least 10-20GB free for optimal performance",
    ]
    return lines


# ── BATTERY ────────────────────────────────────────────


def render_battery(power: PowerState, ctx: RenderContext) -> list[str]:
    if not power.present:
        return ["No battery detected"]

    lines = []
    if power.cycle_count is not None:
        lines.append(f"Cycle Count: {power.cycle_count}")
    lines.append(f"Condition: {power.condition or UNKNOWN}")
    if power.max_capacity is not None:
        lines.append(f"Maximum Capacity: {power.max_capacity}%")
    if power.state_of_charge is not None:
        lines.append(f"State of Charge (%): {power.state_of_charge}")
    lines.append("")

    status = classify_battery(power.condition, power.max_capacity, power.cycle_count)
    lines.append(f"Status: {status}" if status else "Status: Unknown (capacity unavailable)")
    lines += [
        "Reference: Apple recommends service when capacity ≤ 80%",
        "           Modern MacBooks (2016+) rated for 1,000 cycles",
        "           Designed to retain 80% capacity at max cycle count",
    ]
    return lines


# ── SECURITY ───────────────────────────────────────────


def _firewall_lines(sec: SecurityPosture) -> list[str]:
    lines = ["Firewall:"]
    if sec.firewall == FirewallState.ENABLED:
        lines += ["  Status: Enabled", "  ✓ Check: Enabled"]
        lines.append(f"  Stealth Mode: {on_off(sec.stealth_mode)}")
        lines.append(check(sec.stealth_mode, "Stealth mode enabled", "Stealth mode disabled"))
    elif sec.firewall == FirewallState.DISABLED:
        lines += ["  Status: Disabled", "  ✗ Check: Disabled"]
    else:
        lines += ["  Status: Unknown", "  ✗ Check: Unknown"]
    return lines


def _screen_lock_lines(sec: SecurityPosture) -> list[str]:
    lock = sec.screen_lock
    lines = ["Screen Lock Settings:"]
    if lock.apple_silicon:
        return lines + [
            "  Architecture: Apple Silicon (Built-in security)",
            "  Screen Lock: Always required after sleep/wake",
            "  ✓ Check: Screen lock password required (Apple Silicon default)",
        ]
    idle = f"{lock.idle_time}s" if lock.idle_time else "Not set"
    lines += [
        f"  Screen Saver Delay: {idle}",
        f"  Require Password: {'Yes' if lock.ask_for_password else 'No'}",
    ]
    if lock.ask_for_password:
        lines += [
            f"  Password Delay: {lock.password_delay}s",
            "  ✓ Check: Screen lock password required",
        ]
    else:
        lines.append("  ✗ Check: Screen lock password not required")
    return lines


def _enrollment_lines(sec: SecurityPosture) -> list[str]:
    lines = ["Mobile Device Management (MDM):"]
    if sec.dep_enrolled:
        lines += [
            "  Status: ⚠ Supervised/DEP Enrolled (Organization-managed)",
            "  Warning: Personal Macs should not be DEP/supervised enrolled",
        ]
    if sec.mdm_enrolled:
        lines += [
            "  Status: ⚠ MDM Enrolled (Organization-managed)",
            "  Warning: Personal Macs typically should not be MDM enrolled",
        ]
    if sec.profiles:
        lines.append(f"  Profiles: {len(sec.profiles)} configuration profile(s) installed")
        lines += [f"    - {name}" for name in sec.profiles[:MAX_LISTED_PROFILES]]
    if not sec.managed:
        lines.append("  Status: ✓ Not enrolled (Clean Personal Mac)")
    return lines


def render_security(sec: SecurityPosture, ctx: RenderContext) -> list[str]:
    sip = "enabled" if sec.sip_enabled else "disabled"
    lines = [
        "System Integrity Protection (SIP):",
        f"  Status: {sip}",
        check(sec.sip_enabled, "Enabled", "Disabled"),
        "",
        "FileVault (Full Disk Encryption):",
        f"  Status: {on_off(sec.filevault_on)}",
    ]
    if sec.filevault_on and sec.filevault_users is not None:
        lines.append(f"  Users with access: {sec.filevault_users}")
    lines.append(check(sec.filevault_on, "Enabled", "Disabled"))

    lines += [""] + _firewall_lines(sec)

    policy = "Enforced" if sec.gatekeeper_policy_enforced else "Not enforced"
    lines += [
        "",
        "Gatekeeper (App Security):",
        f"  Status: {sec.gatekeeper_status or UNKNOWN}",
        f"  Policy: {policy}",
        check(sec.gatekeeper_enabled, "Enabled", "Disabled"),
        "",
        "Software Updates:",
        f"  Auto Check: {on_off(sec.auto_check)}",
        f"  Auto Download: {on_off(sec.auto_download)}",
        f"  Auto Install: {on_off(sec.auto_install)}",
        check(sec.auto_check, "Automatic updates enabled", "Automatic updates disabled"),
    ]

    lines += [""] + _screen_lock_lines(sec)

    admins = sec.admin_count if sec.admin_count is not None else UNKNOWN
    if sec.current_user_is_admin is None:
        user_type = UNKNOWN
    else:
        user_type = "Yes (Admin)" if sec.current_user_is_admin else "No (Standard)"
    lines += [
        "",
        "User Accounts:",
        f"  Admin accounts: {admins}",
        f"  Current user: {sec.current_user or UNKNOWN}",
        f"  Current user type: {user_type}",
        "",
        "Automatic Login:",
    ]
    if sec.auto_login_user:
        lines += [f"  Status: Enabled (User: {sec.auto_login_user})", "  ✗ Check: Automatic login enabled"]
    else:
        lines += ["  Status: Disabled", "  ✓ Check: Automatic login disabled"]

    lines += [""] + _enrollment_lines(sec)
    lines += ["", SCORE_RULE, f"Overall Status: {classify_security(sec.score, sec.max_score)}"]
    return lines


# ── NETWORK ────────────────────────────────────────────


def render_network(net: NetworkState, ctx: RenderContext) -> list[str]:
    lines = [
        "IP Address:",
        f"  {net.ip_address or UNKNOWN}",
        "",
        "Status:",
        f"  {net.status or UNKNOWN}",
        "",
        "Connected Network:",
    ]
    details = [f"  {key}: {value}" for key, value in net.wireless.items()]
    lines += details or ["  None"]
    lines.append("")

    signal = classify_signal(net.signal_dbm)
    if signal is not None:
        lines += [
            f"Status: {signal}",
            "Reference: -30 dBm = Excellent, -50 dBm = Good, -60 dBm = Fair",
            "           -70 dBm = Weak, -80 dBm = Very weak, -90 dBm = Unusable",
        ]
    else:
        lines.append(f"Status: {classify_link(net.status)}")
    return lines


SECTIONS: list[Section] = [
    Section("system", "SYSTEM INFO", render_system),
    Section("hardware", "HARDWARE", render_hardware),
    Section("usage", "DEVICE USAGE", render_usage),
    Section("load", "CPU & LOAD", render_load),
    Section("memory", "MEMORY", render_memory),
    Section("storage", "STORAGE", render_storage),
    Section("battery", "BATTERY", render_battery),
    Section("security", "SECURITY", render_security),
    Section("network", "NETWORK", render_network),
]

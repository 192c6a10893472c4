"""Static health-threshold rules.

Each function maps one metric to an ``Assessment`` or returns ``None`` when
the metric is unknown.
"""

from __future__ import annotations

from macaudit.models import Assessment, Marker, Rating

HEALTHY_NORMAL_CONDITION = "Normal"


def _a(rating: Rating, marker: Marker, label: str) -> Assessment:
    return Assessment(rating=rating, marker=marker, label=label)


def classify_load(load_average: float | None, core_count: int | None) -> Assessment | None:
    if load_average is None or not core_count:
        return None
    if load_average < core_count:
        return _a(Rating.HEALTHY, Marker.OK, "Healthy (Load < CPU cores)")
    return _a(Rating.HIGH, Marker.WARN, "High Load (Load >= CPU cores)")


def classify_memory(used_percent: int | None) -> Assessment | None:
    if used_percent is None:
        return None
    detail = f"({used_percent}% used)"
    if used_percent < 80:
        return _a(Rating.HEALTHY, Marker.OK, f"Healthy {detail}")
    if used_percent < 90:
        return _a(Rating.MODERATE, Marker.WARN, f"Moderate {detail}")
    return _a(Rating.CRITICAL, Marker.FAIL, f"Critical {detail}")


def classify_storage(used_percent: int | None) -> Assessment | None:
    if used_percent is None:
        return None
    detail = f"({used_percent}% used)"
    if used_percent < 80:
        return _a(Rating.HEALTHY, Marker.OK, f"Healthy {detail}")
    if used_percent < 90:
        return _a(Rating.MODERATE, Marker.WARN, f"Moderate {detail}")
    if used_percent < 95:
        return _a(Rating.HIGH, Marker.WARN, f"High {detail}")
    return _a(Rating.CRITICAL, Marker.FAIL, f"Critical {detail}")


def classify_battery(
    condition: str | None,
    max_capacity: int | None,
    cycle_count: int | None = None,
) -> Assessment | None:
    if max_capacity is None:
        return None
    cycles = cycle_count if cycle_count is not None else "unknown"
    detail = f"({max_capacity}%, {cycles} cycles)"
    if condition == HEALTHY_NORMAL_CONDITION and max_capacity >= 80:
        return _a(Rating.HEALTHY, Marker.OK, f"Healthy {detail}")
    if max_capacity >= 70:
        return _a(Rating.FAIR, Marker.WARN, f"Fair {detail}")
    return _a(Rating.REPLACE_SOON, Marker.FAIL, f"Replace Soon {detail}")


def classify_signal(signal_dbm: int | None) -> Assessment | None:
    if signal_dbm is None:
        return None
    detail = f"({signal_dbm} dBm)"
    if signal_dbm > -50:
        return _a(Rating.EXCELLENT, Marker.OK, f"Excellent signal {detail}")
    if signal_dbm > -60:
        return _a(Rating.GOOD, Marker.OK, f"Good signal {detail}")
    if signal_dbm > -70:
        return _a(Rating.FAIR, Marker.WARN, f"Fair signal {detail}")
    return _a(Rating.WEAK, Marker.FAIL, f"Weak signal {detail}")


def classify_link(status: str | None) -> Assessment:
    if status == "active":
        return _a(Rating.CONNECTED, Marker.OK, "Connected (Wired)")
    return _a(Rating.DISCONNECTED, Marker.FAIL, "Disconnected")


def classify_reboot_cadence(average_days: float | None) -> Assessment | None:
    if average_days is None:
        return None
    whole_days = int(average_days)
    if whole_days > 30:
        return _a(
            Rating.INFREQUENT,
            Marker.WARN,
            "Infrequent reboots (consider restarting more often for updates)",
        )
    if whole_days > 7:
        return _a(Rating.MODERATE, Marker.OK, "Moderate usage (healthy reboot frequency)")
    return _a(
        Rating.FREQUENT,
        Marker.INFO,
        "Frequent reboots (may indicate stability issues or testing)",
    )


def classify_security(score: int, max_score: int = 8) -> Assessment:
    detail = f"({score}/{max_score} checks passed)"
    if score >= 7:
        return _a(Rating.EXCELLENT, Marker.OK, f"Excellent Security {detail}")
    if score >= 5:
        return _a(Rating.GOOD, Marker.WARN, f"Good Security {detail}")
    if score >= 3:
        return _a(Rating.FAIR, Marker.WARN, f"Fair Security {detail}")
    return _a(Rating.POOR, Marker.FAIL, f"Poor Security {detail}")

"""Tests for macaudit.models: derived values and enums."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from macaudit.models import (
    MAX_SECURITY_SCORE,
    Assessment,
    FirewallState,
    Marker,
    MemoryUsage,
    Rating,
    RebootEvent,
    RunMetadata,
    ScreenLock,
    SecurityPosture,
    UsageMetrics,
)

GIB = 1024 ** 3


class TestRating:
    def test_values_are_snake_case(self):
        for member in Rating:
            assert member.value == member.name.lower()


class TestAssessment:
    def test_str_has_marker_and_label(self):
        a = Assessment(rating=Rating.HEALTHY, marker=Marker.OK, label="Healthy")
        assert str(a) == "✓ Healthy"


class TestMemoryUsage:
    def test_used_is_active_inactive_wired(self):
        m = MemoryUsage(total=32 * GIB, free=4 * GIB, active=10 * GIB, inactive=8 * GIB, wired=6 * GIB)
        assert m.used == 24 * GIB
        assert m.used_percent == 75

    def test_percent_is_truncated(self):
        m = MemoryUsage(total=1000, active=799, inactive=0, wired=0)
        assert m.used_percent == 79

    def test_zero_total(self):
        assert MemoryUsage(total=0, active=1, inactive=1, wired=1).used_percent is None


class TestUsageMetrics:
    def _events(self, kinds):
        return [RebootEvent(kind=k) for k in kinds]

    def test_counts(self):
        u = UsageMetrics(events=self._events(["reboot", "shutdown", "reboot"]))
        assert (u.total_events, u.reboot_count, u.shutdown_count) == (3, 2, 1)

    def test_average_prefers_days_since_setup(self):
        u = UsageMetrics(days_since_install=300, days_since_setup=90, events=self._events(["reboot"] * 4))
        assert u.average_days_between_events == 22.5

    def test_average_falls_back_to_install(self):
        u = UsageMetrics(days_since_install=100, events=self._events(["reboot"] * 3))
        assert u.average_days_between_events == 33.3

    def test_average_needs_two_events(self):
        u = UsageMetrics(days_since_setup=90, events=self._events(["reboot"]))
        assert u.average_days_between_events is None

    def test_setup_differs(self):
        t = datetime(2024, 1, 1)
        assert UsageMetrics(installed_at=t, last_setup_at=t).setup_differs is False
        assert UsageMetrics(installed_at=t, last_setup_at=datetime(2024, 6, 1)).setup_differs is True


class TestSecurityPosture:
    def test_default_posture(self):
        p = SecurityPosture()
        assert p.firewall == FirewallState.UNKNOWN
        assert p.max_score == MAX_SECURITY_SCORE == 8
        assert len(p.checks) == 8
        assert p.score == 1  # no automatic login

    def test_every_check_counts_once(self):
        p = SecurityPosture(
            sip_enabled=True,
            filevault_on=True,
            firewall=FirewallState.ENABLED,
            stealth_mode=True,
            gatekeeper_status="assessments enabled",
            auto_check=True,
            screen_lock=ScreenLock(ask_for_password=True),
        )
        assert p.score == 8

    def test_apple_silicon_screen_lock(self):
        assert ScreenLock(apple_silicon=True).password_required is True


class TestRunMetadata:
    def test_report_filename(self):
        m = RunMetadata(timestamp=datetime(2025, 10, 20, 9, 5, 3), hostname="Studio Mac", architecture="arm64")
        assert m.report_filename == "mac_audit_Studio Mac_2025-10-20_09-05-03.txt"
        assert m.apple_silicon is True

    def test_slash_in_hostname(self):
        m = RunMetadata(timestamp=datetime(2025, 1, 1), hostname="a/b", architecture="x86_64")
        assert "/" not in m.report_filename
        assert m.output_path is None
        m.output_path = Path("/tmp") / m.report_filename
        assert m.output_path.name == m.report_filename

"""Tests for macaudit.engine.classifier: threshold boundaries."""

from __future__ import annotations

import pytest

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
from macaudit.models import Marker, Rating


class TestLoad:
    @pytest.mark.parametrize("load,cores", [(0.0, 8), (3.5, 8), (7.99, 8), (0.5, 1)])
    def test_below_cores_is_healthy(self, load, cores):
        assert classify_load(load, cores).rating == Rating.HEALTHY

    def test_equal_to_cores_is_high(self):
        result = classify_load(8.0, 8)
        assert result.rating == Rating.HIGH
        assert result.marker == Marker.WARN

    def test_above_cores_is_high(self):
        assert classify_load(12.3, 8).rating == Rating.HIGH

    def test_unknown_inputs(self):
        assert classify_load(None, 8) is None
        assert classify_load(1.0, None) is None


class TestMemory:
    @pytest.mark.parametrize(
        "percent,expected",
        [
            (0, Rating.HEALTHY),
            (79, Rating.HEALTHY),
            (80, Rating.MODERATE),
            (89, Rating.MODERATE),
            (90, Rating.CRITICAL),
            (100, Rating.CRITICAL),
        ],
    )
    def test_boundaries(self, percent, expected):
        assert classify_memory(percent).rating == expected

    def test_label_includes_percent(self):
        assert str(classify_memory(85)) == "⚠ Moderate (85% used)"

    def test_unknown(self):
        assert classify_memory(None) is None


class TestStorage:
    @pytest.mark.parametrize(
        "percent,expected",
        [
            (79, Rating.HEALTHY),
            (80, Rating.MODERATE),
            (89, Rating.MODERATE),
            (90, Rating.HIGH),
            (94, Rating.HIGH),
            (95, Rating.CRITICAL),
            (100, Rating.CRITICAL),
        ],
    )
    def test_boundaries(self, percent, expected):
        assert classify_storage(percent).rating == expected

    def test_critical_marker(self):
        assert classify_storage(97).marker == Marker.FAIL


class TestBattery:
    def test_normal_at_80_is_healthy(self):
        assert classify_battery("Normal", 80).rating == Rating.HEALTHY

    def test_normal_at_79_is_fair(self):
        assert classify_battery("Normal", 79).rating == Rating.FAIR

    def test_service_recommended_at_85_is_fair(self):
        assert classify_battery("Service Recommended", 85).rating == Rating.FAIR

    @pytest.mark.parametrize("condition", ["Normal", "Service Recommended", None])
    def test_69_is_replace_soon_regardless_of_condition(self, condition):
        assert classify_battery(condition, 69).rating == Rating.REPLACE_SOON

    def test_70_is_fair(self):
        assert classify_battery("Service Recommended", 70).rating == Rating.FAIR

    def test_label_mentions_cycles(self):
        result = classify_battery("Normal", 92, cycle_count=312)
        assert result.label == "Healthy (92%, 312 cycles)"

    def test_unknown_capacity(self):
        assert classify_battery("Normal", None) is None


class TestSignal:
    @pytest.mark.parametrize(
        "dbm,expected",
        [
            (-30, Rating.EXCELLENT),
            (-49, Rating.EXCELLENT),
            (-50, Rating.GOOD),
            (-59, Rating.GOOD),
            (-60, Rating.FAIR),
            (-69, Rating.FAIR),
            (-70, Rating.WEAK),
            (-90, Rating.WEAK),
        ],
    )
    def test_boundaries(self, dbm, expected):
        assert classify_signal(dbm).rating == expected

    def test_no_signal(self):
        assert classify_signal(None) is None


class TestLink:
    def test_active_is_connected(self):
        assert classify_link("active").rating == Rating.CONNECTED

    @pytest.mark.parametrize("status", ["inactive", None, ""])
    def test_anything_else_is_disconnected(self, status):
        assert classify_link(status).rating == Rating.DISCONNECTED


class TestRebootCadence:
    @pytest.mark.parametrize(
        "average,expected",
        [
            (45.0, Rating.INFREQUENT),
            (31.0, Rating.INFREQUENT),
            (30.9, Rating.MODERATE),  # whole days compared
            (8.0, Rating.MODERATE),
            (7.9, Rating.FREQUENT),
            (0.5, Rating.FREQUENT),
        ],
    )
    def test_boundaries(self, average, expected):
        assert classify_reboot_cadence(average).rating == expected

    def test_markers(self):
        assert classify_reboot_cadence(40).marker == Marker.WARN
        assert classify_reboot_cadence(10).marker == Marker.OK
        assert classify_reboot_cadence(2).marker == Marker.INFO

    def test_unknown(self):
        assert classify_reboot_cadence(None) is None


class TestSecurity:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (8, Rating.EXCELLENT),
            (7, Rating.EXCELLENT),
            (6, Rating.GOOD),
            (5, Rating.GOOD),
            (4, Rating.FAIR),
            (3, Rating.FAIR),
            (2, Rating.POOR),
            (0, Rating.POOR),
        ],
    )
    def test_boundaries(self, score, expected):
        assert classify_security(score).rating == expected

    def test_label(self):
        assert str(classify_security(7)) == "✓ Excellent Security (7/8 checks passed)"

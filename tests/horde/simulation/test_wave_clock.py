"""Unit tests for WaveClock."""
from __future__ import annotations

import pytest

from horde.simulation.clock import WaveClock

pytestmark = pytest.mark.unit


class TestWaveClock:
    def test_starts_at_zero(self):
        clock = WaveClock()
        assert clock.elapsed_seconds == 0.0
        assert clock.wave_index == 0
        assert clock.wave_duration_seconds == 30.0

    def test_advance_accumulates(self):
        clock = WaveClock()
        clock.advance(1.5)
        clock.advance(2.5)
        assert clock.elapsed_seconds == 4.0

    def test_wave_index_is_floor(self):
        clock = WaveClock(wave_duration_seconds=10.0)
        clock.advance(25.0)
        assert clock.wave_index == 2

    def test_advance_reports_wave_change(self):
        clock = WaveClock(wave_duration_seconds=10.0)
        assert clock.advance(9.0) is False
        assert clock.advance(1.0) is True
        assert clock.wave_index == 1
        assert clock.advance(1.0) is False

    def test_zero_delta_is_noop(self):
        clock = WaveClock()
        clock.advance(5.0)
        assert clock.advance(0.0) is False
        assert clock.elapsed_seconds == 5.0

    def test_negative_delta_ignored(self):
        clock = WaveClock(wave_duration_seconds=10.0)
        clock.advance(15.0)
        clock.advance(-10.0)
        assert clock.elapsed_seconds == 15.0
        assert clock.wave_index == 1

    def test_tiny_wave_duration_disables_waves(self):
        clock = WaveClock(wave_duration_seconds=0.05)
        clock.advance(100.0)
        assert clock.wave_index == 0
        assert clock.wave_progress() == 0.0

    def test_wave_progress(self):
        clock = WaveClock(wave_duration_seconds=10.0)
        clock.advance(12.5)
        assert clock.wave_progress() == pytest.approx(0.25)

    def test_reset(self):
        clock = WaveClock(wave_duration_seconds=10.0)
        clock.advance(33.0)
        clock.reset()
        assert clock.elapsed_seconds == 0.0
        assert clock.wave_index == 0

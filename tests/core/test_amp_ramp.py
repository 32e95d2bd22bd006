# [TESTER] v1

from __future__ import annotations

import pytest

from stableswap.core.amp_ramp import (
    MIN_RAMP_DURATION,
    AmpRamp,
    get_current_amp,
    start_ramp,
    stop_ramp,
)
from stableswap.errors import DomainFailure


# ---------------------------------------------------------------------------
# get_current_amp
# ---------------------------------------------------------------------------

class TestGetCurrentAmp:
    def test_midpoint(self):
        assert get_current_amp(100, 200, 1000, 2000, 1500) == 150

    def test_before_start(self):
        assert get_current_amp(100, 200, 1000, 2000, 999) == 100

    def test_at_start(self):
        assert get_current_amp(100, 200, 1000, 2000, 1000) == 100

    def test_at_end(self):
        assert get_current_amp(100, 200, 1000, 2000, 2000) == 200

    def test_after_end(self):
        assert get_current_amp(100, 200, 1000, 2000, 5000) == 200

    def test_zero_length_ramp_is_target(self):
        assert get_current_amp(100, 200, 1000, 1000, 500) == 200

    def test_decreasing(self):
        assert get_current_amp(200, 100, 1000, 2000, 1500) == 150

    def test_truncation_biases_toward_start(self):
        assert get_current_amp(100, 200, 0, 3, 1) == 133
        assert get_current_amp(200, 100, 0, 3, 1) == 167


# ---------------------------------------------------------------------------
# AmpRamp
# ---------------------------------------------------------------------------

class TestAmpRamp:
    def test_constant(self):
        ramp = AmpRamp.constant(85)
        assert ramp.current(0) == 85
        assert ramp.current(10**9) == 85
        assert not ramp.is_ramping(10)

    def test_current_delegates(self):
        ramp = AmpRamp(initial_amp=100, target_amp=200, ramp_start=1000, ramp_end=2000)
        assert ramp.current(1500) == 150
        assert ramp.is_ramping(1500)

    @pytest.mark.parametrize("amp", [0, 100_001])
    def test_rejects_amp_outside_policy(self, amp):
        with pytest.raises(ValueError):
            AmpRamp.constant(amp)

    def test_rejects_reversed_window(self):
        with pytest.raises(ValueError):
            AmpRamp(initial_amp=10, target_amp=10, ramp_start=5, ramp_end=4)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            AmpRamp(initial_amp=True, target_amp=10)


# ---------------------------------------------------------------------------
# start_ramp / stop_ramp
# ---------------------------------------------------------------------------

NOW = 1_700_000_000


class TestStartRamp:
    def test_starts_from_current_amp(self):
        ramp = start_ramp(AmpRamp.constant(100), target_amp=200, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION)
        assert ramp == AmpRamp(initial_amp=100, target_amp=200, ramp_start=NOW, ramp_end=NOW + MIN_RAMP_DURATION)

    def test_too_short(self):
        with pytest.raises(DomainFailure, match="at least"):
            start_ramp(AmpRamp.constant(100), target_amp=200, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION - 1)

    def test_increase_limit(self):
        with pytest.raises(DomainFailure):
            start_ramp(AmpRamp.constant(100), target_amp=1001, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION)

    def test_decrease_limit(self):
        with pytest.raises(DomainFailure):
            start_ramp(AmpRamp.constant(100), target_amp=9, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION)

    def test_exact_limits_allowed(self):
        up = start_ramp(AmpRamp.constant(100), target_amp=1000, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION)
        down = start_ramp(AmpRamp.constant(100), target_amp=10, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION)
        assert up.target_amp == 1000
        assert down.target_amp == 10

    def test_target_outside_policy(self):
        with pytest.raises(DomainFailure):
            start_ramp(AmpRamp.constant(100_000), target_amp=100_001, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION)

    def test_locked_after_recent_ramp(self):
        ramp = start_ramp(AmpRamp.constant(100), target_amp=200, now=NOW, ramp_end=NOW + MIN_RAMP_DURATION)
        with pytest.raises(DomainFailure, match="locked"):
            start_ramp(ramp, target_amp=300, now=NOW + 10, ramp_end=NOW + 10 + MIN_RAMP_DURATION)


class TestStopRamp:
    def test_freezes_current_value(self):
        ramp = AmpRamp(initial_amp=100, target_amp=200, ramp_start=NOW, ramp_end=NOW + 86_400)
        stopped = stop_ramp(ramp, now=NOW + 43_200)
        assert stopped.current(NOW + 43_200) == 150
        assert stopped.current(NOW + 10**6) == 150
        assert not stopped.is_ramping(NOW + 50_000)

"""
Amplification ramp kernel.

A ramp moves A linearly from `initial_amp` to `target_amp` between two
timestamps. The functional core computes the current A deterministically;
the caller supplies the clock.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import DomainFailure


MIN_AMP = 1
MAX_AMP = 100_000
MIN_RAMP_DURATION = 86_400
MAX_AMP_CHANGE = 10


def get_current_amp(amp: int, target_amp: int, ramp_start: int, ramp_end: int, now: int) -> int:
    """
    Current A of a ramp from `amp` to `target_amp` over [ramp_start, ramp_end].

    Floor division biases intermediate values toward the starting amp.
    A zero-length ramp resolves to `target_amp` immediately.
    """
    if now >= ramp_end or ramp_end == ramp_start:
        return target_amp
    if now <= ramp_start:
        return amp

    elapsed = now - ramp_start
    duration = ramp_end - ramp_start
    if target_amp > amp:
        return amp + (target_amp - amp) * elapsed // duration
    return amp - (amp - target_amp) * elapsed // duration


def _require_amp(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if not (MIN_AMP <= value <= MAX_AMP):
        raise ValueError(f"{name} must be in [{MIN_AMP}, {MAX_AMP}]: {value}")


@dataclass(frozen=True)
class AmpRamp:
    """Ramp schedule: (initial A, target A, start timestamp, end timestamp)."""

    initial_amp: int
    target_amp: int
    ramp_start: int = 0
    ramp_end: int = 0

    def __post_init__(self) -> None:
        _require_amp("initial_amp", self.initial_amp)
        _require_amp("target_amp", self.target_amp)
        for name, v in (("ramp_start", self.ramp_start), ("ramp_end", self.ramp_end)):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0:
                raise ValueError(f"{name} must be non-negative: {v}")
        if self.ramp_end < self.ramp_start:
            raise ValueError(f"ramp_end ({self.ramp_end}) < ramp_start ({self.ramp_start})")

    @classmethod
    def constant(cls, amp: int) -> "AmpRamp":
        return cls(initial_amp=amp, target_amp=amp)

    def current(self, now: int) -> int:
        return get_current_amp(self.initial_amp, self.target_amp, self.ramp_start, self.ramp_end, now)

    def is_ramping(self, now: int) -> bool:
        return self.ramp_start < now < self.ramp_end


def start_ramp(ramp: AmpRamp, *, target_amp: int, now: int, ramp_end: int) -> AmpRamp:
    """
    Begin a new ramp from the current A toward `target_amp`.

    Policy limits:
    - a new ramp may start only MIN_RAMP_DURATION after the previous one started,
    - the ramp must last at least MIN_RAMP_DURATION,
    - A may change by at most a factor of MAX_AMP_CHANGE in either direction.

    Raises DomainFailure when a limit is violated.
    """
    if ramp.ramp_start != ramp.ramp_end and now < ramp.ramp_start + MIN_RAMP_DURATION:
        raise DomainFailure("ramp locked: previous ramp started too recently")
    if ramp_end < now + MIN_RAMP_DURATION:
        raise DomainFailure(f"ramp must last at least {MIN_RAMP_DURATION} seconds")
    if not (MIN_AMP <= target_amp <= MAX_AMP):
        raise DomainFailure(f"target_amp must be in [{MIN_AMP}, {MAX_AMP}]: {target_amp}")

    current = ramp.current(now)
    if target_amp > current and target_amp > current * MAX_AMP_CHANGE:
        raise DomainFailure(f"target_amp {target_amp} exceeds {MAX_AMP_CHANGE}x current amp {current}")
    if target_amp < current and target_amp * MAX_AMP_CHANGE < current:
        raise DomainFailure(f"target_amp {target_amp} below 1/{MAX_AMP_CHANGE} of current amp {current}")

    return AmpRamp(initial_amp=current, target_amp=target_amp, ramp_start=now, ramp_end=ramp_end)


def stop_ramp(ramp: AmpRamp, *, now: int) -> AmpRamp:
    """Freeze A at its current interpolated value."""
    current = ramp.current(now)
    return AmpRamp(initial_amp=current, target_amp=current, ramp_start=now, ramp_end=now)

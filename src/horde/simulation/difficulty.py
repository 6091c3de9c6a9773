"""DifficultyCurve: maps play time and wave count to a difficulty scalar.

Architecture
------------
Difficulty is a dimensionless number that drives every other derived
quantity (scaled monster stats, spawn cadence).  It is never stored or
incremented; the scheduler re-measures it from the clock every tick.

  p = minutes * time_weight + waves * wave_weight     (inputs clamped >= 0)
  p = p ** exponent                                   (skipped when exponent == 1)
  p = p / (1 + soft_cap * p)                          (skipped when soft_cap == 0)

The soft cap gives diminishing returns: as p grows without bound the
result approaches ``1 / soft_cap``.  An exponent below 1 makes early
growth sub-linear.

Defaults: time_weight=1.0 per minute, wave_weight=0.75, exponent=0.9,
soft_cap=0.15 (ceiling ~6.67).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

_DEFAULT_TIME_WEIGHT = 1.0
_DEFAULT_WAVE_WEIGHT = 0.75
_DEFAULT_EXPONENT = 0.9
_DEFAULT_SOFT_CAP = 0.15


@dataclass(frozen=True)
class DifficultyTuning:
    """Knobs for the difficulty curve."""

    time_weight_minutes: float = _DEFAULT_TIME_WEIGHT
    wave_weight: float = _DEFAULT_WAVE_WEIGHT
    global_exponent: float = _DEFAULT_EXPONENT
    soft_cap_strength: float = _DEFAULT_SOFT_CAP

    def __post_init__(self) -> None:
        if self.global_exponent <= 0:
            raise ValueError(f"global_exponent must be > 0, got {self.global_exponent}")
        if self.soft_cap_strength < 0:
            raise ValueError(f"soft_cap_strength must be >= 0, got {self.soft_cap_strength}")
        if self.time_weight_minutes < 0 or self.wave_weight < 0:
            raise ValueError("time and wave weights must be >= 0")


class DifficultyCurve:
    """Pure difficulty measurement with a diminishing-returns soft cap."""

    def __init__(self, tuning: DifficultyTuning | None = None) -> None:
        self.tuning = tuning or DifficultyTuning()

    @property
    def ceiling(self) -> float:
        """Upper bound of ``measure`` (inf when the soft cap is disabled)."""
        if self.tuning.soft_cap_strength > 0:
            return 1.0 / self.tuning.soft_cap_strength
        return math.inf

    def measure(self, elapsed_seconds: float, wave_index: int) -> float:
        t = self.tuning
        minutes = max(0.0, elapsed_seconds) / 60.0
        waves = max(0, wave_index)

        p = minutes * t.time_weight_minutes + waves * t.wave_weight
        p = max(0.0, p)

        if t.global_exponent != 1.0:
            p = p ** t.global_exponent

        if t.soft_cap_strength > 0:
            p = p / (1.0 + t.soft_cap_strength * p)

        return p

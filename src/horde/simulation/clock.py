"""WaveClock: elapsed play time and the wave index derived from it."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Wave durations at or below this are treated as "no waves": the index
# stays where it is instead of exploding.
_MIN_WAVE_DURATION = 0.1


@dataclass
class WaveClock:
    """Cooperative clock advanced by the scheduler's tick."""

    wave_duration_seconds: float = 30.0
    elapsed_seconds: float = 0.0
    wave_index: int = 0

    def advance(self, delta_seconds: float) -> bool:
        """Move time forward. Returns True when the wave index changed.

        Negative deltas are ignored so the clock stays monotonic.
        """
        if delta_seconds > 0:
            self.elapsed_seconds += delta_seconds

        if self.wave_duration_seconds > _MIN_WAVE_DURATION:
            new_wave = math.floor(self.elapsed_seconds / self.wave_duration_seconds)
            if new_wave != self.wave_index:
                self.wave_index = new_wave
                return True
        return False

    def reset(self) -> None:
        self.elapsed_seconds = 0.0
        self.wave_index = 0

    def wave_progress(self) -> float:
        """Fraction of the current wave already elapsed, in [0, 1)."""
        if self.wave_duration_seconds <= _MIN_WAVE_DURATION:
            return 0.0
        return (self.elapsed_seconds % self.wave_duration_seconds) / self.wave_duration_seconds

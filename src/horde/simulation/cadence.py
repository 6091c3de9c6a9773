"""SpawnCadenceModel: time between spawns for a monster at a difficulty."""

from __future__ import annotations

from .catalog import MonsterDefinition

INTERVAL_FLOOR_SECONDS = 0.1


class SpawnCadenceModel:
    """Shrinks a monster's base spawn interval as difficulty rises.

    interval = base_interval / (1 + mul_spawn_interval * d), never below
    ``floor_seconds`` so an extreme difficulty cannot cause a spawn storm.
    """

    def __init__(self, floor_seconds: float = INTERVAL_FLOOR_SECONDS) -> None:
        if floor_seconds <= 0:
            raise ValueError(f"floor_seconds must be > 0, got {floor_seconds}")
        self.floor_seconds = floor_seconds

    def interval(self, definition: MonsterDefinition, difficulty: float) -> float:
        d = max(0.0, difficulty)
        interval_mul = 1.0 + definition.mul_spawn_interval * d
        if interval_mul <= 0:
            # Negative multipliers can only come from hand-built definitions
            return max(self.floor_seconds, definition.spawn_interval)
        interval = definition.spawn_interval / interval_mul
        return max(self.floor_seconds, interval)

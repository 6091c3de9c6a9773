"""Messages the scheduler hands to its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .catalog import MonsterType
from .scaling import ScaledStats
from .spawn_points import Position


class SpawnCondition(str, Enum):
    """Non-fatal problems reported by the scheduler."""

    CONFIGURATION_MISSING = "configuration_missing"
    CACHE_MISS = "cache_miss"


@dataclass(frozen=True)
class SpawnCommand:
    """Instructs the spawn executor to materialise one monster.

    ``scaled_stats`` is a point-in-time value, never a reference into the
    scheduler's cache.  It is None when the cache had no entry for the type.
    """

    sequence: int
    monster_type: MonsterType
    template: str | None
    position: Position | None
    scaled_stats: ScaledStats | None
    wave_index: int
    elapsed_seconds: float

    def to_dict(self) -> dict:
        return {
            "sequence": self.sequence,
            "monster_type": self.monster_type.value,
            "template": self.template,
            "position": list(self.position) if self.position is not None else None,
            "scaled_stats": self.scaled_stats.to_dict() if self.scaled_stats else None,
            "wave_index": self.wave_index,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
        }


@dataclass(frozen=True)
class ConditionReport:
    """One reported condition, kept in the scheduler's condition log."""

    condition: SpawnCondition
    message: str
    elapsed_seconds: float
    details: dict = field(default_factory=dict)


# Fire-and-forget: the return value is ignored.
SpawnExecutor = Callable[[SpawnCommand], object]

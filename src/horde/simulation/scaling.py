"""StatScaler: difficulty-scaled combat stats for every catalog entry.

Each stat grows linearly with difficulty using the monster's own
multiplier:

  hp     = round(base_hp     * (1 + mul_hp     * d))
  damage = round(base_damage * (1 + mul_damage * d))
  speed  =       base_speed  * (1 + mul_speed  * d)

``round`` is Python's built-in round-half-to-even, so x.5 ties go to the even
neighbour (4.5 -> 4, 7.5 -> 8).
"""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import MonsterCatalog, MonsterDefinition, MonsterType


@dataclass(frozen=True)
class ScaledStats:
    """Combat stats of one monster type at a given difficulty."""

    monster_type: MonsterType
    hp: int
    damage: int
    speed: float

    def to_dict(self) -> dict:
        return {
            "monster_type": self.monster_type.value,
            "hp": self.hp,
            "damage": self.damage,
            "speed": self.speed,
        }


class StatScaler:
    """Stateless transform from (difficulty, catalog) to scaled stats."""

    def scale_one(self, definition: MonsterDefinition, difficulty: float) -> ScaledStats:
        d = max(0.0, difficulty)
        return ScaledStats(
            monster_type=definition.monster_type,
            hp=round(definition.hp * (1.0 + definition.mul_hp * d)),
            damage=round(definition.damage * (1.0 + definition.mul_damage * d)),
            speed=definition.speed * (1.0 + definition.mul_speed * d),
        )

    def scale_all(
        self, difficulty: float, catalog: MonsterCatalog | None,
    ) -> dict[MonsterType, ScaledStats] | None:
        """Scale every catalog entry. Returns None when there is no catalog."""
        if catalog is None or catalog.is_empty():
            return None
        return {m.monster_type: self.scale_one(m, difficulty) for m in catalog}

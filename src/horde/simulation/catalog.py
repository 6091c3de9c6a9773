"""Monster catalog: immutable monster definitions and the JSON loader.

The catalog is read-only configuration: it is loaded once, validated, and
never mutated by the spawning core.  File format::

    {
      "monsters": [
        {
          "type": "goblin",
          "template": "prefabs/goblin",
          "hp": 100, "damage": 8, "speed": 3.5,
          "spawn_interval": 2.0,
          "mul_hp": 0.5, "mul_damage": 0.3,
          "mul_speed": 0.1, "mul_spawn_interval": 0.4
        }
      ]
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "monsters.json"


class MonsterType(str, Enum):
    """Identity tag for a monster kind."""

    SLIME = "slime"
    GOBLIN = "goblin"
    SKELETON = "skeleton"
    WOLF = "wolf"
    ORC = "orc"
    WRAITH = "wraith"


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or fails validation."""


@dataclass(frozen=True)
class MonsterDefinition:
    """Immutable catalog entry: base stats plus per-stat difficulty multipliers."""

    monster_type: MonsterType
    hp: int
    damage: int
    speed: float
    spawn_interval: float
    mul_hp: float = 0.0
    mul_damage: float = 0.0
    mul_speed: float = 0.0
    mul_spawn_interval: float = 0.0
    template: str | None = None  # instantiation template key; None = unset


class MonsterCatalog:
    """Ordered, read-only sequence of MonsterDefinition, one per type."""

    def __init__(self, monsters: list[MonsterDefinition] | tuple[MonsterDefinition, ...] = ()) -> None:
        self._monsters: tuple[MonsterDefinition, ...] = tuple(monsters)

    def __len__(self) -> int:
        return len(self._monsters)

    def __iter__(self) -> Iterator[MonsterDefinition]:
        return iter(self._monsters)

    def __getitem__(self, index: int) -> MonsterDefinition:
        return self._monsters[index]

    def __repr__(self) -> str:
        return f"<MonsterCatalog {[m.monster_type.value for m in self._monsters]}>"

    @property
    def monsters(self) -> tuple[MonsterDefinition, ...]:
        return self._monsters

    def is_empty(self) -> bool:
        return not self._monsters

    def get(self, monster_type: MonsterType) -> MonsterDefinition | None:
        for m in self._monsters:
            if m.monster_type is monster_type:
                return m
        return None

    def types(self) -> list[MonsterType]:
        return [m.monster_type for m in self._monsters]


# -- File schema ---------------------------------------------------------------


class MonsterEntry(BaseModel):
    """On-disk shape of a single monster definition."""

    type: MonsterType
    template: str | None = None
    hp: int = Field(ge=0)
    damage: int = Field(ge=0)
    speed: float = Field(ge=0.0)
    spawn_interval: float = Field(gt=0.0)
    mul_hp: float = 0.0
    mul_damage: float = 0.0
    mul_speed: float = 0.0
    mul_spawn_interval: float = Field(default=0.0, ge=0.0)

    def to_definition(self) -> MonsterDefinition:
        return MonsterDefinition(
            monster_type=self.type,
            hp=self.hp,
            damage=self.damage,
            speed=self.speed,
            spawn_interval=self.spawn_interval,
            mul_hp=self.mul_hp,
            mul_damage=self.mul_damage,
            mul_speed=self.mul_speed,
            mul_spawn_interval=self.mul_spawn_interval,
            template=self.template or None,
        )


class CatalogFile(BaseModel):
    monsters: list[MonsterEntry] = Field(default_factory=list)


def parse_catalog(data: dict) -> MonsterCatalog:
    """Validate a decoded catalog document and build a MonsterCatalog."""
    try:
        doc = CatalogFile.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid monster catalog: {e}") from e

    seen: set[MonsterType] = set()
    for entry in doc.monsters:
        if entry.type in seen:
            raise CatalogError(f"Duplicate monster type in catalog: {entry.type.value}")
        seen.add(entry.type)

    return MonsterCatalog([entry.to_definition() for entry in doc.monsters])


def load_catalog(path: str | Path | None = None) -> MonsterCatalog:
    """Load a monster catalog from a JSON file (defaults to the bundled one)."""
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    try:
        data = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogError(f"Monster catalog not found: {catalog_path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Monster catalog is not valid JSON: {catalog_path}: {e}") from e

    catalog = parse_catalog(data)
    logger.info(f"Monster catalog: loaded {len(catalog)} monsters from {catalog_path}")
    return catalog

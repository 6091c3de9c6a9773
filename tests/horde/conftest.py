"""Shared fixtures for spawning-core tests."""

from __future__ import annotations

import random

import pytest

from horde.comms.event_bus import EventBus
from horde.simulation.catalog import MonsterCatalog, MonsterDefinition, MonsterType
from horde.simulation.commands import SpawnCommand


class RecordingExecutor:
    """Spawn executor that keeps every command it receives."""

    def __init__(self) -> None:
        self.commands: list[SpawnCommand] = []

    def __call__(self, command: SpawnCommand) -> None:
        self.commands.append(command)


class SequenceRng(random.Random):
    """Random whose ``choice`` returns catalog entries by scripted index."""

    def __init__(self, picks: list[int]) -> None:
        super().__init__(0)
        self._picks = list(picks)

    def choice(self, seq):
        idx = self._picks.pop(0) if self._picks else 0
        return seq[idx]


@pytest.fixture
def goblin() -> MonsterDefinition:
    return MonsterDefinition(
        monster_type=MonsterType.GOBLIN,
        hp=100, damage=10, speed=3.0,
        spawn_interval=2.0,
        mul_hp=0.5, mul_damage=0.25, mul_speed=0.1, mul_spawn_interval=1.0,
        template="monsters/goblin",
    )


@pytest.fixture
def orc() -> MonsterDefinition:
    return MonsterDefinition(
        monster_type=MonsterType.ORC,
        hp=300, damage=20, speed=2.0,
        spawn_interval=5.0,
        mul_hp=0.5, mul_damage=0.5, mul_speed=0.0, mul_spawn_interval=0.5,
        template="monsters/orc",
    )


@pytest.fixture
def catalog(goblin, orc) -> MonsterCatalog:
    return MonsterCatalog([goblin, orc])


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def sequence_rng():
    """Factory: ``sequence_rng([0, 1])`` scripts which catalog entries get picked."""
    return SequenceRng

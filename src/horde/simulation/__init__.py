"""Spawning core: difficulty curve, stat scaling, cadence, wave scheduler."""
from .cadence import INTERVAL_FLOOR_SECONDS, SpawnCadenceModel
from .catalog import (
    CatalogError,
    MonsterCatalog,
    MonsterDefinition,
    MonsterType,
    load_catalog,
    parse_catalog,
)
from .clock import WaveClock
from .commands import ConditionReport, SpawnCommand, SpawnCondition
from .difficulty import DifficultyCurve, DifficultyTuning
from .headless import RunSummary, SpawnRecorder, run_headless
from .scaling import ScaledStats, StatScaler
from .spawn_points import PositionProvider, SpawnPointProvider
from .spawn_timer import SpawnTimer
from .wave_scheduler import SpawnSession, WaveScheduler

__all__ = [
    "CatalogError",
    "ConditionReport",
    "DifficultyCurve",
    "DifficultyTuning",
    "INTERVAL_FLOOR_SECONDS",
    "MonsterCatalog",
    "MonsterDefinition",
    "MonsterType",
    "PositionProvider",
    "RunSummary",
    "ScaledStats",
    "SpawnCadenceModel",
    "SpawnCommand",
    "SpawnCondition",
    "SpawnPointProvider",
    "SpawnRecorder",
    "SpawnSession",
    "SpawnTimer",
    "StatScaler",
    "WaveClock",
    "WaveScheduler",
    "load_catalog",
    "parse_catalog",
    "run_headless",
]

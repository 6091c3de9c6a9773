"""Spawn position providers.

The scheduler never picks or validates positions itself; it asks a
PositionProvider for one per spawn command and forwards whatever it gets.
SpawnPointProvider selects from a fixed list of points:

  cycle: walk the list in order and wrap around
  random: uniform pick (seedable via the injected Random)
  external: caller chooses via ``set_next_index`` (clamped into range)
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from loguru import logger

from .catalog import MonsterType

Position = tuple[float, float, float]

POLICY_CYCLE = "cycle"
POLICY_RANDOM = "random"
POLICY_EXTERNAL = "external"
POLICIES = (POLICY_CYCLE, POLICY_RANDOM, POLICY_EXTERNAL)


class PositionProvider(ABC):
    """Supplies a spawn position for each spawn command."""

    @abstractmethod
    def next_position(self, monster_type: MonsterType | None = None) -> Position | None:
        """Return the next spawn position, or None when none is available."""


class SpawnPointProvider(PositionProvider):
    """Picks spawn positions from an externally provided list of points."""

    def __init__(
        self,
        points: list[Position] | None = None,
        policy: str = POLICY_CYCLE,
        rng: random.Random | None = None,
    ) -> None:
        if policy not in POLICIES:
            raise ValueError(f"Unknown spawn point policy: {policy!r}")
        self.policy = policy
        self._points: list[Position] = list(points or [])
        self._rng = rng or random.Random()
        self._cycle_index = 0
        self._external_index = 0

    @property
    def points(self) -> list[Position]:
        return list(self._points)

    def set_points(self, points: list[Position] | None) -> None:
        """Replace the point list. Resets the cycle for determinism."""
        self._points = list(points or [])
        self._cycle_index = 0

    def set_next_index(self, index: int) -> None:
        """Only used by the ``external`` policy."""
        self._external_index = index

    def next_position(self, monster_type: MonsterType | None = None) -> Position | None:
        if not self._points:
            logger.error("[SpawnPoints] Cannot pick spawn position: point list is empty")
            return None

        if self.policy == POLICY_RANDOM:
            idx = self._rng.randrange(len(self._points))
        elif self.policy == POLICY_EXTERNAL:
            idx = min(max(self._external_index, 0), len(self._points) - 1)
        else:
            idx = self._next_cycle_index()
        return self._points[idx]

    def _next_cycle_index(self) -> int:
        if self._cycle_index >= len(self._points):
            self._cycle_index = 0
        idx = self._cycle_index
        self._cycle_index = (self._cycle_index + 1) % len(self._points)
        return idx

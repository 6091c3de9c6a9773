"""WaveScheduler: wave clock, difficulty, stat cache and spawn cadence.

Architecture
------------
The scheduler is the only stateful piece of the spawning core.  It wires
three pure components together and drives them from a cooperative tick:

  tick(dt)
    -> WaveClock.advance(dt)                 elapsed time + wave index
    -> DifficultyCurve.measure(...)          difficulty scalar
    -> StatScaler.scale_all(...)             type -> ScaledStats cache (full rebuild)
    -> SpawnCadenceModel.interval(...)       interval for the selected monster
    -> SpawnTimer.retarget / advance         re-arm on change, count down
    -> on expiry: SpawnCommand -> executor   fire-and-forget, also published

State machine:

  idle --start_wave()--> running --stop_wave()--> idle
  running --change_monster_and_restart()--> running   (new monster, fresh timer)

At most one SpawnSession exists; starting or swapping always cancels the
previously armed countdown.  Failed preconditions never raise: they are
reported as ``configuration_missing`` (logged, kept in ``conditions`` and
published as ``spawn_condition``) and leave the state untouched.

Monster selection is a uniform random pick over the catalog.

Cadence changes use the configured re-arm policy.  The default ``next``
policy stores the new interval and lets the running wait finish, so it
applies from the following spawn.  ``restart`` starts the wait over from
zero on every change larger than the retune epsilon, which starves spawns
while the curve keeps moving; ``preserve`` keeps the time already waited.

Events published on the EventBus:
  - ``wave_state_change``: start, stop or monster swap (payload: get_state())
  - ``wave_advanced``: wave index changed
  - ``spawn_command``: SpawnCommand.to_dict()
  - ``spawn_condition``: condition, message, details
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from horde.comms.channel import StateChannel
from horde.config import Settings, settings

from .cadence import SpawnCadenceModel
from .catalog import MonsterCatalog, MonsterDefinition, MonsterType, load_catalog
from .clock import WaveClock
from .commands import ConditionReport, SpawnCommand, SpawnCondition, SpawnExecutor
from .difficulty import DifficultyCurve, DifficultyTuning
from .scaling import ScaledStats, StatScaler
from .spawn_points import PositionProvider
from .spawn_timer import REARM_NEXT, REARM_POLICIES, SpawnTimer

if TYPE_CHECKING:
    from horde.comms.event_bus import EventBus

STATE_IDLE = "idle"
STATE_RUNNING = "running"

# Cadence changes smaller than this do not re-arm the timer
_RETUNE_EPSILON = 0.001

_MAX_CONDITIONS = 100


@dataclass
class SpawnSession:
    """The monster currently being spawned and its armed interval."""

    monster: MonsterDefinition
    interval_seconds: float
    running: bool = True

    @property
    def monster_type(self) -> MonsterType:
        return self.monster.monster_type


class WaveScheduler:
    """Decides what to spawn, how strong it is, and when."""

    STATES = (STATE_IDLE, STATE_RUNNING)

    def __init__(
        self,
        event_bus: EventBus,
        catalog: MonsterCatalog | None = None,
        clock: WaveClock | None = None,
        executor: SpawnExecutor | None = None,
        position_provider: PositionProvider | None = None,
        curve: DifficultyCurve | None = None,
        scaler: StatScaler | None = None,
        cadence: SpawnCadenceModel | None = None,
        rng: random.Random | None = None,
        rearm_policy: str = REARM_NEXT,
        retune_epsilon: float = _RETUNE_EPSILON,
        spawn_on_start: bool = False,
    ) -> None:
        if rearm_policy not in REARM_POLICIES:
            raise ValueError(f"Unknown re-arm policy: {rearm_policy!r}")

        self._event_bus = event_bus
        self._catalog = catalog
        self._clock = clock
        self._executor = executor
        self._position_provider = position_provider
        self._curve = curve or DifficultyCurve()
        self._scaler = scaler or StatScaler()
        self._cadence = cadence or SpawnCadenceModel()
        self._rng = rng or random.Random()
        self._rearm_policy = rearm_policy
        self._retune_epsilon = retune_epsilon
        self._spawn_on_start = spawn_on_start

        self.state: str = STATE_IDLE
        self.session: SpawnSession | None = None
        self.difficulty: float = 0.0
        self.spawn_count: int = 0
        self.conditions: deque[ConditionReport] = deque(maxlen=_MAX_CONDITIONS)
        self.condition_count: int = 0
        self.running_channel: StateChannel[bool] = StateChannel("wave_running", False)

        self._timer = SpawnTimer()
        self._scaled_by_type: dict[MonsterType, ScaledStats] = {}

    @classmethod
    def from_settings(
        cls,
        event_bus: EventBus,
        cfg: Settings | None = None,
        catalog: MonsterCatalog | None = None,
        executor: SpawnExecutor | None = None,
        position_provider: PositionProvider | None = None,
    ) -> WaveScheduler:
        """Build a scheduler (and its clock/curve/cadence) from Settings.

        ``cfg`` defaults to the process-wide ``horde.config.settings``.
        Without an explicit catalog the one at ``cfg.catalog_path`` (or the
        bundled default) is loaded; a bad file raises CatalogError here.
        """
        if cfg is None:
            cfg = settings
        if catalog is None:
            catalog = load_catalog(cfg.catalog_path or None)
        tuning = DifficultyTuning(
            time_weight_minutes=cfg.time_weight_minutes,
            wave_weight=cfg.wave_weight,
            global_exponent=cfg.global_exponent,
            soft_cap_strength=cfg.soft_cap_strength,
        )
        return cls(
            event_bus,
            catalog=catalog,
            clock=WaveClock(wave_duration_seconds=cfg.wave_duration_seconds),
            executor=executor,
            position_provider=position_provider,
            curve=DifficultyCurve(tuning),
            cadence=SpawnCadenceModel(cfg.interval_floor_seconds),
            rng=random.Random(cfg.rng_seed),
            rearm_policy=cfg.rearm_policy,
            retune_epsilon=cfg.retune_epsilon_seconds,
            spawn_on_start=cfg.spawn_on_start,
        )

    # -- Collaborators -----------------------------------------------------------

    @property
    def catalog(self) -> MonsterCatalog | None:
        return self._catalog

    @property
    def clock(self) -> WaveClock | None:
        return self._clock

    def set_catalog(self, catalog: MonsterCatalog | None) -> None:
        self._catalog = catalog

    def set_clock(self, clock: WaveClock | None) -> None:
        self._clock = clock

    def set_executor(self, executor: SpawnExecutor | None) -> None:
        self._executor = executor

    def set_position_provider(self, provider: PositionProvider | None) -> None:
        self._position_provider = provider

    # -- Public interface ----------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self.state == STATE_RUNNING

    @property
    def armed_interval(self) -> float | None:
        return self._timer.interval if self._timer.armed else None

    @property
    def time_until_next_spawn(self) -> float | None:
        return self._timer.remaining if self._timer.armed else None

    def start_wave(self) -> bool:
        """Pick a monster and start spawning it. Returns False on failure."""
        if not self._check_configuration("start_wave"):
            return False

        monster = self._pick_monster()
        if monster.template is None:
            self._report(
                SpawnCondition.CONFIGURATION_MISSING,
                f"start_wave: picked monster {monster.monster_type.value} has no template",
                monster_type=monster.monster_type.value,
            )
            return False

        self._begin_session(monster)
        self._set_state(STATE_RUNNING)
        logger.info(
            f"Wave started: {monster.monster_type.value} every "
            f"{self.session.interval_seconds:.3f}s (difficulty {self.difficulty:.3f})"
        )
        self._publish_state_change()
        return True

    def stop_wave(self) -> None:
        """Cancel the armed timer and go idle. No-op when already idle."""
        if self.state == STATE_IDLE and self.session is None:
            return
        self._timer.cancel()
        self.session = None
        self._set_state(STATE_IDLE)
        logger.info("Wave stopped")
        self._publish_state_change()

    def change_monster_and_restart(self) -> bool:
        """Re-pick the monster and restart the spawn timer immediately.

        While idle this behaves like ``start_wave``.  On failure the current
        session keeps running unchanged.
        """
        if self.state != STATE_RUNNING:
            logger.debug("change_monster_and_restart while idle: starting wave")
            return self.start_wave()

        if not self._check_configuration("change_monster_and_restart"):
            return False

        monster = self._pick_monster()
        if monster.template is None:
            self._report(
                SpawnCondition.CONFIGURATION_MISSING,
                f"change_monster_and_restart: picked monster "
                f"{monster.monster_type.value} has no template",
                monster_type=monster.monster_type.value,
            )
            return False

        previous = self.session.monster_type if self.session else None
        self._timer.cancel()
        self._begin_session(monster)
        logger.info(
            f"Monster changed: {previous.value if previous else None} -> "
            f"{monster.monster_type.value} every {self.session.interval_seconds:.3f}s"
        )
        self._publish_state_change()
        return True

    def tick(self, delta_seconds: float) -> None:
        """Advance time, re-derive difficulty/cache/cadence, fire if due."""
        if self._clock is None:
            return

        if self._clock.advance(delta_seconds):
            logger.info(f"Wave advanced to {self._clock.wave_index}")
            self._event_bus.publish("wave_advanced", {
                "wave_index": self._clock.wave_index,
                "elapsed_seconds": round(self._clock.elapsed_seconds, 3),
            })

        difficulty = self._refresh()

        if self.state != STATE_RUNNING or self.session is None:
            return

        self._retune(difficulty)

        if self._timer.advance(delta_seconds):
            self._fire()

    def scaled_stats(self, monster_type: MonsterType) -> ScaledStats | None:
        """Current cached stats for one type (an immutable value)."""
        return self._scaled_by_type.get(monster_type)

    def scaled_snapshot(self) -> dict[MonsterType, ScaledStats]:
        """Copy of the whole scaled-stat cache."""
        return dict(self._scaled_by_type)

    def get_state(self) -> dict:
        """Return serializable scheduler state."""
        return {
            "state": self.state,
            "wave_index": self._clock.wave_index if self._clock else 0,
            "elapsed_seconds": round(self._clock.elapsed_seconds, 3) if self._clock else 0.0,
            "difficulty": round(self.difficulty, 4),
            "monster_type": self.session.monster_type.value if self.session else None,
            "interval_seconds": round(self.session.interval_seconds, 4) if self.session else None,
            "next_spawn_in": (
                round(self._timer.remaining, 4) if self._timer.armed else None
            ),
            "spawn_count": self.spawn_count,
        }

    # -- Internals -------------------------------------------------------------------

    def _check_configuration(self, action: str) -> bool:
        missing: list[str] = []
        if self._catalog is None or self._catalog.is_empty():
            missing.append("monster catalog is missing or empty")
        if self._clock is None:
            missing.append("wave clock is not set")
        if self._executor is None:
            missing.append("spawn executor is not set")
        if missing:
            self._report(
                SpawnCondition.CONFIGURATION_MISSING,
                f"{action}: " + "; ".join(missing),
                missing=missing,
            )
            return False
        return True

    def _pick_monster(self) -> MonsterDefinition:
        return self._rng.choice(self._catalog.monsters)

    def _refresh(self) -> float:
        """Re-measure difficulty and rebuild the scaled-stat cache."""
        self.difficulty = self._curve.measure(
            self._clock.elapsed_seconds, self._clock.wave_index,
        )
        scaled = self._scaler.scale_all(self.difficulty, self._catalog)
        if scaled is not None:
            self._scaled_by_type = scaled
        return self.difficulty

    def _begin_session(self, monster: MonsterDefinition) -> None:
        difficulty = self._refresh()
        interval = self._cadence.interval(monster, difficulty)
        self.session = SpawnSession(monster=monster, interval_seconds=interval)
        self._timer.arm(interval)
        if self._spawn_on_start:
            self._fire()

    def _retune(self, difficulty: float) -> None:
        new_interval = self._cadence.interval(self.session.monster, difficulty)
        if abs(new_interval - self.session.interval_seconds) > self._retune_epsilon:
            logger.debug(
                f"Cadence {self.session.interval_seconds:.4f}s -> {new_interval:.4f}s "
                f"({self._rearm_policy})"
            )
            self.session.interval_seconds = new_interval
            self._timer.retarget(new_interval, self._rearm_policy)

    def _fire(self) -> SpawnCommand:
        monster = self.session.monster
        monster_type = monster.monster_type

        stats = self._scaled_by_type.get(monster_type)
        if stats is None:
            self._report(
                SpawnCondition.CACHE_MISS,
                f"No scaled stats for type: {monster_type.value}",
                monster_type=monster_type.value,
            )

        position = None
        if self._position_provider is not None:
            position = self._position_provider.next_position(monster_type)

        self.spawn_count += 1
        command = SpawnCommand(
            sequence=self.spawn_count,
            monster_type=monster_type,
            template=monster.template,
            position=position,
            scaled_stats=stats,
            wave_index=self._clock.wave_index,
            elapsed_seconds=self._clock.elapsed_seconds,
        )

        try:
            self._executor(command)
        except Exception as e:
            logger.error(f"Spawn executor failed for {monster_type.value}: {e}")

        logger.debug(f"Spawn #{command.sequence}: {monster_type.value} at {position}")
        self._event_bus.publish("spawn_command", command.to_dict())
        return command

    def _report(self, condition: SpawnCondition, message: str, **details) -> None:
        elapsed = self._clock.elapsed_seconds if self._clock else 0.0
        report = ConditionReport(
            condition=condition, message=message,
            elapsed_seconds=elapsed, details=details,
        )
        self.conditions.append(report)
        self.condition_count += 1
        logger.warning(f"[WaveScheduler] {condition.value}: {message}")
        self._event_bus.publish("spawn_condition", {
            "condition": condition.value,
            "message": message,
            "details": details,
        })

    def _set_state(self, state: str) -> None:
        self.state = state
        if self.session is not None:
            self.session.running = state == STATE_RUNNING
        self.running_channel.set(state == STATE_RUNNING)

    def _publish_state_change(self) -> None:
        self._event_bus.publish("wave_state_change", self.get_state())

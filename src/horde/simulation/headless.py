"""Headless fixed-step driver for balance runs.

Drives a WaveScheduler with a constant tick (10 Hz by default) for a
given amount of simulated time, collecting every spawn command the
scheduler hands to its executor.  No wall-clock sleeping happens; a
ten-minute run completes in milliseconds.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from loguru import logger

from .commands import SpawnCommand
from .wave_scheduler import WaveScheduler

_DEFAULT_STEP = 0.1


@dataclass
class RunSummary:
    """Aggregate results of one headless run."""

    seconds: float
    ticks: int
    final_wave: int
    final_difficulty: float
    spawns: list[SpawnCommand] = field(default_factory=list)
    swaps: int = 0
    conditions: int = 0

    @property
    def total_spawns(self) -> int:
        return len(self.spawns)

    def by_type(self) -> dict[str, int]:
        return dict(Counter(c.monster_type.value for c in self.spawns))

    def by_wave(self) -> dict[int, int]:
        return dict(sorted(Counter(c.wave_index for c in self.spawns).items()))

    def to_dict(self) -> dict:
        return {
            "seconds": self.seconds,
            "ticks": self.ticks,
            "final_wave": self.final_wave,
            "final_difficulty": round(self.final_difficulty, 4),
            "total_spawns": self.total_spawns,
            "swaps": self.swaps,
            "conditions": self.conditions,
            "by_type": self.by_type(),
            "by_wave": self.by_wave(),
        }


class SpawnRecorder:
    """Spawn executor that just keeps the commands it receives."""

    def __init__(self) -> None:
        self.commands: list[SpawnCommand] = []

    def __call__(self, command: SpawnCommand) -> None:
        self.commands.append(command)


def run_headless(
    scheduler: WaveScheduler,
    seconds: float,
    step: float = _DEFAULT_STEP,
    swap_every: float | None = None,
    auto_start: bool = True,
) -> RunSummary:
    """Run ``scheduler`` for ``seconds`` of simulated time.

    The scheduler's executor is replaced by a SpawnRecorder for the run.
    When ``swap_every`` is set the monster is re-picked at that period.
    With ``auto_start`` off an idle scheduler is left idle: the clock and
    difficulty still advance but nothing spawns.
    """
    if step <= 0:
        raise ValueError(f"step must be > 0, got {step}")

    recorder = SpawnRecorder()
    scheduler.set_executor(recorder)
    conditions_before = scheduler.condition_count

    if not auto_start:
        logger.info("Headless run: auto start disabled")
    elif not scheduler.is_running and not scheduler.start_wave():
        logger.warning("Headless run: wave did not start, nothing will spawn")

    ticks = int(round(seconds / step))
    swaps = 0
    since_swap = 0.0
    for _ in range(ticks):
        scheduler.tick(step)
        if swap_every is not None and scheduler.is_running:
            since_swap += step
            if since_swap >= swap_every:
                since_swap = 0.0
                if scheduler.change_monster_and_restart():
                    swaps += 1

    clock = scheduler.clock
    summary = RunSummary(
        seconds=seconds,
        ticks=ticks,
        final_wave=clock.wave_index if clock else 0,
        final_difficulty=scheduler.difficulty,
        spawns=recorder.commands,
        swaps=swaps,
        conditions=scheduler.condition_count - conditions_before,
    )
    logger.info(
        f"Headless run: {seconds:.0f}s, {summary.total_spawns} spawns, "
        f"wave {summary.final_wave}, difficulty {summary.final_difficulty:.3f}"
    )
    return summary

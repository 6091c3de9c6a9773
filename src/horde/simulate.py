"""Headless wave simulation from the command line.

Usage:
    python -m horde.simulate --seconds 300
    python -m horde.simulate --catalog my_monsters.json --seed 7 --swap-every 45 --json
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from horde.comms.event_bus import EventBus
from horde.config import settings
from horde.simulation.catalog import CatalogError
from horde.simulation.headless import run_headless
from horde.simulation.spawn_points import SpawnPointProvider
from horde.simulation.wave_scheduler import WaveScheduler

# Four corners of a 40x40 arena, y=0
_DEFAULT_POINTS = [(-20.0, 0.0, -20.0), (20.0, 0.0, -20.0), (20.0, 0.0, 20.0), (-20.0, 0.0, 20.0)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the wave spawner without a game loop")
    parser.add_argument("--seconds", type=float, default=300.0, help="Simulated seconds to run")
    parser.add_argument("--step", type=float, default=0.1, help="Tick length in seconds")
    parser.add_argument("--catalog", type=str, default=None, help="Monster catalog JSON file")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for monster picks")
    parser.add_argument("--swap-every", type=float, default=None,
                        help="Re-pick the monster every N seconds")
    parser.add_argument("--rearm", choices=("next", "restart", "preserve"), default=None,
                        help="Re-arm policy when the cadence changes")
    parser.add_argument("--no-auto-start", action="store_true",
                        help="Leave the wave idle (overrides HORDE_AUTO_START)")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument("--log-level", type=str, default=None, help="loguru level (default from settings)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.catalog is not None:
        overrides["catalog_path"] = args.catalog
    if args.seed is not None:
        overrides["rng_seed"] = args.seed
    if args.rearm is not None:
        overrides["rearm_policy"] = args.rearm
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.no_auto_start:
        overrides["auto_start"] = False
    cfg = settings.model_copy(update=overrides)

    logger.remove()
    logger.add(sys.stderr, level=cfg.log_level.upper())

    bus = EventBus()
    try:
        scheduler = WaveScheduler.from_settings(
            bus, cfg,
            position_provider=SpawnPointProvider(_DEFAULT_POINTS, policy=cfg.spawn_point_policy),
        )
    except CatalogError as e:
        logger.error(str(e))
        return 2

    summary = run_headless(scheduler, args.seconds, step=args.step, swap_every=args.swap_every,
                           auto_start=cfg.auto_start)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
        return 0

    print(f"\n{'='*60}")
    print("  WAVE SIMULATION")
    print(f"{'='*60}")
    print(f"  Simulated: {summary.seconds:.0f}s in {summary.ticks} ticks")
    print(f"  Final wave: {summary.final_wave}  difficulty: {summary.final_difficulty:.3f}")
    print(f"  Spawns: {summary.total_spawns}  swaps: {summary.swaps}  conditions: {summary.conditions}")
    print("\n  --- By type ---")
    for name, count in sorted(summary.by_type().items()):
        print(f"  {name:12s} {count:5d}")
    print("\n  --- By wave ---")
    for wave, count in summary.by_wave().items():
        print(f"  wave {wave:3d}   {count:5d}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

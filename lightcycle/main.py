"""Headless entry point: run the simulation at a fixed cadence and log rounds."""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter

from lightcycle.app.driver import TickDriver
from lightcycle.core.rules import Simulation, TickOutcome
from lightcycle.infra.config import load_default_env_files, load_driver_settings, load_layout_config
from lightcycle.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the light-cycle simulation headless.")
    parser.add_argument("--ticks", type=int, default=1000, help="Number of ticks to simulate.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source.")
    parser.add_argument("--width", type=int, default=480, help="Surface width in pixels.")
    parser.add_argument("--height", type=int, default=800, help="Surface height in pixels.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the simulation for a fixed number of ticks."""
    args = _parse_args(argv)
    load_default_env_files()
    setup_logging()

    layout = load_layout_config()
    settings = load_driver_settings()
    seed = args.seed if args.seed is not None else settings.seed
    simulation = Simulation(layout, random.Random(seed))
    driver = TickDriver(simulation, settings)
    viewport = driver.on_surface_changed(args.width, args.height)
    logger.info(
        "simulation_started board=%dx%d walls=%d seed=%s scale_x=%.3f scale_y=%.3f",
        simulation.board.width,
        simulation.board.height,
        len(simulation.wall_rects),
        seed,
        viewport.scale_x,
        viewport.scale_y,
    )

    step = 1.0 / settings.fps
    outcomes: Counter[TickOutcome] = Counter()
    for _ in range(max(0, args.ticks)):
        outcomes.update(driver.advance(step))

    logger.info(
        "simulation_finished ticks=%d rounds=%d player_crashes=%d opponent_crashes=%d",
        simulation.tick_count,
        driver.rounds_completed,
        outcomes[TickOutcome.PLAYER_CRASHED],
        outcomes[TickOutcome.OPPONENT_CRASHED],
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

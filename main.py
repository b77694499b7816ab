"""Main entry point for the ecosystem simulation.

This module provides command-line options to run the simulation:
- Viewer mode (default): interactive pygame window
- Headless mode: fixed number of frames, results summary logged or exported
"""

import argparse
import json
import logging
import sys

from ecosim.config.display import FRAME_RATE
from ecosim.config.simulation_config import SimulationConfig
from ecosim.exceptions import EcosimError
from ecosim.logging_config import configure_logging
from ecosim.scheduler import ManualScheduler
from ecosim.session import SimulationSession, format_elapsed
from ecosim.state import EnvironmentalState

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 60


def parse_assignments(assignments):
    """Turn ``["co2Levels=450", ...]`` into a state overrides dict."""
    overrides = {}
    for assignment in assignments or []:
        name, sep, value = assignment.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected name=value, got {assignment!r}")
        try:
            overrides[name.strip()] = float(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Value for {name!r} must be a number, got {value!r}")
    return overrides


def run_headless(frames, state, seed=None, export_json=None, frame_rate=FRAME_RATE):
    """Run the simulation without a window and return its summary.

    Args:
        frames: Number of frames to simulate
        state: Starting environmental state
        seed: Optional random seed for deterministic cosmetics and particles
        export_json: Optional filename for the JSON results summary
        frame_rate: Frames per simulated second, used for elapsed time
    """
    config = SimulationConfig.production(headless=True).with_overrides(seed=seed)
    scheduler = ManualScheduler()
    session = SimulationSession(
        config,
        initial_state=state,
        scheduler=scheduler,
        clock=lambda: scheduler.frames_fired / frame_rate,
    )

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("ECOSYSTEM SIMULATION - HEADLESS")
    logger.info("=" * SEPARATOR_WIDTH)
    for key, value in session.metrics.to_dict().items():
        logger.info("  %s: %s", key, value)

    session.start()
    scheduler.run_frames(frames)
    stats = session.simulator.get_stats()
    summary = session.stop()

    logger.info("Simulated %d frames (%s)", stats["frame_count"], format_elapsed(summary.elapsed_seconds))
    logger.info("Live particles at stop: %d", stats["particles"]["active_count"])
    for key, value in summary.to_dict().items():
        logger.info("  %s: %s", key, value)

    if export_json:
        with open(export_json, "w") as f:
            json.dump(summary.to_dict(), f, indent=2)
        logger.info("Results exported to: %s", export_json)
    return summary


def run_viewer(state, seed=None):
    try:
        from rendering.viewer import main as viewer_main
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)
    viewer_main(SimulationConfig.production().with_overrides(seed=seed), state)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Ecosystem Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the interactive viewer (default)
  python main.py

  # Headless run of 600 frames with a seed
  python main.py --headless --frames 600 --seed 42

  # Explore a high-emission scenario and export the results
  python main.py --headless --set co2Levels=480 --set industryLevel=90 --export-json results.json
        """,
    )
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument(
        "--frames", type=int, default=600, help="Frames to simulate in headless mode (default: 600)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (optional)")
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override an environmental parameter, e.g. forestCover=80 (repeatable)",
    )
    parser.add_argument(
        "--export-json", type=str, default=None, metavar="FILENAME", help="Write the results summary as JSON"
    )
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: ECOSIM_LOG_LEVEL or INFO)")
    return parser


def main(argv=None):
    """Parse command-line arguments and run the appropriate mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        state = EnvironmentalState.from_dict(parse_assignments(args.set))
    except (argparse.ArgumentTypeError, EcosimError) as e:
        parser.error(str(e))

    if args.headless:
        run_headless(args.frames, state, seed=args.seed, export_json=args.export_json)
    else:
        run_viewer(state, seed=args.seed)


if __name__ == "__main__":
    main()

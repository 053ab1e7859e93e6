"""Allow running with: python -m atomsim

Runs the Carbon example (12 snapshots, dt = 0.15 s), or a YAML
configuration given with --config.
"""
import argparse
import sys
from typing import List, Optional

from atomsim.builder import load_and_run
from atomsim.core import DEFAULT_DT, DEFAULT_STEPS, AtomSimulation
from atomsim.logging_config import setup_logging
from atomsim.observer import PrintStateObserver
from atomsim.simulator import Simulator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m atomsim",
        description="Print electron positions of a toy orbital atom model.",
    )
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: warning)",
    )
    return parser


def run_carbon_example() -> Simulator:
    """Carbon with Bohr-like occupancy [2, 4], printed before every step."""
    carbon = AtomSimulation("Carbon", 6, 6, [2, 4])
    simulator = Simulator(carbon, dt=DEFAULT_DT, observers=[PrintStateObserver()])
    simulator.run(DEFAULT_STEPS)
    return simulator


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.config:
        load_and_run(args.config)
    else:
        run_carbon_example()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Configuration loader for YAML-based simulation setup.

Provides functions to build and run a Simulator from a configuration
dictionary or a YAML file.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from atomsim.core import (
    DEFAULT_DT,
    DEFAULT_SEED,
    DEFAULT_STEPS,
    AtomSimulation,
    elements,
)
from atomsim.observer import Observer, PrintStateObserver, TrajectoryObserver
from atomsim.simulator import Simulator

logger = logging.getLogger(__name__)

# Carbon with Bohr-like occupancy, used when neither element nor shells are given
DEFAULT_ATOM: Dict[str, Any] = {
    "name": "Carbon",
    "protons": 6,
    "neutrons": 6,
    "shells": [2, 4],
}


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration. An empty file gives an empty dict.

    Raises:
        ValueError: If the top level of the file is not a mapping.
    """
    with open(path, "r") as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(
            f"Configuration must be a mapping, got {type(config).__name__}"
        )
    return config


def _parse_atom(config: Dict[str, Any]) -> AtomSimulation:
    """Parse the nucleus and shells from config."""
    atom = dict(DEFAULT_ATOM)
    if "element" in config:
        element = elements[config["element"]]
        atom = {
            "name": element.name,
            "protons": element.atomic_number,
            "neutrons": element.neutrons,
            "shells": element.shell_occupancy,
        }

    for key in ("name", "protons", "neutrons", "shells"):
        if key in config:
            atom[key] = config[key]

    shells = atom["shells"]
    if not isinstance(shells, (list, tuple)):
        raise ValueError(f"shells must be a list of counts, got {shells!r}")

    return AtomSimulation(
        atom["name"],
        int(atom["protons"]),
        int(atom["neutrons"]),
        list(shells),
        seed=config.get("seed", DEFAULT_SEED),
    )


def _parse_observers(config: Dict[str, Any]) -> List[Observer]:
    """Parse observers from config."""
    observers: List[Observer] = []
    obs_config = config.get("observers") or {}
    if not isinstance(obs_config, dict):
        raise ValueError(
            f"observers must be a mapping, got {type(obs_config).__name__}"
        )
    if obs_config.get("print", True):
        observers.append(PrintStateObserver(interval=obs_config.get("print_interval", 1)))
    if obs_config.get("trajectory", False):
        observers.append(
            TrajectoryObserver(interval=obs_config.get("trajectory_interval", 1))
        )
    return observers


def build_simulation_from_config(config: Dict[str, Any]) -> Simulator:
    """
    Build a complete Simulator from configuration dictionary.

    Args:
        config: Configuration dictionary (typically from YAML).

    Returns:
        Configured Simulator ready to run.

    Raises:
        KeyError: If an unknown element is requested.
        ValueError: If any value is invalid.

    Example config:
        element: C
        seed: 42
        dt: 0.15
        steps: 12
        observers:
          print: true
          trajectory: true
          trajectory_interval: 2
    """
    if not isinstance(config, dict):
        raise ValueError(
            f"Configuration must be a mapping, got {type(config).__name__}"
        )
    simulation = _parse_atom(config)
    dt = float(config.get("dt", DEFAULT_DT))
    observers = _parse_observers(config)

    logger.info(
        "Built %s from config with observers: %s",
        simulation,
        ", ".join(o.get_name() for o in observers) or "none",
    )
    return Simulator(simulation=simulation, dt=dt, observers=observers)


def load_and_run(path: Union[str, Path]) -> Simulator:
    """
    Load configuration from YAML and run simulation.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Simulator after run completes.
    """
    config = load_yaml(path)
    logger.info("Loaded configuration from %s", path)
    sim = build_simulation_from_config(config)
    sim.run(num_steps=int(config.get("steps", DEFAULT_STEPS)))
    return sim

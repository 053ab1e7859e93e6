"""
Builder module for the orbital simulation.

Provides YAML configuration loading:
- load_yaml: Read a YAML file
- build_simulation_from_config: Config dict to Simulator
- load_and_run: Read, build and run in one call
"""

from .config_loader import build_simulation_from_config, load_and_run, load_yaml

__all__ = [
    "load_yaml",
    "build_simulation_from_config",
    "load_and_run",
]

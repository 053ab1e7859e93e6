"""
Core module for the orbital simulation.

Provides:
- Electron: A single electron on a shell
- AtomSimulation: Nucleus, electrons and simulated clock
- ElementRegistry: Element lookup with Bohr shell filling
"""

from .constants import (
    BASE_ANGULAR_VELOCITY,
    DEFAULT_DT,
    DEFAULT_SEED,
    DEFAULT_STEPS,
    SHELL_CAPACITIES,
    SHELL_RADIUS_SCALE,
    TWO_PI,
    VELOCITY_JITTER,
)
from .electron import Electron
from .element_registry import (
    ElementData,
    ElementRegistry,
    bohr_shell_occupancy,
    elements,
)
from .simulation import AtomSimulation, normalize_angle, shell_radius

__all__ = [
    "Electron",
    "AtomSimulation",
    "ElementData",
    "ElementRegistry",
    "elements",
    "bohr_shell_occupancy",
    "normalize_angle",
    "shell_radius",
    "TWO_PI",
    "SHELL_RADIUS_SCALE",
    "BASE_ANGULAR_VELOCITY",
    "VELOCITY_JITTER",
    "SHELL_CAPACITIES",
    "DEFAULT_SEED",
    "DEFAULT_DT",
    "DEFAULT_STEPS",
]

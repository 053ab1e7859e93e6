"""
Electron class for the orbital simulation.

This module provides the Electron dataclass representing a single
electron riding a circular shell.
"""
from dataclasses import dataclass


@dataclass
class Electron:
    """
    Represents a single electron on a circular shell.

    Attributes:
        shell: 1-based shell index. Fixes orbit radius and base speed.
        angle: Current angle in radians, kept in [0, 2π) by the simulation.
        angular_velocity: Rate of change of angle in rad/s.

    Example:
        >>> from atomsim.core import Electron
        >>> e = Electron(shell=1, angle=0.0, angular_velocity=3.0)
        >>> print(e.shell)
        1
    """
    shell: int
    angle: float
    angular_velocity: float

    def __post_init__(self) -> None:
        """Validate electron properties after initialization."""
        if self.shell < 1:
            raise ValueError(f"Electron shell must be >= 1, got {self.shell}")

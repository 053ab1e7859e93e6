"""
Simulation state for the orbital toy model.

This module provides the AtomSimulation class that owns the nucleus
description, the electron collection and the simulated clock, plus the
pure helpers for shell geometry and angle wrapping.
"""
import logging
import math
from numbers import Integral
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import (
    BASE_ANGULAR_VELOCITY,
    DEFAULT_SEED,
    SHELL_RADIUS_SCALE,
    TWO_PI,
    VELOCITY_JITTER,
)
from .electron import Electron
from .element_registry import elements

logger = logging.getLogger(__name__)


def shell_radius(shell: int) -> float:
    """
    Orbit radius of a shell.

    Args:
        shell: 1-based shell index.

    Returns:
        SHELL_RADIUS_SCALE * shell.
    """
    return SHELL_RADIUS_SCALE * float(shell)


def normalize_angle(angle: float) -> float:
    """
    Wrap an angle into [0, 2π).

    Args:
        angle: Angle in radians, any sign.

    Returns:
        Equivalent angle in [0, 2π).
    """
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
        # a tiny negative remainder can round up to exactly 2π
        if wrapped >= TWO_PI:
            wrapped = 0.0
    return wrapped


class AtomSimulation:
    """
    Electrons orbiting a nucleus on fixed circular shells.

    Each shell s spins at BASE_ANGULAR_VELOCITY / s, so inner shells are
    faster. Within a shell the i-th of `count` electrons gets an extra
    (i / count) * VELOCITY_JITTER so they do not move in lockstep. Initial
    angles are drawn uniformly from [0, 2π) with a generator seeded at
    construction, which makes two simulations built from the same inputs
    evolve identically.

    Attributes:
        element_name: Display name of the element.
        protons: Proton count.
        neutrons: Neutron count.
        shell_occupancy: Electrons per shell, innermost first.
        electrons: Electrons in shell order.
        time: Elapsed simulated time in seconds.
        rng: Random generator owned by this simulation.

    Example:
        >>> sim = AtomSimulation("Carbon", 6, 6, [2, 4])
        >>> sim.electron_count
        6
        >>> sim.step(0.15)
        >>> round(sim.time, 2)
        0.15
    """

    def __init__(
        self,
        element_name: str,
        protons: int,
        neutrons: int,
        shell_occupancy: Sequence[int],
        seed: Optional[int] = DEFAULT_SEED,
    ) -> None:
        """
        Initialize the simulation and place all electrons.

        Args:
            element_name: Display name of the element.
            protons: Proton count (>= 0).
            neutrons: Neutron count (>= 0).
            shell_occupancy: Electron count per shell (each >= 0).
            seed: Seed for the angle generator.

        Raises:
            ValueError: If the element name is empty or any count is
                negative or not an integer.
        """
        if not element_name:
            raise ValueError("Element name cannot be empty")
        if protons < 0:
            raise ValueError(f"Proton count must be >= 0, got {protons}")
        if neutrons < 0:
            raise ValueError(f"Neutron count must be >= 0, got {neutrons}")
        for index, count in enumerate(shell_occupancy):
            if not isinstance(count, Integral) or isinstance(count, bool):
                raise ValueError(
                    f"Shell {index + 1} occupancy must be an integer, got {count!r}"
                )
            if count < 0:
                raise ValueError(
                    f"Shell {index + 1} occupancy must be >= 0, got {count}"
                )

        self.element_name = element_name
        self.protons = protons
        self.neutrons = neutrons
        self.shell_occupancy: Tuple[int, ...] = tuple(int(c) for c in shell_occupancy)
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.time = 0.0
        self.electrons: List[Electron] = []

        self._initialize_electrons()
        logger.debug(
            "Initialized %s with %d electrons on %d shells (seed=%s)",
            self.element_name,
            len(self.electrons),
            len(self.shell_occupancy),
            self.seed,
        )

    @classmethod
    def from_element(
        cls,
        identifier: Union[str, int],
        seed: Optional[int] = DEFAULT_SEED,
    ) -> "AtomSimulation":
        """
        Build a neutral atom from the element registry.

        Args:
            identifier: Element symbol or atomic number.
            seed: Seed for the angle generator.

        Raises:
            KeyError: If the element is not in the registry.

        Example:
            >>> sim = AtomSimulation.from_element("Ne")
            >>> sim.shell_occupancy
            (2, 8)
        """
        element = elements[identifier]
        return cls(
            element.name,
            element.atomic_number,
            element.neutrons,
            element.shell_occupancy,
            seed=seed,
        )

    def _initialize_electrons(self) -> None:
        """Create electrons shell by shell, drawing one angle each."""
        for shell_index, count in enumerate(self.shell_occupancy):
            shell = shell_index + 1
            base_velocity = BASE_ANGULAR_VELOCITY / shell

            for i in range(count):
                jitter = (i / max(1, count)) * VELOCITY_JITTER
                self.electrons.append(
                    Electron(
                        shell=shell,
                        angle=float(self.rng.uniform(0.0, TWO_PI)),
                        angular_velocity=base_velocity + jitter,
                    )
                )

    @staticmethod
    def shell_radius(shell: int) -> float:
        """Orbit radius of a shell."""
        return shell_radius(shell)

    @property
    def electron_count(self) -> int:
        """Number of electrons in the simulation."""
        return len(self.electrons)

    def step(self, dt: float) -> None:
        """
        Advance every electron by dt and the clock by dt.

        Args:
            dt: Time step in seconds. Negative values run the model backwards.
        """
        for electron in self.electrons:
            electron.angle = normalize_angle(
                electron.angle + electron.angular_velocity * dt
            )
        self.time += dt

    def angles(self) -> NDArray[np.floating]:
        """Return (N,) array of current electron angles."""
        return np.array([e.angle for e in self.electrons], dtype=np.float64)

    def positions(self) -> NDArray[np.floating]:
        """
        Return Cartesian positions of all electrons.

        Returns:
            (N, 2) array of (x, y) with x = r cos(angle), y = r sin(angle).
        """
        if not self.electrons:
            return np.zeros((0, 2), dtype=np.float64)
        radii = np.array([shell_radius(e.shell) for e in self.electrons])
        angles = self.angles()
        return np.column_stack((radii * np.cos(angles), radii * np.sin(angles)))

    def __repr__(self) -> str:
        return (
            f"AtomSimulation({self.element_name!r}, p={self.protons}, "
            f"n={self.neutrons}, shells={list(self.shell_occupancy)}, "
            f"t={self.time:.2f})"
        )

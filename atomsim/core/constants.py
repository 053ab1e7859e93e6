"""
Model constants for the orbital toy simulation.

None of these are physically derived; they only fix the geometry and
timing of the toy model.
"""
import math
from typing import Final, Tuple

# Full turn in radians
TWO_PI: Final[float] = 2.0 * math.pi

# Orbit radius per shell index: r(s) = SHELL_RADIUS_SCALE * s
SHELL_RADIUS_SCALE: Final[float] = 0.8

# Base angular velocity of shell s is BASE_ANGULAR_VELOCITY / s (rad/s)
BASE_ANGULAR_VELOCITY: Final[float] = 3.0

# Maximum spread added to the base velocity within one shell (rad/s)
VELOCITY_JITTER: Final[float] = 0.2

# Electron capacity of shells 1..4 when filling by atomic number
SHELL_CAPACITIES: Final[Tuple[int, ...]] = (2, 8, 8, 18)

# Driver defaults
DEFAULT_SEED: Final[int] = 42
DEFAULT_DT: Final[float] = 0.15
DEFAULT_STEPS: Final[int] = 12

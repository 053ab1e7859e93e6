"""
Simulator: the main loop for the orbital simulation.

Each iteration notifies due observers with the current state, then
advances the simulation by dt.
"""
import logging
import math
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from atomsim.core import AtomSimulation
    from atomsim.observer import Observer

logger = logging.getLogger(__name__)


class Simulator:
    """
    Drives an AtomSimulation with a fixed time step.

    Attributes:
        simulation: The simulation being advanced.
        dt: Time step in seconds.
        observers: Observers notified before each step.

    Example:
        >>> sim = Simulator(AtomSimulation("Carbon", 6, 6, [2, 4]), dt=0.15,
        ...                 observers=[PrintStateObserver()])
        >>> sim.run(12)
    """

    def __init__(
        self,
        simulation: "AtomSimulation",
        dt: float,
        observers: Optional[List["Observer"]] = None,
    ) -> None:
        """
        Initialize simulator.

        Args:
            simulation: AtomSimulation to advance.
            dt: Time step in seconds.
            observers: Optional observers.

        Raises:
            ValueError: If dt is not a finite number.
        """
        if not math.isfinite(dt):
            raise ValueError(f"Time step must be finite, got {dt}")

        self.simulation = simulation
        self.dt = dt
        self.observers = observers or []

        self._total_steps_run = 0

    def run(self, num_steps: int) -> None:
        """
        Run the simulation for a given number of steps.

        Args:
            num_steps: Number of time steps to run.

        Raises:
            ValueError: If num_steps is negative.
        """
        if num_steps < 0:
            raise ValueError(f"Number of steps must be >= 0, got {num_steps}")

        logger.info(
            "Running %s for %d steps (dt=%g)",
            self.simulation.element_name,
            num_steps,
            self.dt,
        )

        for _ in range(num_steps):
            current_step = self._total_steps_run

            for observer in self.observers:
                if current_step % observer.interval == 0:
                    observer.observe(self.simulation, current_step)

            self.simulation.step(self.dt)
            self._total_steps_run += 1

        for observer in self.observers:
            observer.finalize()

        logger.info("Finished at t=%.2f s", self.simulation.time)

    def get_total_steps(self) -> int:
        """Return total steps run so far."""
        return self._total_steps_run

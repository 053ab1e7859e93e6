"""
Observer module for monitoring simulation progress.

Provides the Observer pattern for console snapshots and trajectory
recording during a run.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, TextIO

import numpy as np

from .reporter import StateReporter

if TYPE_CHECKING:
    from atomsim.core import AtomSimulation


class Observer(ABC):
    """
    Abstract base for simulation observers (Observer Pattern).

    The simulator calls observe() before each step whose index is a
    multiple of `interval`.

    Attributes:
        interval: How often to call observe() (in steps).
    """

    def __init__(self, interval: int = 1) -> None:
        """
        Initialize observer.

        Args:
            interval: Observation interval in steps. Default=1 (every step).
        """
        if interval < 1:
            raise ValueError(f"Interval must be >= 1, got {interval}")
        self.interval = interval

    @abstractmethod
    def observe(self, simulation: "AtomSimulation", step: int) -> None:
        """
        Record observation.

        Args:
            simulation: Current simulation state.
            step: Index of the step about to run.
        """
        pass

    def finalize(self) -> None:
        """Called at end of simulation for cleanup."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get observer name."""
        pass


class PrintStateObserver(Observer):
    """
    Prints a full state snapshot to the console.
    """

    def __init__(
        self,
        interval: int = 1,
        reporter: Optional[StateReporter] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Initialize print observer."""
        super().__init__(interval)
        self.reporter = reporter or StateReporter()
        self.stream = stream

    def observe(self, simulation: "AtomSimulation", step: int) -> None:
        """Print the snapshot."""
        self.reporter.print_state(simulation, self.stream)

    def get_name(self) -> str:
        """Return observer name."""
        return f"PrintStateObserver(interval={self.interval})"


class TrajectoryObserver(Observer):
    """
    Records electron angles and positions over time.
    """

    def __init__(self, interval: int = 1) -> None:
        """Initialize trajectory observer."""
        super().__init__(interval)
        self.frames: List[dict] = []

    def observe(self, simulation: "AtomSimulation", step: int) -> None:
        """Record frame."""
        self.frames.append({
            "step": step,
            "time": simulation.time,
            "angles": simulation.angles(),
            "positions": simulation.positions(),
        })

    def get_times(self) -> np.ndarray:
        """Return (F,) array of recorded times."""
        return np.array([frame["time"] for frame in self.frames], dtype=np.float64)

    def get_positions(self) -> np.ndarray:
        """Return (F, N, 2) array of recorded positions."""
        if not self.frames:
            return np.zeros((0, 0, 2), dtype=np.float64)
        return np.stack([frame["positions"] for frame in self.frames])

    def get_name(self) -> str:
        """Return observer name."""
        return f"TrajectoryObserver(interval={self.interval})"

"""
Observer module for the orbital simulation.

Provides:
- StateReporter: Text snapshot of a simulation
- PrintStateObserver: Console snapshots during a run
- TrajectoryObserver: Record angles and positions
"""

from .observer import Observer, PrintStateObserver, TrajectoryObserver
from .reporter import SEPARATOR, StateReporter, print_state

__all__ = [
    "Observer",
    "PrintStateObserver",
    "TrajectoryObserver",
    "StateReporter",
    "print_state",
    "SEPARATOR",
]

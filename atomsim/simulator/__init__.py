"""
Simulator module for the orbital simulation.

Provides the main run loop:
- Simulator: Notify observers, then step
"""

from .simulator import Simulator

__all__ = ["Simulator"]

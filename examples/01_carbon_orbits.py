#!/usr/bin/env python3
"""
Example 1: Carbon Orbits

Carbon with Bohr-like shell occupancy [2, 4]. Prints a snapshot before
each of 12 steps of 0.15 s, the same run as `python -m atomsim`.

Model:
    omega(s) = 3.0 / s + jitter
    r(s)     = 0.8 * s

Inner electrons complete a turn in roughly 2 s, outer ones in roughly 4 s.

Usage:
    python examples/01_carbon_orbits.py
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from atomsim.core import AtomSimulation
from atomsim.observer import PrintStateObserver
from atomsim.simulator import Simulator


def main():
    print("=" * 55)
    print("Example 1: Carbon Orbits")
    print("=" * 55)

    carbon = AtomSimulation("Carbon", 6, 6, [2, 4])
    sim = Simulator(carbon, dt=0.15, observers=[PrintStateObserver()])
    sim.run(num_steps=12)

    print(f"Final time: {carbon.time:.2f} s")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Example 2: Orbital Periods

Records the trajectory of Neon ([2, 8]) and estimates each electron's
orbital period from the unwrapped angle, comparing it with the expected
T = 2*pi / omega.

Usage:
    python examples/02_period_check.py
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
from atomsim.core import AtomSimulation
from atomsim.observer import TrajectoryObserver
from atomsim.simulator import Simulator


def main():
    print("=" * 55)
    print("Example 2: Orbital Periods")
    print("=" * 55)

    neon = AtomSimulation.from_element("Ne", seed=7)
    print(f"\n{neon}")

    dt = 0.01
    steps = 1000
    trajectory = TrajectoryObserver(interval=1)
    Simulator(neon, dt=dt, observers=[trajectory]).run(num_steps=steps)

    angles = np.array([frame["angles"] for frame in trajectory.frames])
    times = trajectory.get_times()
    unwrapped = np.unwrap(angles, axis=0)

    print(f"\n{'e':>3} {'shell':>5} {'T expected':>11} {'T measured':>11}")
    for i, electron in enumerate(neon.electrons):
        omega = np.polyfit(times, unwrapped[:, i], 1)[0]
        expected = 2 * np.pi / electron.angular_velocity
        measured = 2 * np.pi / omega
        print(f"{i + 1:>3} {electron.shell:>5} {expected:11.4f} {measured:11.4f}")

    print("=" * 55)


if __name__ == "__main__":
    main()

"""
Unit tests for the simulator run loop.
"""
from typing import List

import pytest

from atomsim.core import AtomSimulation
from atomsim.observer import Observer, TrajectoryObserver
from atomsim.simulator import Simulator


class RecordingObserver(Observer):
    """Records step indices and simulation times it was shown."""

    def __init__(self, interval: int = 1) -> None:
        super().__init__(interval)
        self.steps: List[int] = []
        self.times: List[float] = []
        self.finalized = False

    def observe(self, simulation: AtomSimulation, step: int) -> None:
        self.steps.append(step)
        self.times.append(simulation.time)

    def finalize(self) -> None:
        self.finalized = True

    def get_name(self) -> str:
        return "RecordingObserver"


@pytest.fixture
def carbon() -> AtomSimulation:
    return AtomSimulation("Carbon", 6, 6, [2, 4])


class TestSimulator:
    """Tests for Simulator.run."""

    def test_observe_then_step(self, carbon: AtomSimulation) -> None:
        """Observers see the state before each step."""
        observer = RecordingObserver()
        sim = Simulator(carbon, dt=0.15, observers=[observer])
        sim.run(12)

        assert observer.steps == list(range(12))
        assert observer.times[0] == 0.0
        assert observer.times[-1] == pytest.approx(1.65)
        assert carbon.time == pytest.approx(1.80)

    def test_interval(self, carbon: AtomSimulation) -> None:
        observer = RecordingObserver(interval=3)
        Simulator(carbon, dt=0.15, observers=[observer]).run(12)
        assert observer.steps == [0, 3, 6, 9]

    def test_finalize_called(self, carbon: AtomSimulation) -> None:
        observer = RecordingObserver()
        Simulator(carbon, dt=0.15, observers=[observer]).run(1)
        assert observer.finalized

    def test_step_counter_continues(self, carbon: AtomSimulation) -> None:
        observer = RecordingObserver()
        sim = Simulator(carbon, dt=0.15, observers=[observer])
        sim.run(2)
        sim.run(3)
        assert sim.get_total_steps() == 5
        assert observer.steps == [0, 1, 2, 3, 4]

    def test_zero_steps(self, carbon: AtomSimulation) -> None:
        observer = RecordingObserver()
        sim = Simulator(carbon, dt=0.15, observers=[observer])
        sim.run(0)
        assert observer.steps == []
        assert carbon.time == 0.0

    def test_no_observers(self, carbon: AtomSimulation) -> None:
        sim = Simulator(carbon, dt=0.5)
        sim.run(4)
        assert carbon.time == pytest.approx(2.0)

    def test_trajectory_length(self, carbon: AtomSimulation) -> None:
        trajectory = TrajectoryObserver(interval=2)
        Simulator(carbon, dt=0.15, observers=[trajectory]).run(12)
        assert len(trajectory.frames) == 6
        assert trajectory.get_positions().shape == (6, 6, 2)

    def test_negative_steps(self, carbon: AtomSimulation) -> None:
        with pytest.raises(ValueError, match="Number of steps"):
            Simulator(carbon, dt=0.15).run(-1)

    @pytest.mark.parametrize("dt", [float("nan"), float("inf")])
    def test_non_finite_dt(self, carbon: AtomSimulation, dt: float) -> None:
        with pytest.raises(ValueError, match="Time step must be finite"):
            Simulator(carbon, dt=dt)

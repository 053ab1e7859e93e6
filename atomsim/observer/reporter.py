"""
Text snapshots of the orbital simulation.

The reporter only reads simulation state. Rendering the same state twice
yields the same text.
"""
import sys
from typing import TYPE_CHECKING, List, Optional, TextIO

if TYPE_CHECKING:
    from atomsim.core import AtomSimulation

SEPARATOR = "-" * 40


class StateReporter:
    """
    Renders a human-readable snapshot of an AtomSimulation.

    Snapshot layout:
        Time: 0.15 s
        Element: Carbon (p=6, n=6, e=6)
        Electron positions (x, y):
          e1 [shell 1] -> (  0.512,  -0.615)
          ...
        ----------------------------------------

    Example:
        >>> reporter = StateReporter()
        >>> reporter.print_state(sim)
    """

    def render_lines(self, simulation: "AtomSimulation") -> List[str]:
        """Return the snapshot as a list of lines without newlines."""
        lines = [
            f"Time: {simulation.time:.2f} s",
            f"Element: {simulation.element_name} "
            f"(p={simulation.protons}, n={simulation.neutrons}, "
            f"e={simulation.electron_count})",
            "Electron positions (x, y):",
        ]

        positions = simulation.positions()
        for i, electron in enumerate(simulation.electrons):
            x, y = positions[i]
            lines.append(
                f"  e{i + 1} [shell {electron.shell}] -> ({x:7.3f}, {y:7.3f})"
            )

        lines.append(SEPARATOR)
        return lines

    def render(self, simulation: "AtomSimulation") -> str:
        """Return the snapshot as a single newline-terminated string."""
        return "\n".join(self.render_lines(simulation)) + "\n"

    def print_state(
        self,
        simulation: "AtomSimulation",
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Write the snapshot to a text stream.

        Args:
            simulation: Simulation to report on.
            stream: Destination; defaults to sys.stdout at call time.
        """
        out = stream if stream is not None else sys.stdout
        out.write(self.render(simulation))


def print_state(
    simulation: "AtomSimulation",
    stream: Optional[TextIO] = None,
) -> None:
    """Print a snapshot of the simulation with a default reporter."""
    StateReporter().print_state(simulation, stream)

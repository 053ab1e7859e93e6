"""
Unit tests for YAML configuration loading.
"""
import pytest

from atomsim.builder import build_simulation_from_config, load_and_run, load_yaml
from atomsim.observer import PrintStateObserver, TrajectoryObserver
from atomsim.simulator import Simulator


class TestBuildFromConfig:
    """Tests for build_simulation_from_config."""

    def test_defaults_to_carbon(self) -> None:
        sim = build_simulation_from_config({})
        assert isinstance(sim, Simulator)
        assert sim.simulation.element_name == "Carbon"
        assert sim.simulation.shell_occupancy == (2, 4)
        assert sim.dt == pytest.approx(0.15)
        assert [type(o) for o in sim.observers] == [PrintStateObserver]

    def test_element_lookup(self) -> None:
        sim = build_simulation_from_config({"element": "Ne"})
        atom = sim.simulation
        assert atom.element_name == "Neon"
        assert (atom.protons, atom.neutrons) == (10, 10)
        assert atom.shell_occupancy == (2, 8)

    def test_explicit_overrides(self) -> None:
        config = {
            "element": "C",
            "name": "Carbon-14",
            "neutrons": 8,
            "seed": 3,
            "dt": 0.25,
        }
        sim = build_simulation_from_config(config)
        assert sim.simulation.element_name == "Carbon-14"
        assert sim.simulation.neutrons == 8
        assert sim.simulation.protons == 6
        assert sim.simulation.seed == 3
        assert sim.dt == 0.25

    def test_custom_shells(self) -> None:
        config = {"name": "Ion", "protons": 3, "neutrons": 4, "shells": [2]}
        sim = build_simulation_from_config(config)
        assert sim.simulation.electron_count == 2

    def test_observers(self) -> None:
        config = {
            "observers": {
                "print": False,
                "trajectory": True,
                "trajectory_interval": 4,
            }
        }
        sim = build_simulation_from_config(config)
        assert len(sim.observers) == 1
        assert isinstance(sim.observers[0], TrajectoryObserver)
        assert sim.observers[0].interval == 4

    def test_unknown_element(self) -> None:
        with pytest.raises(KeyError):
            build_simulation_from_config({"element": "Unobtainium"})

    def test_invalid_shells(self) -> None:
        with pytest.raises(ValueError):
            build_simulation_from_config({"shells": [2, -4]})


class TestYaml:
    """Tests for YAML file loading."""

    def test_load_yaml(self, tmp_path) -> None:
        path = tmp_path / "atom.yaml"
        path.write_text("element: O\nsteps: 5\nshells: [2, 6]\n")
        assert load_yaml(path) == {"element": "O", "steps": 5, "shells": [2, 6]}

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}

    def test_load_and_run(self, tmp_path, capsys) -> None:
        path = tmp_path / "run.yaml"
        path.write_text(
            "element: He\n"
            "dt: 0.5\n"
            "steps: 4\n"
            "observers:\n"
            "  print_interval: 2\n"
            "  trajectory: true\n"
        )
        sim = load_and_run(path)

        assert sim.get_total_steps() == 4
        assert sim.simulation.time == pytest.approx(2.0)
        out = capsys.readouterr().out
        assert out.count("Time:") == 2
        assert "Element: Helium (p=2, n=2, e=2)" in out
        trajectory = sim.observers[1]
        assert len(trajectory.frames) == 4


class TestMalformedConfig:
    """Empty or wrongly shaped sections are reported as ValueError."""

    def test_empty_observers_section(self, tmp_path, capsys) -> None:
        path = tmp_path / "bare.yaml"
        path.write_text("element: C\nsteps: 2\nobservers:\n")
        sim = load_and_run(path)
        assert [type(o) for o in sim.observers] == [PrintStateObserver]
        assert capsys.readouterr().out.count("Time:") == 2

    def test_observers_not_a_mapping(self) -> None:
        with pytest.raises(ValueError, match="observers must be a mapping"):
            build_simulation_from_config({"observers": ["print"]})

    @pytest.mark.parametrize("text", ["- element: C\n", "42\n", "just text\n"])
    def test_top_level_not_a_mapping(self, tmp_path, text) -> None:
        path = tmp_path / "odd.yaml"
        path.write_text(text)
        with pytest.raises(ValueError, match="Configuration must be a mapping"):
            load_yaml(path)

    def test_config_dict_not_a_mapping(self) -> None:
        with pytest.raises(ValueError, match="Configuration must be a mapping"):
            build_simulation_from_config([2, 4])

    @pytest.mark.parametrize("shells", [3, "2, 4", None])
    def test_shells_not_a_list(self, shells) -> None:
        with pytest.raises(ValueError, match="shells must be a list"):
            build_simulation_from_config({"shells": shells})

"""
Unit tests for the Simulation handle.

Tests the host-facing interface:
- Defaults and parameter accessors
- Stepping and state export
- Reproducibility with a seeded generator
- Snapshots
"""

import numpy as np
import pytest
from spin_anneal.core import AnnealingParameters, Simulation, SquareLattice


class TestSimulationCreation:
    """Test creation and defaults."""

    def test_default_parameters(self):
        sim = Simulation.create(seed=0)
        assert sim.get_pairing_energy() == -1.0
        assert sim.get_temperature() == 0.0
        assert sim.get_external_field() == 0.05

    def test_default_size(self):
        sim = Simulation.create(seed=0)
        assert (sim.width, sim.height) == (10, 10)
        assert len(sim.export_state()) == 100

    def test_custom_size(self):
        sim = Simulation.create(width=4, height=6, seed=0)
        state = sim.export_state()
        assert len(state) == 24
        assert set(state) <= {1, -1}

    def test_requires_square_lattice(self):
        with pytest.raises(TypeError, match="SquareLattice"):
            Simulation([1, -1, 1])

    def test_explicit_rng(self):
        a = Simulation.create(rng=np.random.default_rng(5))
        b = Simulation.create(seed=5)
        assert a.export_state() == b.export_state()


class TestSimulationParameters:
    """Test get/set pairs."""

    def test_setters_round_trip(self):
        sim = Simulation.create(seed=0)
        sim.set_temperature(12.5)
        sim.set_pairing_energy(0.75)
        sim.set_external_field(-0.2)
        assert sim.get_temperature() == 12.5
        assert sim.get_pairing_energy() == 0.75
        assert sim.get_external_field() == -0.2

    def test_no_validation(self):
        """Physically odd values are stored as given."""
        sim = Simulation.create(seed=0)
        sim.set_temperature(-3.0)
        assert sim.get_temperature() == -3.0
        sim.set_temperature(float('inf'))
        assert sim.get_temperature() == float('inf')

    def test_parameters_shared_with_annealer(self):
        sim = Simulation.create(seed=0)
        sim.set_temperature(7.0)
        assert sim.annealer.parameters.temperature == 7.0

    def test_parameters_dict(self):
        params = AnnealingParameters(temperature=1.0, pairing_energy=-2.0, external_field=0.3)
        assert AnnealingParameters.from_dict(params.to_dict()) == params
        assert AnnealingParameters.from_dict({}) == AnnealingParameters()


class TestSimulationStepping:
    """Test advance and export."""

    def test_advance_returns_current_energy(self):
        sim = Simulation.create(width=6, height=6, seed=3)
        sim.set_temperature(5.0)
        for _ in range(200):
            energy = sim.advance()
            assert energy == sim.energy()

    def test_zero_temperature_energy_non_increasing(self):
        sim = Simulation.create(width=8, height=8, seed=4)
        sim.set_temperature(0.0)
        energies = [sim.advance() for _ in range(1000)]
        assert all(b <= a for a, b in zip(energies, energies[1:]))

    def test_export_does_not_mutate(self):
        sim = Simulation.create(width=5, height=5, seed=6)
        assert sim.export_state() == sim.export_state()

    def test_step_result(self):
        sim = Simulation.create(width=3, height=3, seed=1)
        result = sim.step()
        assert 1 <= result.index < 9
        assert result.energy == sim.energy()

    def test_annealing_lowers_energy(self):
        """A slow linear cooling run ends well below the random start."""
        sim = Simulation.create(width=10, height=10, seed=42)
        start = sim.energy()
        for i in range(1, 5001):
            sim.set_temperature(max(0.0, 5.0 - i / 1000.0))
            sim.advance()
        assert sim.energy() < start


class TestSimulationReproducibility:
    """Seeded runs are deterministic."""

    def test_same_seed_same_run(self):
        a = Simulation.create(width=7, height=5, seed=2024)
        b = Simulation.create(width=7, height=5, seed=2024)
        energies_a, energies_b = [], []
        for i in range(1, 2001):
            T = 50.0 - i / 50.0
            a.set_temperature(T)
            b.set_temperature(T)
            energies_a.append(a.advance())
            energies_b.append(b.advance())
        assert energies_a == energies_b
        assert a.export_state() == b.export_state()

    def test_different_seed_differs(self):
        a = Simulation.create(width=10, height=10, seed=1)
        b = Simulation.create(width=10, height=10, seed=2)
        assert a.export_state() != b.export_state()


class TestSimulationSerialization:
    """Test snapshots."""

    def test_to_dict(self):
        sim = Simulation.create(width=3, height=2, seed=0)
        data = sim.to_dict()
        assert data['width'] == 3
        assert data['height'] == 2
        assert data['parameters'] == {'temperature': 0.0,
                                      'pairing_energy': -1.0,
                                      'external_field': 0.05}
        assert data['state'] == sim.export_state()
        assert data['skip_first_cell'] is True

    def test_from_dict(self):
        sim = Simulation.create(width=4, height=3, seed=0)
        sim.set_external_field(0.4)
        restored = Simulation.from_dict(sim.to_dict(), rng=np.random.default_rng(0))
        assert restored.export_state() == sim.export_state()
        assert restored.get_external_field() == 0.4
        assert restored.energy() == sim.energy()

    def test_repr(self):
        sim = Simulation(SquareLattice.from_states(2, 2, [1, 1, 1, 1]))
        assert repr(sim) == "Simulation(2x2, T=0.0, J=-1.0, h=0.05)"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

"""
Unit tests for cooling schedules and run configuration.
"""

import numpy as np
import pytest
from spin_anneal.config import DEFAULT_CONFIG, merge_config
from spin_anneal.schedules import (
    ConstantTemperature,
    GeometricCooling,
    LinearCooling,
    create_schedule,
)


class TestLinearCooling:
    """T(i) = initial - rate * i."""

    def test_classic_driver_values(self):
        """1001 - i/10 for i = 1..10000."""
        schedule = LinearCooling(initial=1001.0, rate=0.1)
        assert np.isclose(schedule(1), 1000.9)
        assert np.isclose(schedule(10000), 1.0)

    def test_minimum_floor(self):
        schedule = LinearCooling(initial=1.0, rate=0.5, minimum=0.0)
        assert schedule(10) == 0.0

    def test_unfloored_goes_negative(self):
        schedule = LinearCooling(initial=1.0, rate=0.5)
        assert schedule(4) == -1.0

    def test_temperatures_array(self):
        schedule = LinearCooling(initial=10.0, rate=1.0)
        temps = schedule.temperatures(3, start=1)
        assert np.allclose(temps, [9.0, 8.0, 7.0])

    def test_negative_rate_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            LinearCooling(rate=-0.1)


class TestGeometricCooling:
    """T(i) = max(minimum, initial * alpha**i)."""

    def test_values(self):
        schedule = GeometricCooling(initial=8.0, alpha=0.5, minimum=0.1)
        assert schedule(0) == 8.0
        assert schedule(3) == 1.0
        assert schedule(100) == 0.1

    def test_monotonic(self):
        temps = GeometricCooling(initial=5.0, alpha=0.9).temperatures(50)
        assert np.all(np.diff(temps) <= 0)

    def test_invalid_alpha(self):
        with pytest.raises(ValueError, match="alpha"):
            GeometricCooling(alpha=1.5)

    def test_invalid_initial(self):
        with pytest.raises(ValueError, match="positive"):
            GeometricCooling(initial=0.0)


class TestCreateSchedule:
    """Config-based construction."""

    def test_constant(self):
        schedule = create_schedule({'type': 'constant', 'value': 2.5})
        assert isinstance(schedule, ConstantTemperature)
        assert schedule(123) == 2.5

    def test_default_config_schedule(self):
        schedule = create_schedule(DEFAULT_CONFIG['schedule'])
        assert isinstance(schedule, LinearCooling)
        assert schedule.initial == 1001.0

    def test_config_not_mutated(self):
        config = {'type': 'geometric', 'initial': 3.0}
        create_schedule(config)
        assert config == {'type': 'geometric', 'initial': 3.0}

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown schedule type"):
            create_schedule({'type': 'quadratic'})


class TestMergeConfig:
    """Nested dict merging over DEFAULT_CONFIG."""

    def test_defaults(self):
        assert merge_config() == DEFAULT_CONFIG
        assert merge_config() is not DEFAULT_CONFIG

    def test_nested_override(self):
        config = merge_config({'lattice': {'width': 4}, 'seed': 7})
        assert config['lattice'] == {'width': 4, 'height': 10}
        assert config['seed'] == 7
        assert DEFAULT_CONFIG['lattice']['width'] == 10

    def test_schedule_type_change_replaces_options(self):
        config = merge_config({'schedule': {'type': 'geometric', 'alpha': 0.9}})
        assert config['schedule'] == {'type': 'geometric', 'alpha': 0.9}
        assert DEFAULT_CONFIG['schedule']['type'] == 'linear'

    def test_schedule_same_type_merges(self):
        config = merge_config({'schedule': {'rate': 0.5}})
        assert config['schedule'] == {'type': 'linear', 'initial': 1001.0, 'rate': 0.5}
        config = merge_config({'schedule': {'type': 'LINEAR', 'initial': 50.0}})
        assert config['schedule'] == {'type': 'LINEAR', 'initial': 50.0, 'rate': 0.1}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

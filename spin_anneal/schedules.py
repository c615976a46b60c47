"""
Temperature schedules for driving a Simulation.

The engine itself never changes its temperature; a host picks one of these
schedules and sets ``T(i)`` before each step i.
"""

import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


class CoolingSchedule(ABC):
    """Maps a step number to a temperature."""

    @abstractmethod
    def temperature(self, step: int) -> float:
        pass

    def __call__(self, step: int) -> float:
        return self.temperature(step)

    def temperatures(self, n_steps: int, start: int = 0) -> np.ndarray:
        """Temperatures for steps start, start+1, ..., start+n_steps-1."""
        return np.array([self.temperature(i) for i in range(start, start + n_steps)],
                        dtype=np.float64)


@dataclass
class ConstantTemperature(CoolingSchedule):
    value: float = 1.0

    def temperature(self, step: int) -> float:
        return float(self.value)


@dataclass
class LinearCooling(CoolingSchedule):
    """
    T(i) = initial - rate * i, optionally floored at ``minimum``.

    The classic driver for a 10x10 lattice runs steps i = 1..10000 with
    initial = 1001 and rate = 0.1, i.e. from 1000.9 down to 1.0.
    """
    initial: float = 1001.0
    rate: float = 0.1
    minimum: Optional[float] = None

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError("Cooling rate must be non-negative")

    def temperature(self, step: int) -> float:
        T = self.initial - self.rate * step
        if self.minimum is not None:
            T = max(self.minimum, T)
        return float(T)


@dataclass
class GeometricCooling(CoolingSchedule):
    """T(i) = max(minimum, initial * alpha**i)."""
    initial: float = 10.0
    alpha: float = 0.999
    minimum: float = 1e-3

    def __post_init__(self):
        if not 0 < self.alpha <= 1:
            raise ValueError("alpha must be in (0, 1]")
        if self.initial <= 0:
            raise ValueError("Initial temperature must be positive")

    def temperature(self, step: int) -> float:
        return float(max(self.minimum, self.initial * self.alpha ** step))


SCHEDULE_REGISTRY = {
    'constant': ConstantTemperature,
    'linear': LinearCooling,
    'geometric': GeometricCooling,
}


def create_schedule(config: Dict[str, Any]) -> CoolingSchedule:
    """
    Build a schedule from a config dict such as
    ``{'type': 'linear', 'initial': 1001.0, 'rate': 0.1}``.
    """
    options = dict(config)
    schedule_type = str(options.pop('type', 'linear')).lower()
    if schedule_type not in SCHEDULE_REGISTRY:
        available = ', '.join(SCHEDULE_REGISTRY.keys())
        raise ValueError(f"Unknown schedule type '{schedule_type}'. "
                         f"Available types: {available}")
    return SCHEDULE_REGISTRY[schedule_type](**options)

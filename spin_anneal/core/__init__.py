"""
Core engine for spin_anneal.

This module contains the fundamental pieces:
- Lattice: sites, adjacency and spin states
- EnergyModel: scoring of a configuration
- Annealer: single-flip Metropolis step
- AnnealingParameters: temperature, pairing energy, external field
- Simulation: handle combining all of the above

The core performs no I/O and does not manage a cooling schedule.
"""

from .lattice import (
    AbstractLattice,
    Cell,
    Spin,
    SquareLattice,
    LATTICE_REGISTRY,
    create_lattice
)

from .energy import EnergyModel
from .parameters import AnnealingParameters
from .annealer import Annealer, StepResult, acceptance_probability, metropolis_accept
from .simulation import Simulation

__all__ = [
    # Lattice
    'AbstractLattice',
    'Cell',
    'Spin',
    'SquareLattice',
    'LATTICE_REGISTRY',
    'create_lattice',

    # Energetics and dynamics
    'EnergyModel',
    'AnnealingParameters',
    'Annealer',
    'StepResult',
    'acceptance_probability',
    'metropolis_accept',

    # Simulation handle
    'Simulation',
]

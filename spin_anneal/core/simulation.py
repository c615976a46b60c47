"""
Simulation: the handle a host drives step by step.

This module defines the Simulation class which combines:
- A square lattice of binary spins
- The parameter store (temperature, pairing energy, external field)
- The Metropolis annealer
- One explicitly owned random generator used by all of the above

A host typically sets the temperature, calls ``advance`` many times while
lowering it, and reads ``export_state`` now and then for display.
"""

import logging
import numpy as np
from typing import Any, Dict, List, Optional

from .annealer import Annealer, StepResult
from .energy import EnergyModel
from .lattice import SquareLattice
from .parameters import AnnealingParameters


logger = logging.getLogger(__name__)


class Simulation:
    """
    Single annealing simulation instance.

    Parameters
    ----------
    lattice : SquareLattice
        Lattice owned by this simulation
    parameters : AnnealingParameters, optional
        Initial parameters (defaults: T=0, J=-1, h=0.05)
    rng : np.random.Generator, optional
        Random source for proposals and acceptance draws
    skip_first_cell : bool, optional
        Passed to the Annealer (default True: cell 0 is never proposed)

    Notes
    -----
    Not thread-safe. Hosts driving one instance from several threads must
    serialize the calls themselves.

    Examples
    --------
    >>> sim = Simulation.create(width=10, height=10, seed=7)
    >>> for i in range(1, 1001):
    ...     sim.set_temperature(101.0 - i / 10.0)
    ...     energy = sim.advance()
    >>> state = sim.export_state()
    >>> len(state)
    100
    """

    def __init__(self,
                 lattice: SquareLattice,
                 parameters: Optional[AnnealingParameters] = None,
                 rng: Optional[np.random.Generator] = None,
                 skip_first_cell: bool = True):
        if not isinstance(lattice, SquareLattice):
            raise TypeError("lattice must be a SquareLattice instance")

        self.rng = rng if rng is not None else np.random.default_rng()
        self.lattice = lattice
        self.parameters = parameters if parameters is not None else AnnealingParameters()
        self.annealer = Annealer(
            self.lattice, self.parameters, self.rng,
            skip_first_cell=skip_first_cell,
        )

    @classmethod
    def create(cls,
               width: int = 10,
               height: int = 10,
               seed: Optional[int] = None,
               rng: Optional[np.random.Generator] = None,
               skip_first_cell: bool = True) -> 'Simulation':
        """
        Build a simulation with default parameters and a random lattice.

        Parameters
        ----------
        width, height : int
            Lattice size (default 10x10)
        seed : int, optional
            Seed for a new ``np.random.default_rng``. Ignored if ``rng`` is given.
        rng : np.random.Generator, optional
            Generator to use for initialization and all later steps
        skip_first_cell : bool
            See ``Annealer``
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        lattice = SquareLattice(width, height, rng=rng)
        sim = cls(lattice, AnnealingParameters(), rng, skip_first_cell=skip_first_cell)
        logger.debug("Created %r (seed=%s)", sim, seed)
        return sim

    # Parameter accessors

    def set_temperature(self, temperature: float) -> None:
        self.parameters.set_temperature(temperature)

    def get_temperature(self) -> float:
        return self.parameters.get_temperature()

    def set_pairing_energy(self, pairing_energy: float) -> None:
        self.parameters.set_pairing_energy(pairing_energy)

    def get_pairing_energy(self) -> float:
        return self.parameters.get_pairing_energy()

    def set_external_field(self, external_field: float) -> None:
        self.parameters.set_external_field(external_field)

    def get_external_field(self) -> float:
        return self.parameters.get_external_field()

    # Stepping and state

    def step(self) -> StepResult:
        """Run one annealing step and return its full outcome."""
        return self.annealer.step()

    def advance(self) -> float:
        """Run one annealing step and return the resulting energy."""
        return self.annealer.advance()

    def energy(self) -> float:
        """Current energy of the lattice."""
        return EnergyModel.score(
            self.lattice,
            self.parameters.pairing_energy,
            self.parameters.external_field,
        )

    def export_state(self) -> List[int]:
        """+1/-1 per cell, x outer and y inner."""
        return self.lattice.export_state()

    @property
    def width(self) -> int:
        return self.lattice.width

    @property
    def height(self) -> int:
        return self.lattice.height

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot of size, parameters and spin state.

        Returns
        -------
        data : Dict
            JSON-serializable representation
        """
        return {
            'width': self.width,
            'height': self.height,
            'parameters': self.parameters.to_dict(),
            'skip_first_cell': self.annealer.skip_first_cell,
            'state': self.export_state(),
        }

    @classmethod
    def from_dict(cls,
                  data: Dict[str, Any],
                  rng: Optional[np.random.Generator] = None) -> 'Simulation':
        """Rebuild a simulation from ``to_dict`` output."""
        lattice = SquareLattice.from_states(data['width'], data['height'], data['state'])
        parameters = AnnealingParameters.from_dict(data.get('parameters', {}))
        return cls(lattice, parameters, rng,
                   skip_first_cell=data.get('skip_first_cell', True))

    def __repr__(self) -> str:
        p = self.parameters
        return (f"Simulation({self.width}x{self.height}, "
                f"T={p.temperature}, J={p.pairing_energy}, h={p.external_field})")

"""
Annealer: single-flip Metropolis step.

One call to ``Annealer.step`` runs to completion through

    PROPOSE  -> pick a cell index
    EVALUATE -> old energy, energy with the cell flipped
    DECIDE   -> Metropolis criterion at the current temperature
    COMMIT   -> flip the cell, or DISCARD -> leave the lattice untouched

The temperature schedule is NOT owned here; the host changes
``parameters.temperature`` between steps.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional

from .energy import EnergyModel
from .lattice import AbstractLattice
from .parameters import AnnealingParameters


logger = logging.getLogger(__name__)


def acceptance_probability(old_energy: float,
                           new_energy: float,
                           temperature: float) -> float:
    """
    Metropolis acceptance probability exp((old - new) / T).

    IEEE semantics are used for the division: at T == 0 a worse move gives
    exp(-inf) = 0 and an equal-energy move gives exp(nan) = nan. Both compare
    false against any uniform draw, so they are never accepted. Negative
    temperatures are not special-cased.
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        exponent = np.float64(old_energy - new_energy) / np.float64(temperature)
        return float(np.exp(exponent))


def metropolis_accept(old_energy: float,
                      new_energy: float,
                      temperature: float,
                      rng: np.random.Generator) -> bool:
    """
    Decide whether to move from ``old_energy`` to ``new_energy``.

    Strictly lower energies are always accepted without touching ``rng``.
    Otherwise one uniform draw r in [0, 1) is taken and the move is accepted
    iff r < acceptance_probability.
    """
    if new_energy < old_energy:
        return True
    probability = acceptance_probability(old_energy, new_energy, temperature)
    return bool(rng.random() < probability)


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of one annealing step.

    Attributes
    ----------
    index : int
        Proposed cell
    old_energy : float
        Energy before the step
    new_energy : float
        Energy of the proposed configuration
    accepted : bool
        Whether the flip was committed
    """
    index: int
    old_energy: float
    new_energy: float
    accepted: bool

    @property
    def energy(self) -> float:
        """Energy after the step: new_energy if accepted, else old_energy."""
        return self.new_energy if self.accepted else self.old_energy


class Annealer:
    """
    Proposes single spin flips and applies the Metropolis criterion.

    Parameters
    ----------
    lattice : AbstractLattice
        Lattice mutated in place by accepted moves
    parameters : AnnealingParameters
        Read on every step, so changes by the host take effect immediately
    rng : np.random.Generator
        Source for proposals and acceptance draws
    skip_first_cell : bool, optional
        If True (default), proposals are drawn from [1, N), so cell 0 is
        never flipped; this is the classic behavior. Set False to
        draw from the full range [0, N).

    Notes
    -----
    With the default ``skip_first_cell=True`` a single-cell lattice has no
    eligible cell and ``step`` raises ValueError.
    """

    def __init__(self,
                 lattice: AbstractLattice,
                 parameters: AnnealingParameters,
                 rng: Optional[np.random.Generator] = None,
                 skip_first_cell: bool = True):
        self.lattice = lattice
        self.parameters = parameters
        self.rng = rng if rng is not None else np.random.default_rng()
        self.skip_first_cell = skip_first_cell

    def propose(self) -> int:
        """Draw a cell index to flip."""
        low = 1 if self.skip_first_cell else 0
        high = len(self.lattice)
        if high <= low:
            raise ValueError(
                f"No eligible cell to propose on a lattice with {high} cell(s) "
                f"(skip_first_cell={self.skip_first_cell})"
            )
        return int(self.rng.integers(low, high))

    def step(self) -> StepResult:
        """
        Run one PROPOSE -> EVALUATE -> DECIDE -> COMMIT/DISCARD cycle.

        Returns
        -------
        result : StepResult
            ``result.energy`` is the lattice energy after the step.
        """
        params = self.parameters
        index = self.propose()

        old_energy = EnergyModel.score(
            self.lattice, params.pairing_energy, params.external_field
        )
        new_energy = EnergyModel.score_mutation(
            self.lattice, index, params.pairing_energy, params.external_field
        )

        accepted = metropolis_accept(
            old_energy, new_energy, params.temperature, self.rng
        )
        if accepted:
            self.lattice.flip(index)

        logger.debug(
            "step: index=%d, old=%.6g, new=%.6g, T=%.6g, accepted=%s",
            index, old_energy, new_energy, params.temperature, accepted,
        )
        return StepResult(index, old_energy, new_energy, accepted)

    def advance(self) -> float:
        """Run one step and return the resulting energy."""
        return self.step().energy

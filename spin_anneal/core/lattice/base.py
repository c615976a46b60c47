"""
Abstract base class for binary-spin lattices.

This module defines the spin and cell types, and the interface every lattice
implements. Lattices own their cells and spin states but know NOTHING about
energies, temperatures or acceptance rules.
"""

import enum
import numbers
import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence, Tuple


class Spin(enum.Enum):
    """
    Binary spin state of a lattice site.

    Only two values exist, so an invalid state cannot be represented.
    ``Spin(1)`` and ``Spin(-1)`` convert from signed unit values; anything
    else raises ``ValueError``.
    """
    UP = 1
    DOWN = -1

    def flipped(self) -> 'Spin':
        """Return the opposite spin."""
        return Spin.DOWN if self is Spin.UP else Spin.UP


@dataclass
class Cell:
    """
    One lattice site.

    Attributes
    ----------
    x : int
        Column, 0-indexed
    y : int
        Row, 0-indexed, increasing downward
    state : Spin
        Current spin
    """
    x: int
    y: int
    state: Spin

    def flip(self) -> None:
        self.state = self.state.flipped()


class AbstractLattice(ABC):
    """
    Abstract base class for finite spin lattices.

    A lattice is an ordered, fixed-size collection of cells. The order is
    established at construction and never changes; it is the order of the
    exported state sequence and of every index accepted by the methods below.

    Design Philosophy
    -----------------
    Separation of concerns:
    - Lattice = sites, adjacency and spin states (this class)
    - EnergyModel = scoring of a configuration
    - Annealer = proposal and Metropolis decision
    - Simulation = combines all of them behind one handle
    """

    def __init__(self, cells: List[Cell]):
        self._cells = cells

    @abstractmethod
    def get_neighbors(self, index: int) -> Tuple[int, ...]:
        """
        Get indices of the sites adjacent to ``index``.

        Parameters
        ----------
        index : int
            Site index in creation order

        Returns
        -------
        neighbors : Tuple[int, ...]
            Indices of adjacent sites, in ascending order.
        """
        pass

    @property
    @abstractmethod
    def shape(self) -> Tuple[int, int]:
        """(width, height) of the lattice."""
        pass

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Read-only view of the cells in creation order."""
        return tuple(self._cells)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise IndexError(
                f"Cell index {index} out of range for lattice with "
                f"{len(self._cells)} cells"
            )

    def get_cell(self, index: int) -> Cell:
        """Get the cell at ``index``."""
        self._check_index(index)
        return self._cells[index]

    def get_state(self, index: int) -> Spin:
        """Get the spin at ``index``."""
        return self.get_cell(index).state

    def flip(self, index: int) -> None:
        """
        Toggle the spin at ``index`` (UP <-> DOWN).

        Raises
        ------
        IndexError
            If ``index`` is outside [0, len(lattice)). Negative indices are
            rejected rather than counted from the end.
        """
        self._check_index(index)
        self._cells[index].flip()

    def export_state(self) -> List[int]:
        """
        Export the spin configuration.

        Returns
        -------
        state : List[int]
            +1 for UP, -1 for DOWN, one entry per cell in creation order.
        """
        return [cell.state.value for cell in self._cells]

    def magnetization(self) -> float:
        """Mean spin value in [-1, 1]."""
        return float(np.mean(self.export_state()))

    def __repr__(self) -> str:
        name = self.__class__.__name__
        width, height = self.shape
        return f"{name}(width={width}, height={height}, m={self.magnetization():+.3f})"


def random_spins(count: int, rng: np.random.Generator) -> List[Spin]:
    """
    Draw ``count`` independent, equally likely spins from ``rng``.
    """
    draws = rng.integers(0, 2, size=count)
    return [Spin.UP if d == 0 else Spin.DOWN for d in draws]


def spins_from_values(values: Sequence[int]) -> List[Spin]:
    """
    Convert signed unit values (+1/-1) to spins.

    Only integers (Python or numpy) and ``Spin`` members are accepted; bools
    and floats such as ``1.0`` raise ValueError even though they compare
    equal to 1.
    """
    spins = []
    for v in values:
        if isinstance(v, Spin):
            spins.append(v)
        elif (isinstance(v, numbers.Integral) and not isinstance(v, (bool, np.bool_))
              and v in (1, -1)):
            spins.append(Spin(int(v)))
        else:
            raise ValueError(f"Spin values must be +1 or -1, got {v!r}")
    return spins

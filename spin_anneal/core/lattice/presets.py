"""
Preset lattice implementations.

This module provides concrete implementations of AbstractLattice for:
- Square lattice with open (non-wrapping) boundaries
"""

import logging
import numpy as np
from typing import Dict, List, Optional, Sequence, Tuple, Type

from .base import AbstractLattice, Cell, Spin, random_spins, spins_from_values


logger = logging.getLogger(__name__)


class SquareLattice(AbstractLattice):
    """
    Rectangular grid of binary spins with orthogonal adjacency.

    Every site has up to 4 neighbors (left, right, up, down). Sites on the
    edges simply have fewer neighbors: there is NO periodic wraparound.

    Geometry
    --------
    Cells are created with x as the outer loop and y as the inner loop, so
    the site (x, y) has index ``x * height + y``:

        index:  0      1      ...  height-1      height  ...
        site:  (0,0)  (0,1)   ...  (0,height-1)  (1,0)   ...

    Parameters
    ----------
    width : int, optional
        Number of columns (default: 10)
    height : int, optional
        Number of rows (default: 10)
    rng : np.random.Generator, optional
        Source of the initial random spins. A fresh unseeded generator is
        used when omitted.

    Examples
    --------
    >>> rng = np.random.default_rng(42)
    >>> lattice = SquareLattice(width=4, height=3, rng=rng)
    >>> len(lattice)
    12
    >>> lattice.get_neighbors(0)
    (1, 3)

    Notes
    -----
    Width and height are fixed at construction. Both must be at least 1.
    """

    def __init__(self,
                 width: int = 10,
                 height: int = 10,
                 rng: Optional[np.random.Generator] = None,
                 states: Optional[Sequence[Spin]] = None):
        if width < 1 or height < 1:
            raise ValueError(
                f"Lattice dimensions must be at least 1, got {width}x{height}"
            )

        self._width = int(width)
        self._height = int(height)
        count = self._width * self._height

        if states is None:
            if rng is None:
                rng = np.random.default_rng()
            states = random_spins(count, rng)
        elif len(states) != count:
            raise ValueError(
                f"Expected {count} states for a {width}x{height} lattice, "
                f"got {len(states)}"
            )

        cells: List[Cell] = []
        for x in range(self._width):
            for y in range(self._height):
                cells.append(Cell(x=x, y=y, state=states[x * self._height + y]))
        super().__init__(cells)

        self._neighbors = [self._compute_neighbors(i) for i in range(count)]
        logger.debug("Created %r", self)

    @classmethod
    def from_states(cls,
                    width: int,
                    height: int,
                    states: Sequence[int]) -> 'SquareLattice':
        """
        Build a lattice with a prescribed configuration.

        Parameters
        ----------
        width, height : int
            Lattice dimensions
        states : Sequence[int]
            +1/-1 values in creation order, as returned by ``export_state``

        Returns
        -------
        lattice : SquareLattice
        """
        return cls(width, height, states=spins_from_values(states))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        return self._width, self._height

    def index_of(self, x: int, y: int) -> int:
        """Creation-order index of site (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Site ({x}, {y}) outside {self._width}x{self._height} lattice"
            )
        return x * self._height + y

    def _compute_neighbors(self, index: int) -> Tuple[int, ...]:
        x, y = divmod(index, self._height)
        neighbors = []
        for dx, dy in ((-1, 0), (0, -1), (0, 1), (1, 0)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < self._width and 0 <= ny < self._height:
                neighbors.append(nx * self._height + ny)
        return tuple(neighbors)

    def get_neighbors(self, index: int) -> Tuple[int, ...]:
        """
        Get the orthogonal neighbors of ``index``.

        Returns
        -------
        neighbors : Tuple[int, ...]
            2 to 4 indices (fewer on 1-wide lattices), ascending.
        """
        self._check_index(index)
        return self._neighbors[index]

    def to_array(self) -> np.ndarray:
        """
        Spin configuration as an array.

        Returns
        -------
        spins : np.ndarray, shape (width, height)
            ``spins[x, y]`` is +1 (UP) or -1 (DOWN).
        """
        return np.array(self.export_state(), dtype=np.int8).reshape(
            self._width, self._height
        )


LATTICE_REGISTRY: Dict[str, Type[AbstractLattice]] = {
    'square': SquareLattice,
}


def create_lattice(lattice_type: str, **kwargs) -> AbstractLattice:
    """
    Factory function to create lattices by name.

    Parameters
    ----------
    lattice_type : str
        Lattice type name (case-insensitive): 'square'
    **kwargs
        Passed to the lattice constructor (width, height, rng, ...)

    Returns
    -------
    lattice : AbstractLattice

    Raises
    ------
    ValueError
        If lattice_type is not recognized
    """
    lattice_type = lattice_type.lower()

    if lattice_type not in LATTICE_REGISTRY:
        available = ', '.join(LATTICE_REGISTRY.keys())
        raise ValueError(
            f"Unknown lattice type '{lattice_type}'. "
            f"Available types: {available}"
        )

    return LATTICE_REGISTRY[lattice_type](**kwargs)

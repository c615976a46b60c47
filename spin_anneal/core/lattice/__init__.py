"""
Lattice module.

This module provides the spin/cell types and lattice implementations.
Lattices hold ONLY sites, adjacency and spin states - no energetics.

Available lattices:
- SquareLattice: Rectangular grid, orthogonal neighbors, open boundaries
"""

from .base import AbstractLattice, Cell, Spin
from .presets import (
    SquareLattice,
    LATTICE_REGISTRY,
    create_lattice
)

__all__ = [
    'AbstractLattice',
    'Cell',
    'Spin',
    'SquareLattice',
    'LATTICE_REGISTRY',
    'create_lattice',
]

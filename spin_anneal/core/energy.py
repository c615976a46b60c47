"""
EnergyModel: scoring of lattice configurations.

The energy of a configuration is a sum over every cell c1 of

    (a) pairing_energy for every orthogonal neighbor c2 with c2.state == c1.state
    (b) -external_field if c1 is UP, +external_field if c1 is DOWN

Each adjacent pair is therefore counted twice, once from each side. Edge
cells have fewer neighbors and contribute fewer pair terms; there is no
wraparound. Only energy differences matter to the annealer, so the doubling
is harmless, but it must be kept exactly for absolute values to agree.
"""

from .lattice import AbstractLattice, Spin


class EnergyModel:
    """
    Energy functions over a lattice and the two coupling parameters.

    All methods are static; the class only groups them. Module-level
    aliases (``score``, ``score_mutation``, ...) are provided as well.

    Examples
    --------
    2x2 lattice, all spins UP, pairing_energy = -1, external_field = 0:
    every cell has 2 matching neighbors, so the energy is 4 * 2 * (-1) = -8.

    >>> from spin_anneal.core.lattice import SquareLattice
    >>> lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
    >>> EnergyModel.score(lattice, -1.0, 0.0)
    -8.0
    """

    @staticmethod
    def score(lattice: AbstractLattice,
              pairing_energy: float,
              external_field: float) -> float:
        """
        Total energy using precomputed neighbor lists, O(N).

        Terms are accumulated cell by cell in creation order (pair terms
        first, then the field term), the same order as ``score_pairwise``,
        so both return bit-identical floats.
        """
        cells = lattice.cells
        energy = 0.0
        for index, cell in enumerate(cells):
            for neighbor in lattice.get_neighbors(index):
                if cells[neighbor].state is cell.state:
                    energy = energy + pairing_energy
            if cell.state is Spin.UP:
                energy = energy - external_field
            else:
                energy = energy + external_field
        return energy

    @staticmethod
    def score_pairwise(lattice: AbstractLattice,
                       pairing_energy: float,
                       external_field: float) -> float:
        """
        Total energy by testing every pair of cells, O(N^2).

        Reference definition: two cells are adjacent when their coordinates
        differ by exactly 1 along exactly one axis. Use ``score`` instead for
        anything performance sensitive.
        """
        cells = lattice.cells
        energy = 0.0
        for cell1 in cells:
            for cell2 in cells:
                dx = abs(cell1.x - cell2.x)
                dy = abs(cell1.y - cell2.y)
                if (dx == 1 and dy == 0) or (dx == 0 and dy == 1):
                    if cell1.state is cell2.state:
                        energy = energy + pairing_energy
            if cell1.state is Spin.UP:
                energy = energy - external_field
            else:
                energy = energy + external_field
        return energy

    @staticmethod
    def score_mutation(lattice: AbstractLattice,
                       index: int,
                       pairing_energy: float,
                       external_field: float) -> float:
        """
        Energy the lattice would have with cell ``index`` flipped.

        The cell is flipped, scored and flipped back, so the lattice is left
        exactly as it was.

        Raises
        ------
        IndexError
            If ``index`` is out of range (the lattice is not touched).
        """
        lattice.flip(index)
        try:
            return EnergyModel.score(lattice, pairing_energy, external_field)
        finally:
            lattice.flip(index)

    @staticmethod
    def flip_delta(lattice: AbstractLattice,
                   index: int,
                   pairing_energy: float,
                   external_field: float) -> float:
        """
        Energy change caused by flipping cell ``index``, from its neighbors only.

        With k neighbors of which m currently match, the flip turns m matches
        into k - m. Both cells of each pair count the term, hence the factor 2:

            dE_pair  = 2 * J * (k - 2m)
            dE_field = +2h for UP -> DOWN, -2h for DOWN -> UP

        Agrees with ``score_mutation - score`` up to float rounding.
        """
        state = lattice.get_state(index)
        neighbors = lattice.get_neighbors(index)
        matching = sum(1 for n in neighbors if lattice.get_state(n) is state)

        delta = 2.0 * pairing_energy * (len(neighbors) - 2 * matching)
        if state is Spin.UP:
            delta += 2.0 * external_field
        else:
            delta -= 2.0 * external_field
        return delta


score = EnergyModel.score
score_pairwise = EnergyModel.score_pairwise
score_mutation = EnergyModel.score_mutation
flip_delta = EnergyModel.flip_delta

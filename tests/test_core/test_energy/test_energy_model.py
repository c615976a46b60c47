"""
Unit tests for EnergyModel.

Tests scoring:
- Hand-computed small lattices
- Agreement of the neighbor-list and all-pairs definitions
- Non-destructive probing of a flip
- Incremental flip deltas
"""

import numpy as np
import pytest
from spin_anneal.core import EnergyModel, SquareLattice
from spin_anneal.core.energy import score, score_mutation


class TestScoreKnownValues:
    """Hand-computed energies."""

    def test_2x2_all_up_pairing(self):
        """Each of 4 cells has 2 matching neighbors: 4 * 2 * (-1) = -8."""
        lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
        assert EnergyModel.score(lattice, -1.0, 0.0) == -8.0

    def test_2x2_all_up_field(self):
        """Each UP cell contributes -h: 4 * (-0.1) = -0.4."""
        lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
        assert np.isclose(EnergyModel.score(lattice, 0.0, 0.1), -0.4)

    def test_2x2_all_down_field(self):
        """DOWN cells contribute +h."""
        lattice = SquareLattice.from_states(2, 2, [-1, -1, -1, -1])
        assert np.isclose(EnergyModel.score(lattice, 0.0, 0.1), 0.4)

    def test_checkerboard_has_no_pair_terms(self):
        """No two adjacent cells match on a checkerboard."""
        lattice = SquareLattice.from_states(2, 2, [1, -1, -1, 1])
        assert EnergyModel.score(lattice, -1.0, 0.0) == 0.0

    def test_pairs_double_counted(self):
        """A 1x2 lattice with equal spins has one pair counted twice."""
        lattice = SquareLattice.from_states(1, 2, [1, 1])
        assert EnergyModel.score(lattice, -1.0, 0.0) == -2.0

    def test_3x3_uniform_edge_truncation(self):
        """3x3 uniform: 12 bonds, each counted twice."""
        lattice = SquareLattice.from_states(3, 3, [1] * 9)
        assert EnergyModel.score(lattice, -1.0, 0.0) == -24.0

    def test_single_cell(self):
        """A lone cell only has its field term."""
        lattice = SquareLattice.from_states(1, 1, [-1])
        assert EnergyModel.score(lattice, -1.0, 0.25) == 0.25

    def test_module_alias(self):
        lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
        assert score(lattice, -1.0, 0.0) == EnergyModel.score(lattice, -1.0, 0.0)


class TestScoreAgreesWithPairwise:
    """The O(N) score must equal the all-pairs definition exactly."""

    @pytest.mark.parametrize("width,height", [(1, 1), (1, 6), (2, 2), (3, 5), (6, 4), (10, 10)])
    def test_random_lattices(self, width, height):
        rng = np.random.default_rng(width * 31 + height)
        for _ in range(5):
            lattice = SquareLattice(width, height, rng=rng)
            J, h = rng.normal(size=2)
            assert EnergyModel.score(lattice, J, h) == EnergyModel.score_pairwise(lattice, J, h)

    def test_default_parameters(self):
        lattice = SquareLattice(10, 10, rng=np.random.default_rng(9))
        assert EnergyModel.score(lattice, -1.0, 0.05) == EnergyModel.score_pairwise(lattice, -1.0, 0.05)


class TestScoreMutation:
    """Probing a flip without committing it."""

    def test_does_not_change_lattice(self):
        """Repeated probes leave the state untouched."""
        lattice = SquareLattice(5, 5, rng=np.random.default_rng(2))
        before = lattice.export_state()
        for index in range(len(lattice)):
            for _ in range(3):
                EnergyModel.score_mutation(lattice, index, -1.0, 0.05)
        assert lattice.export_state() == before

    def test_equals_score_after_flip(self):
        """The probe equals scoring the flipped lattice."""
        lattice = SquareLattice(4, 3, rng=np.random.default_rng(4))
        for index in range(len(lattice)):
            probed = score_mutation(lattice, index, -1.0, 0.05)
            lattice.flip(index)
            assert probed == EnergyModel.score(lattice, -1.0, 0.05)
            lattice.flip(index)

    def test_2x2_corner_flip(self):
        """Flipping one cell of an all-UP 2x2 removes 2 pairs (4 terms) and flips one field term."""
        lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
        assert EnergyModel.score_mutation(lattice, 0, -1.0, 0.0) == -4.0

    def test_out_of_range(self):
        lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
        with pytest.raises(IndexError):
            EnergyModel.score_mutation(lattice, 4, -1.0, 0.0)
        assert lattice.export_state() == [1, 1, 1, 1]


class TestFlipDelta:
    """Incremental energy change of a single flip."""

    def test_matches_full_difference(self):
        rng = np.random.default_rng(11)
        lattice = SquareLattice(6, 5, rng=rng)
        J, h = -0.7, 0.3
        base = EnergyModel.score(lattice, J, h)
        for index in range(len(lattice)):
            expected = EnergyModel.score_mutation(lattice, index, J, h) - base
            assert np.isclose(EnergyModel.flip_delta(lattice, index, J, h), expected)

    def test_2x2_corner(self):
        lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
        assert EnergyModel.flip_delta(lattice, 0, -1.0, 0.1) == pytest.approx(4.2)

    def test_does_not_change_lattice(self):
        lattice = SquareLattice(3, 3, rng=np.random.default_rng(1))
        before = lattice.export_state()
        EnergyModel.flip_delta(lattice, 4, -1.0, 0.05)
        assert lattice.export_state() == before


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

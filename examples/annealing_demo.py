"""
Annealing Demo: Engine API

This example walks through the pieces of the engine:
- SquareLattice (sites and spins only)
- EnergyModel (scoring, probing a flip)
- Simulation (the step-by-step handle a host drives)
- A hand-written cooling loop, then the same run via run_annealing
"""

import numpy as np
import sys
from pathlib import Path

# Add spin_anneal to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from spin_anneal import (
    EnergyModel,
    LinearCooling,
    Simulation,
    SquareLattice,
    run_annealing,
)


def example_scoring():
    """Example 1: Scoring small lattices by hand."""
    print("="*60)
    print("Example 1: Energy of a 2x2 lattice")
    print("="*60)

    lattice = SquareLattice.from_states(2, 2, [1, 1, 1, 1])
    print(f"\nLattice: {lattice}")
    for index in range(len(lattice)):
        cell = lattice.get_cell(index)
        print(f"  cell {index}: ({cell.x}, {cell.y}) {cell.state.name}, "
              f"neighbors = {lattice.get_neighbors(index)}")

    print(f"\nJ = -1, h = 0   -> E = {EnergyModel.score(lattice, -1.0, 0.0)}")
    print(f"J =  0, h = 0.1 -> E = {EnergyModel.score(lattice, 0.0, 0.1):.3f}")

    probe = EnergyModel.score_mutation(lattice, 3, -1.0, 0.0)
    print(f"\nEnergy with cell 3 flipped: {probe} (lattice unchanged: {lattice.export_state()})")
    print(f"Incremental delta: {EnergyModel.flip_delta(lattice, 3, -1.0, 0.0)}")


def example_manual_loop():
    """Example 2: Driving a Simulation directly."""
    print("\n" + "="*60)
    print("Example 2: Host-driven cooling loop")
    print("="*60)

    sim = Simulation.create(width=10, height=10, seed=1)
    print(f"\n{sim}")
    print(f"Initial energy: {sim.energy():.3f}")

    for i in range(1, 10001):
        sim.set_temperature(1001.0 - i / 10.0)
        energy = sim.advance()
        if i % 2000 == 0:
            print(f"  step {i:5d}: T = {sim.get_temperature():7.2f}, E = {energy:8.3f}")

    grid = np.array(sim.export_state()).reshape(sim.width, sim.height).T
    print("\nFinal state (rows are y):")
    for row in grid:
        print("  " + "".join("#" if s == 1 else "." for s in row))


def example_zero_temperature():
    """Example 3: Greedy descent at T = 0."""
    print("\n" + "="*60)
    print("Example 3: Zero temperature only accepts strictly better moves")
    print("="*60)

    sim = Simulation.create(width=8, height=8, seed=3)
    sim.set_temperature(0.0)
    energies = [sim.advance() for _ in range(2000)]
    print(f"\nStart E = {energies[0]:.3f}, end E = {energies[-1]:.3f}")
    print(f"Monotonic non-increasing: {all(b <= a for a, b in zip(energies, energies[1:]))}")


def example_runner():
    """Example 4: Same schedule through run_annealing."""
    print("\n" + "="*60)
    print("Example 4: run_annealing with LinearCooling")
    print("="*60)

    sim = Simulation.create(width=10, height=10, seed=1)
    trace = run_annealing(sim, LinearCooling(initial=1001.0, rate=0.1),
                          n_steps=10000, record_every=1000)
    print(f"\nFinal energy: {trace.final_energy:.3f}")
    print(f"Acceptance ratio: {trace.acceptance_ratio:.3f}")
    print(f"Snapshots at steps: {sorted(trace.snapshots)}")
    print(trace.to_dataframe().describe())


if __name__ == '__main__':
    example_scoring()
    example_manual_loop()
    example_zero_temperature()
    example_runner()

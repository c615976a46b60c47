"""
spin_anneal: Simulated annealing of 2D binary-spin lattices

A Python package that evolves an Ising-like lattice toward low energy with
single-flip Metropolis Monte Carlo under a host-supplied temperature.

Main Components
---------------
core : Lattice, EnergyModel, Annealer, parameter store, Simulation handle
schedules : Cooling schedules (constant, linear, geometric)
runner : Driver that applies a schedule and records a trace
io : Saving configurations, traces and snapshots
visualization : Plotting lattice states and energy traces

Quick Start
-----------
>>> from spin_anneal import Simulation, LinearCooling, run_annealing
>>>
>>> sim = Simulation.create(width=10, height=10, seed=42)
>>> trace = run_annealing(sim, LinearCooling(initial=1001.0, rate=0.1), n_steps=10000)
>>> state = sim.export_state()      # 100 values, +1 (UP) or -1 (DOWN)

Current Version: 0.1.0
"""

__version__ = "0.1.0"

from .core import (
    AbstractLattice,
    Cell,
    Spin,
    SquareLattice,
    create_lattice,
    EnergyModel,
    AnnealingParameters,
    Annealer,
    StepResult,
    Simulation,
)

from .schedules import (
    CoolingSchedule,
    ConstantTemperature,
    LinearCooling,
    GeometricCooling,
    create_schedule,
)

from .runner import AnnealingTrace, run_annealing, run_from_config

__all__ = [
    '__version__',

    # Core
    'AbstractLattice',
    'Cell',
    'Spin',
    'SquareLattice',
    'create_lattice',
    'EnergyModel',
    'AnnealingParameters',
    'Annealer',
    'StepResult',
    'Simulation',

    # Host side
    'CoolingSchedule',
    'ConstantTemperature',
    'LinearCooling',
    'GeometricCooling',
    'create_schedule',
    'AnnealingTrace',
    'run_annealing',
    'run_from_config',
]

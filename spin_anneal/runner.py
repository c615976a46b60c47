"""
Annealing driver.

Runs a Simulation under a cooling schedule and records what happened. This
is host-side code: it sets the temperature before each step, exactly as any
external caller of the engine would.
"""

import logging
import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from tqdm import tqdm
from typing import Any, Dict, Optional

from .config import merge_config
from .core import AnnealingParameters, Simulation
from .schedules import CoolingSchedule, create_schedule


logger = logging.getLogger(__name__)


@dataclass
class AnnealingTrace:
    """
    Per-step record of an annealing run.

    Attributes
    ----------
    steps : np.ndarray, shape (n,)
        Step numbers passed to the schedule
    temperatures : np.ndarray, shape (n,)
        Temperature set before each step
    energies : np.ndarray, shape (n,)
        Energy returned by each step
    accepted : np.ndarray of bool, shape (n,)
        Whether each proposed flip was committed
    snapshots : Dict[int, np.ndarray]
        Step number -> exported state (+1/-1, creation order)
    """
    steps: np.ndarray
    temperatures: np.ndarray
    energies: np.ndarray
    accepted: np.ndarray
    snapshots: Dict[int, np.ndarray] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def acceptance_ratio(self) -> float:
        if len(self.accepted) == 0:
            return 0.0
        return float(np.mean(self.accepted))

    @property
    def final_energy(self) -> Optional[float]:
        if len(self.energies) == 0:
            return None
        return float(self.energies[-1])

    @property
    def final_state(self) -> Optional[np.ndarray]:
        if not self.snapshots:
            return None
        return self.snapshots[max(self.snapshots)]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            "step": self.steps,
            "temperature": self.temperatures,
            "energy": self.energies,
            "accepted": self.accepted,
        })


def run_annealing(simulation: Simulation,
                  schedule: CoolingSchedule,
                  n_steps: int,
                  record_every: int = 100,
                  start_step: int = 1,
                  progress: bool = False) -> AnnealingTrace:
    """
    Drive ``simulation`` through ``n_steps`` steps of ``schedule``.

    For each step i in [start_step, start_step + n_steps) the temperature is
    set to ``schedule(i)`` and one step is run. A snapshot of the state is
    taken before the first step, every ``record_every`` steps, and after the
    last step.

    Parameters
    ----------
    simulation : Simulation
        Simulation to drive (mutated in place)
    schedule : CoolingSchedule
        Temperature per step
    n_steps : int
        Number of steps, may be 0
    record_every : int
        Snapshot interval in steps
    start_step : int
        First step number handed to the schedule
    progress : bool
        Show a tqdm progress bar

    Returns
    -------
    trace : AnnealingTrace
    """
    if n_steps < 0:
        raise ValueError("n_steps must be non-negative")
    if record_every < 1:
        raise ValueError("record_every must be at least 1")

    steps = np.arange(start_step, start_step + n_steps)
    temperatures = np.empty(n_steps, dtype=np.float64)
    energies = np.empty(n_steps, dtype=np.float64)
    accepted = np.zeros(n_steps, dtype=bool)
    snapshots = {start_step - 1: np.array(simulation.export_state(), dtype=np.int8)}

    logger.info("Annealing %r for %d steps with %r", simulation, n_steps, schedule)

    iterator = enumerate(steps)
    if progress:
        iterator = tqdm(iterator, total=n_steps, desc="Annealing")

    for k, i in iterator:
        T = schedule(int(i))
        simulation.set_temperature(T)
        result = simulation.step()
        temperatures[k] = T
        energies[k] = result.energy
        accepted[k] = result.accepted
        if (k + 1) % record_every == 0 or k == n_steps - 1:
            snapshots[int(i)] = np.array(simulation.export_state(), dtype=np.int8)

    trace = AnnealingTrace(steps, temperatures, energies, accepted, snapshots)
    logger.info(
        "Annealing finished: final energy=%s, acceptance ratio=%.3f",
        trace.final_energy, trace.acceptance_ratio,
    )
    return trace


def run_from_config(config: Optional[Dict[str, Any]] = None,
                    progress: bool = False):
    """
    Build a Simulation and schedule from a config dict and run it.

    Missing keys fall back to ``DEFAULT_CONFIG``.

    Returns
    -------
    simulation : Simulation
    trace : AnnealingTrace
    """
    config = merge_config(config)
    run = config["run"]

    simulation = Simulation.create(
        width=config["lattice"]["width"],
        height=config["lattice"]["height"],
        seed=config["seed"],
        skip_first_cell=run["skip_first_cell"],
    )
    params = AnnealingParameters.from_dict(config["parameters"])
    simulation.set_pairing_energy(params.pairing_energy)
    simulation.set_external_field(params.external_field)
    simulation.set_temperature(params.temperature)

    schedule = create_schedule(config["schedule"])
    trace = run_annealing(
        simulation, schedule,
        n_steps=run["n_steps"],
        record_every=run["record_every"],
        start_step=run["start_step"],
        progress=progress,
    )
    return simulation, trace

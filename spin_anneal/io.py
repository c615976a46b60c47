"""Saving annealing configurations, traces and simulation snapshots to disk."""

import json
import numpy as np
import pandas as pd
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

from .runner import AnnealingTrace


PathLike = Union[str, Path]


def create_output_directory(prefix: str = "annealing", root: PathLike = "datas") -> Path:
    """Create and return a timestamped output directory under ``root``"""

    timestamp = datetime.now().strftime("%m%d_%H%M%S")
    output_dir = Path(root) / f"{prefix}_{timestamp}"
    output_dir.mkdir(parents=True, exist_ok=True)

    return output_dir


def _serialize(obj):
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.generic):
        return obj.item()
    elif isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    return obj


def save_configuration(output_dir: PathLike, config: Dict[str, Any]) -> Path:
    """Save run configuration to JSON"""

    path = Path(output_dir) / 'config.json'
    with open(path, 'w') as f:
        json.dump(_serialize(config), f, indent=4)
    return path


def save_trace(output_dir: PathLike, trace: AnnealingTrace) -> Path:
    """
    Save a trace as ``trace.csv`` (per-step columns) plus ``snapshots.npz``
    (one array per recorded step, keyed ``step_<n>``).
    """
    output_dir = Path(output_dir)
    trace.to_dataframe().to_csv(output_dir / 'trace.csv', index=False)
    np.savez(output_dir / 'snapshots.npz',
             **{f"step_{step}": state for step, state in trace.snapshots.items()})
    return output_dir


def load_trace(output_dir: PathLike) -> AnnealingTrace:
    """Inverse of ``save_trace``"""
    output_dir = Path(output_dir)
    df = pd.read_csv(output_dir / 'trace.csv')

    snapshots = {}
    with np.load(output_dir / 'snapshots.npz') as data:
        for key in data.files:
            snapshots[int(key.split("_", 1)[1])] = data[key]

    return AnnealingTrace(
        steps=df["step"].to_numpy(),
        temperatures=df["temperature"].to_numpy(dtype=np.float64),
        energies=df["energy"].to_numpy(dtype=np.float64),
        accepted=df["accepted"].to_numpy(dtype=bool),
        snapshots=dict(sorted(snapshots.items())),
    )


def save_simulation(output_dir: PathLike, simulation) -> Path:
    """Save a Simulation snapshot (size, parameters, state) to JSON"""

    path = Path(output_dir) / 'simulation.json'
    with open(path, 'w') as f:
        json.dump(simulation.to_dict(), f, indent=4)
    return path

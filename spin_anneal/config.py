"""
Default run configuration.

Configurations are plain dicts so they can be written next to the results
with ``spin_anneal.io.save_configuration``.
"""

import copy
from typing import Any, Dict, Optional


DEFAULT_CONFIG: Dict[str, Any] = {
    "lattice": {"width": 10, "height": 10},
    "seed": None,
    "parameters": {
        "pairing_energy": -1.0,
        "external_field": 0.05,
        "temperature": 0.0,
    },
    "schedule": {"type": "linear", "initial": 1001.0, "rate": 0.1},
    "run": {
        "n_steps": 10000,
        "start_step": 1,        # classic driver counts steps from 1
        "record_every": 100,
        "skip_first_cell": True,
    },
}


def _changes_schedule_type(override: Any, current: Any) -> bool:
    if not isinstance(override, dict) or "type" not in override:
        return False
    if not isinstance(current, dict):
        return True
    return str(override["type"]).lower() != str(current.get("type", "linear")).lower()


def merge_config(overrides: Optional[Dict[str, Any]] = None,
                 base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Recursively merge ``overrides`` into a copy of ``base`` (DEFAULT_CONFIG).

    Nested dicts are merged key by key; any other value replaces the default.
    A ``"schedule"`` override naming a different ``type`` replaces the whole
    schedule entry.
    """
    merged = copy.deepcopy(DEFAULT_CONFIG if base is None else base)
    for key, value in (overrides or {}).items():
        if key == "schedule" and _changes_schedule_type(value, merged.get(key)):
            merged[key] = copy.deepcopy(value)
        elif isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(value, merged[key])
        else:
            merged[key] = copy.deepcopy(value)
    return merged

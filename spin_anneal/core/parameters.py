"""
Parameter store for the annealing engine.
"""

from dataclasses import dataclass, asdict
from typing import Dict


DEFAULT_PAIRING_ENERGY = -1.0
DEFAULT_TEMPERATURE = 0.0
DEFAULT_EXTERNAL_FIELD = 0.05


@dataclass
class AnnealingParameters:
    """
    The three scalar knobs read by the energy model and the annealer.

    No validation is done: zero or negative temperatures and couplings of
    either sign are legal and produce the numerically defined behavior.

    Attributes
    ----------
    temperature : float
        Controls acceptance of energy-increasing moves
    pairing_energy : float
        Added for each pair of equal orthogonal neighbors (negative favors alignment)
    external_field : float
        Per-cell bias, positive values favor UP
    """
    temperature: float = DEFAULT_TEMPERATURE
    pairing_energy: float = DEFAULT_PAIRING_ENERGY
    external_field: float = DEFAULT_EXTERNAL_FIELD

    def get_temperature(self) -> float:
        return self.temperature

    def set_temperature(self, temperature: float) -> None:
        self.temperature = temperature

    def get_pairing_energy(self) -> float:
        return self.pairing_energy

    def set_pairing_energy(self, pairing_energy: float) -> None:
        self.pairing_energy = pairing_energy

    def get_external_field(self) -> float:
        return self.external_field

    def set_external_field(self, external_field: float) -> None:
        self.external_field = external_field

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> 'AnnealingParameters':
        """Build from a dict; missing keys take the defaults, unknown keys are ignored."""
        return cls(
            temperature=float(data.get('temperature', DEFAULT_TEMPERATURE)),
            pairing_energy=float(data.get('pairing_energy', DEFAULT_PAIRING_ENERGY)),
            external_field=float(data.get('external_field', DEFAULT_EXTERNAL_FIELD)),
        )

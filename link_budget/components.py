from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass(frozen=True)
class GainBounds:
    """Gain bounds (dB) of an amplifier, one entry per frequency band."""

    min: np.ndarray
    max: np.ndarray
    typ: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        if self.min.shape != self.max.shape:
            raise ValueError("Gain bounds must cover the same frequency bands.")
        if np.any(self.min > self.max):
            raise ValueError(f"Minimum gain {self.min} exceeds maximum gain {self.max}.")
        if self.typ is not None:
            if self.typ.shape != self.min.shape:
                raise ValueError("Typical gain must cover the same frequency bands.")
            if np.any(self.typ < self.min) or np.any(self.typ > self.max):
                raise ValueError(
                    f"Typical gain {self.typ} outside bounds [{self.min}, {self.max}]."
                )

    @property
    def nominal(self) -> np.ndarray:
        """Typical gain, or the midpoint of the bounds when no typical value is given."""
        if self.typ is not None:
            return self.typ
        return (self.min + self.max) / 2.0


@dataclass(frozen=True)
class Amplifier:
    name: str
    gain: GainBounds
    p1db: float  # Output compression limit (dBm)
    cost: float


@dataclass(frozen=True)
class Switch:
    name: str
    gain_on: np.ndarray  # Insertion gain per band (dB)
    gain_off: np.ndarray  # Isolation per band (dB)
    p1db: float  # Input power handling capability (dBm)
    cost: float

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class SystemConfig:
    """Fixed parameters of the signal chain.

    Per-band arrays are aligned with ``freqs`` (Hz).
    """

    freqs: tuple[int, ...]
    fixed_attenuator_gain: float  # Fixed attenuator gain (dB)
    divider_gain: np.ndarray  # Power divider gain per band (dB)
    input_power: float  # dBm
    required_min_output: np.ndarray  # Target max power output per band (dBm)
    required_max_leakage: np.ndarray  # Upper bound on leakage per band (dBm)

    def __post_init__(self) -> None:
        n = len(self.freqs)
        for field in ("divider_gain", "required_min_output", "required_max_leakage"):
            if getattr(self, field).shape != (n,):
                raise ValueError(f"{field} must have one value per frequency ({n}).")

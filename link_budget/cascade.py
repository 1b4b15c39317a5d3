import numpy as np
from dataclasses import dataclass

from .attenuation import attenuation
from .components import Amplifier, Switch
from .config import SystemConfig


@dataclass(frozen=True)
class CascadeResult:
    freqs: tuple[int, ...]
    pad: np.ndarray  # Attenuation applied in the max power case (dB)
    total_gain: np.ndarray  # Cascaded gain in the max power case (dB)
    output_power: np.ndarray  # Max power output (dBm)
    leakage: np.ndarray  # Output with the switch off (dBm)


def evaluate_cascade(
    amplifier: Amplifier, switch: Switch, config: SystemConfig
) -> CascadeResult:
    """
    Sums the chain gains for both worst cases over every band.

    Max power: minimum amplifier gain, switch on, padded down to the amplifier p1dB.
    Leakage: maximum amplifier gain, switch off, no padding.
    """
    passive = config.fixed_attenuator_gain + config.divider_gain

    pad = attenuation(config.input_power, amplifier.p1db, amplifier.gain.min)
    total_gain = amplifier.gain.min + switch.gain_on + passive - pad
    output_power = config.input_power + total_gain

    leakage = config.input_power + amplifier.gain.max + switch.gain_off + passive

    return CascadeResult(
        freqs=config.freqs,
        pad=pad,
        total_gain=total_gain,
        output_power=output_power,
        leakage=leakage,
    )

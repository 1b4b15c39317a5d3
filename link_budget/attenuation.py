import numpy as np


def attenuation(
    input_power: float, target_ceiling: float, device_gain: float | np.ndarray
) -> float | np.ndarray:
    """
    Padding (dB) needed so that input power plus device gain never exceeds the ceiling.
    pad = max(0, P_in + G - ceiling)
    """
    return np.maximum(0.0, input_power + device_gain - target_ceiling)

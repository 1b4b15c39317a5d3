import numpy as np
import pytest

from link_budget import attenuation


@pytest.mark.parametrize("input_power", [-20.0, 0.0, 10.0, 25.0])
@pytest.mark.parametrize("gain", [-5.0, 0.0, 14.0, 30.0])
@pytest.mark.parametrize("ceiling", [0.0, 20.0, 40.0])
def test_never_negative(input_power, gain, ceiling):
    assert attenuation(input_power, ceiling, gain) >= 0.0


def test_zero_when_below_ceiling():
    assert attenuation(10.0, 20.0, 10.0) == 0.0
    assert attenuation(10.0, 20.0, 5.0) == 0.0


def test_pads_down_to_ceiling():
    # 10 dBm + 14 dB exceeds a 20 dBm p1dB by 4 dB
    assert attenuation(10.0, 20.0, 14.0) == pytest.approx(4.0)


def test_per_band_array():
    pad = attenuation(10.0, 20.0, np.array([14.0, 8.0]))
    np.testing.assert_allclose(pad, [4.0, 0.0])

import json
from pathlib import Path

import numpy as np
import pytest

from io_utils import load_amplifier_strategy, load_catalog, load_system_config
from link_budget import Switch

DATA = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def cfg() -> dict:
    with open(DATA / "configurations.json", "r") as f:
        return json.load(f)


@pytest.fixture
def config(cfg):
    return load_system_config(cfg)


@pytest.fixture
def catalog(config):
    return load_catalog(DATA / "components.json", config.freqs)


@pytest.fixture
def amp_e(catalog):
    return catalog.amplifier("Amp-E")


@pytest.fixture
def fixed_amp(cfg, config, catalog):
    """Amplifier of the shipped fixed-amplifier configuration."""
    return load_amplifier_strategy(cfg, config.freqs).choose(catalog)


def make_switch(name, gain_on, cost, p1db=30.0, gain_off=(-60.0, -40.0)) -> Switch:
    return Switch(
        name=name,
        gain_on=np.array(gain_on, dtype=float),
        gain_off=np.array(gain_off, dtype=float),
        p1db=p1db,
        cost=cost,
    )

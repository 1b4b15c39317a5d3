import json
import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from link_budget import (
    Amplifier,
    Catalog,
    FixedAmplifier,
    GainBounds,
    ScoredAmplifier,
    ScoreWeights,
    Switch,
    SystemConfig,
)

logger = logging.getLogger(__name__)


def _require(data: dict, keys: set[str], source: str) -> None:
    missing = keys - set(data)
    if missing:
        raise ValueError(f"{source} is missing keys: {', '.join(sorted(missing))}")


def _per_band(values: dict, freqs: Sequence[int], source: str) -> np.ndarray:
    """Orders a {freq_hz: value} mapping by the global frequency list."""
    out: list[float] = []
    for f in freqs:
        # JSON object keys are strings
        key = str(f)
        if key not in values:
            raise ValueError(f"{source} has no value at {f} Hz")
        out.append(float(values[key]))
    return np.array(out, dtype=float)


def load_system_config(cfg: dict) -> SystemConfig:
    _require(cfg, {"global_frequency", "system"}, "configuration")
    freqs = tuple(int(float(f)) for f in cfg["global_frequency"]["freqs_hz"])

    system = cfg["system"]
    _require(
        system,
        {
            "input_power_dbm",
            "fixed_attenuator_gain_db",
            "divider_gain_db",
            "required_min_output_dbm",
            "required_max_leakage_dbm",
        },
        "system configuration",
    )
    return SystemConfig(
        freqs=freqs,
        fixed_attenuator_gain=float(system["fixed_attenuator_gain_db"]),
        divider_gain=_per_band(system["divider_gain_db"], freqs, "divider_gain_db"),
        input_power=float(system["input_power_dbm"]),
        required_min_output=_per_band(
            system["required_min_output_dbm"], freqs, "required_min_output_dbm"
        ),
        required_max_leakage=_per_band(
            system["required_max_leakage_dbm"], freqs, "required_max_leakage_dbm"
        ),
    )


def load_amplifier_strategy(
    cfg: dict, freqs: Sequence[int]
) -> FixedAmplifier | ScoredAmplifier:
    selection = cfg.get("amplifier_selection", {"mode": "scored"})
    mode = selection.get("mode")
    if mode == "fixed":
        _require(selection, {"name"}, "amplifier_selection")
        # An inline record takes precedence over the catalog entry of the same name
        amplifier = None
        if "amplifier" in selection:
            amp_data = {"name": selection["name"], **selection["amplifier"]}
            amplifier = load_amplifier(amp_data, freqs, scored=False)
        return FixedAmplifier(selection["name"], amplifier)
    if mode == "scored":
        return ScoredAmplifier(ScoreWeights(**selection.get("weights", {})))
    raise ValueError(f"amplifier_selection mode must be 'fixed' or 'scored', got {mode!r}")


def load_amplifier(amp_data: dict, freqs: Sequence[int], scored: bool = True) -> Amplifier:
    _require(amp_data, {"name", "gain_db", "p1db_dbm", "cost"}, "amplifier entry")
    name = amp_data["name"]
    bands = amp_data["gain_db"]
    for k, v in bands.items():
        _require(v, {"min", "max"}, f"{name} gain at {k} Hz")

    mins = _per_band({k: v["min"] for k, v in bands.items()}, freqs, f"{name} min gain")
    maxs = _per_band({k: v["max"] for k, v in bands.items()}, freqs, f"{name} max gain")

    typ = None
    if all("typ" in v for v in bands.values()):
        typ = _per_band({k: v["typ"] for k, v in bands.items()}, freqs, f"{name} typ gain")
    elif scored:
        logger.warning(f"{name} has no typical gain, scoring will use the bound midpoint")

    return Amplifier(
        name=name,
        gain=GainBounds(min=mins, max=maxs, typ=typ),
        p1db=float(amp_data["p1db_dbm"]),
        cost=float(amp_data["cost"]),
    )


def load_switch(sw_data: dict, freqs: Sequence[int]) -> Switch:
    _require(
        sw_data, {"name", "gain_on_db", "gain_off_db", "p1db_dbm", "cost"}, "switch entry"
    )
    name = sw_data["name"]
    return Switch(
        name=name,
        gain_on=_per_band(sw_data["gain_on_db"], freqs, f"{name} on-state gain"),
        gain_off=_per_band(sw_data["gain_off_db"], freqs, f"{name} off-state gain"),
        p1db=float(sw_data["p1db_dbm"]),
        cost=float(sw_data["cost"]),
    )


def load_catalog(path_to_catalog: Path, freqs: Sequence[int]) -> Catalog:
    with open(path_to_catalog, "r") as f:
        data = json.load(f)

    _require(data, {"amplifiers", "switches"}, path_to_catalog.name)
    catalog = Catalog(
        amplifiers=tuple(load_amplifier(a, freqs) for a in data["amplifiers"]),
        switches=tuple(load_switch(s, freqs) for s in data["switches"]),
    )

    if not catalog.switches:
        logger.warning(f"{path_to_catalog.name} lists no switches")

    return catalog

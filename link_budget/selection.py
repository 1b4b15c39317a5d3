from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .catalog import Catalog
from .components import Amplifier, Switch

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """No component in the catalog satisfies the selection constraints."""


@dataclass(frozen=True)
class ScoreWeights:
    gain: float = 0.5
    power: float = 0.3
    cost: float = 0.2


def select_switch(
    switches: Iterable[Switch],
    input_power: float,
    amp_gain: np.ndarray,
    required_min_output: np.ndarray,
) -> Switch:
    """
    Cheapest switch that keeps the output above the required power in every band
    and can handle the input power. Ties keep the earlier catalog entry.
    """
    best: Switch | None = None
    for sw in switches:
        output = input_power + amp_gain + sw.gain_on
        if not np.all(output >= required_min_output):
            logger.debug(
                f"Rejected {sw.name}: output {output} dBm below {required_min_output} dBm"
            )
            continue
        if sw.p1db < input_power:
            logger.debug(
                f"Rejected {sw.name}: p1dB {sw.p1db} dBm below input {input_power} dBm"
            )
            continue
        if best is None or sw.cost < best.cost:
            best = sw

    if best is None:
        raise SelectionError("No suitable switch found!")
    logger.info(f"Selected switch {best.name} (cost {best.cost})")
    return best


def score_amplifier(amp: Amplifier, weights: ScoreWeights = ScoreWeights()) -> float:
    """Weighted score, lower is better: large gain and p1dB help, cost hurts."""
    # Zero gain or p1dB scores inf and is never selected
    with np.errstate(divide="ignore"):
        gain_term = float(np.sum(1.0 / amp.gain.nominal))
        power_term = float(np.divide(1.0, amp.p1db))
    return weights.gain * gain_term + weights.power * power_term + weights.cost * amp.cost


def select_amplifier(
    amplifiers: Sequence[Amplifier], weights: ScoreWeights = ScoreWeights()
) -> Amplifier:
    """Lowest-scoring amplifier; ties keep the earlier catalog entry."""
    best: Amplifier | None = None
    best_score = float("inf")
    for amp in amplifiers:
        score = score_amplifier(amp, weights)
        logger.debug(f"{amp.name}: score {score:.4f}")
        if score < best_score:
            best_score = score
            best = amp

    if best is None:
        raise SelectionError("No amplifier candidates to choose from.")
    logger.info(f"Selected amplifier {best.name} (score {best_score:.4f})")
    return best


class FixedAmplifier:
    """Uses a given amplifier record, or a named amplifier from the catalog."""

    dynamic = False

    def __init__(self, name: str, amplifier: Amplifier | None = None):
        self.name = name
        self.amplifier = amplifier

    def choose(self, catalog: Catalog) -> Amplifier:
        if self.amplifier is not None:
            return self.amplifier
        try:
            return catalog.amplifier(self.name)
        except KeyError as e:
            raise SelectionError(e.args[0]) from e


class ScoredAmplifier:
    """Picks the best-scoring amplifier from the catalog."""

    dynamic = True

    def __init__(self, weights: ScoreWeights = ScoreWeights()):
        self.weights = weights

    def choose(self, catalog: Catalog) -> Amplifier:
        return select_amplifier(catalog.amplifiers, self.weights)

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from .cascade import CascadeResult, evaluate_cascade
from .catalog import Catalog
from .components import Amplifier, Switch
from .config import SystemConfig
from .selection import select_switch
from .spec_check import SpecificationResult, check_specification

logger = logging.getLogger(__name__)


class AmplifierStrategy(Protocol):
    dynamic: bool

    def choose(self, catalog: Catalog) -> Amplifier: ...


@dataclass(frozen=True)
class LinkBudgetReport:
    amplifier: Amplifier
    switch: Switch
    cascade: CascadeResult
    spec: SpecificationResult
    dynamic: bool  # Amplifier was chosen from the catalog rather than fixed


def run_link_budget(
    catalog: Catalog, config: SystemConfig, strategy: AmplifierStrategy
) -> LinkBudgetReport:
    """Selects the amplifier and switch, cascades the chain and checks it."""
    amplifier = strategy.choose(catalog)

    # Switch must still meet the output target at the amplifier's minimum gain
    switch = select_switch(
        catalog.switches,
        config.input_power,
        amplifier.gain.min,
        config.required_min_output,
    )

    cascade = evaluate_cascade(amplifier, switch, config)
    spec = check_specification(cascade, config)
    if not spec.passed:
        for v in spec.violations:
            logger.info(f"{v.metric} at {v.freq} Hz: {v.value:g} dBm (limit {v.limit:g} dBm)")

    return LinkBudgetReport(
        amplifier=amplifier,
        switch=switch,
        cascade=cascade,
        spec=spec,
        dynamic=strategy.dynamic,
    )

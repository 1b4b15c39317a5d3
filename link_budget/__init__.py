from .attenuation import attenuation
from .cascade import CascadeResult, evaluate_cascade
from .catalog import Catalog
from .components import Amplifier, GainBounds, Switch
from .config import SystemConfig
from .pipeline import LinkBudgetReport, run_link_budget
from .selection import (
    FixedAmplifier,
    ScoredAmplifier,
    ScoreWeights,
    SelectionError,
    score_amplifier,
    select_amplifier,
    select_switch,
)
from .spec_check import SpecificationResult, SpecificationViolation, check_specification

__all__ = [
    "Amplifier",
    "CascadeResult",
    "Catalog",
    "FixedAmplifier",
    "GainBounds",
    "LinkBudgetReport",
    "ScoreWeights",
    "ScoredAmplifier",
    "SelectionError",
    "SpecificationResult",
    "SpecificationViolation",
    "Switch",
    "SystemConfig",
    "attenuation",
    "check_specification",
    "evaluate_cascade",
    "run_link_budget",
    "score_amplifier",
    "select_amplifier",
    "select_switch",
]

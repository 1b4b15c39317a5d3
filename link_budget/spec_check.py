from dataclasses import dataclass

from .cascade import CascadeResult
from .config import SystemConfig


@dataclass(frozen=True)
class SpecificationViolation:
    metric: str  # "output_power" or "leakage"
    freq: int
    value: float
    limit: float


@dataclass(frozen=True)
class SpecificationResult:
    passed: bool
    violations: tuple[SpecificationViolation, ...]


def check_specification(
    cascade: CascadeResult, config: SystemConfig
) -> SpecificationResult:
    """Compares output power and leakage against the required limits in every band."""
    violations: list[SpecificationViolation] = []
    for idx, freq in enumerate(cascade.freqs):
        output = float(cascade.output_power[idx])
        min_output = float(config.required_min_output[idx])
        # Negated so that a NaN result counts as a violation
        if not output >= min_output:
            violations.append(
                SpecificationViolation("output_power", freq, output, min_output)
            )

        leakage = float(cascade.leakage[idx])
        max_leakage = float(config.required_max_leakage[idx])
        if not leakage <= max_leakage:
            violations.append(
                SpecificationViolation("leakage", freq, leakage, max_leakage)
            )

    return SpecificationResult(passed=not violations, violations=tuple(violations))

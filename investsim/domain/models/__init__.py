"""Data models for investsim."""

from .parameters import InvestmentParameters, UsageType, validate_parameters
from .results import (
    NEVER,
    BreakEvenPoint,
    BreakEvenResult,
    Scenario,
    ScenarioResult,
    ScenarioSet,
    SensitivityMatrix,
    SensitivityPoint,
)

__all__ = [
    "InvestmentParameters",
    "UsageType",
    "validate_parameters",
    "NEVER",
    "BreakEvenPoint",
    "BreakEvenResult",
    "Scenario",
    "ScenarioResult",
    "ScenarioSet",
    "SensitivityMatrix",
    "SensitivityPoint",
]

"""Core configuration, errors and loan primitives."""

from .assumptions import (
    DEFAULT_COST_ASSUMPTIONS,
    DEFAULT_HORIZON_YEARS,
    DEFAULT_SWEEP_AXES,
    AnnualizationPolicy,
    CostAssumptions,
    SweepAxes,
)
from .exceptions import (
    ConfigurationError,
    DomainUndefinedError,
    InvalidInputError,
    InvestSimError,
)
from .financial import (
    calculate_monthly_payment,
    calculate_remaining_balance,
    calculate_total_interest,
)

__all__ = [
    "DEFAULT_COST_ASSUMPTIONS",
    "DEFAULT_HORIZON_YEARS",
    "DEFAULT_SWEEP_AXES",
    "AnnualizationPolicy",
    "CostAssumptions",
    "SweepAxes",
    "calculate_monthly_payment",
    "calculate_remaining_balance",
    "calculate_total_interest",
    # Exceptions
    "InvestSimError",
    "InvalidInputError",
    "DomainUndefinedError",
    "ConfigurationError",
]

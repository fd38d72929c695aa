"""Cost assumptions and sweep axes - single source of truth for engine constants.

The engine never inlines these percentages or candidate sets; every entry
point takes them as arguments and falls back to the defaults declared here.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from pydantic import BaseModel, Field, model_validator

from .exceptions import ConfigurationError


class AnnualizationPolicy(str, Enum):
    """What to do when annualized ROI is undefined (roi <= -100%)."""

    RAISE = "raise"
    CLAMP = "clamp"


# Annualized ROI reported under the CLAMP policy (total loss rate)
ANNUALIZED_ROI_FLOOR = -100.0


class CostAssumptions(BaseModel):
    """Fixed-percentage cost model applied to every evaluation."""

    acquisition_cost_pct: float = Field(default=7.0, ge=0, description="Transaction costs at purchase, % of price")
    ongoing_cost_pct: float = Field(default=2.0, ge=0, description="Annual ownership costs, % of price")
    exit_cost_pct: float = Field(default=2.5, ge=0, description="Disposal costs, % of exit value")
    short_term_net_factor: float = Field(
        default=0.85, ge=0, le=1, description="Share of short-term gross revenue kept after platform fees"
    )

    model_config = {
        "frozen": True,
    }


class SweepAxes(BaseModel):
    """Candidate values for the sensitivity sweeps and matrices (percent units)."""

    appreciation_rates: tuple[float, ...] = (0, 2, 4, 6, 8, 10, 12, 15)
    yield_percents: tuple[float, ...] = (3, 4, 5, 6, 7, 8, 9, 10)
    matrix_appreciation_rates: tuple[float, ...] = (0, 2, 4, 6, 8, 10)
    matrix_yield_percents: tuple[float, ...] = (3, 4, 5, 6, 7, 8)
    break_even_appreciation_rates: tuple[float, ...] = (0, 2, 4, 6, 8, 10)
    yield_baseline_epsilon: float = Field(default=0.5, gt=0)

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_non_empty(self) -> "SweepAxes":
        for name in (
            "appreciation_rates",
            "yield_percents",
            "matrix_appreciation_rates",
            "matrix_yield_percents",
            "break_even_appreciation_rates",
        ):
            check_axis(name, getattr(self, name))
        return self


def check_axis(name: str, values: Sequence[float]) -> tuple[float, ...]:
    """Return the candidate values as a tuple.

    Raises:
        ConfigurationError: If the axis is empty
    """
    values = tuple(values)
    if not values:
        raise ConfigurationError(f"Sweep axis '{name}' must contain at least one value")
    return values


DEFAULT_COST_ASSUMPTIONS = CostAssumptions()
DEFAULT_SWEEP_AXES = SweepAxes()
DEFAULT_HORIZON_YEARS = 30

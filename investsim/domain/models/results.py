"""Result data models.

Outputs of the evaluator, the break-even simulator and the analysis
drivers. All values are raw numbers; formatting belongs to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar, Union

import numpy as np
import pandas as pd
from pydantic import BaseModel, Field, computed_field

# Break-even matrix marker for "not reached within the horizon"
NEVER = "never"

BreakEvenCell = Union[int, str]


class ScenarioResult(BaseModel):
    """Profitability at the end of the holding period."""

    roi: float = Field(..., description="Total ROI %")
    net_profit: float = Field(..., description="Net profit in currency units")
    annualized_roi: float = Field(..., description="Compound annual ROI %")

    # Diagnostics
    initial_investment: float = Field(default=0.0, description="Cash invested at purchase")
    total_financing_cost: float = Field(default=0.0, description="Mortgage payments made while held")
    total_interest: float = Field(default=0.0, description="Full-term interest charged")
    annualization_clamped: bool = Field(default=False, description="annualized_roi hit the documented floor")

    model_config = {
        "frozen": True,
    }


class BreakEvenResult(BaseModel):
    """Year-by-year cumulative profit and the first profitable year."""

    break_even_year: int = Field(..., description="1-indexed year; max_years + 1 if never reached")
    is_profitable: bool
    cumulative_profit_by_year: list[float] = Field(default_factory=list, description="Index 0 = year 1")
    max_years: int = Field(default=30, description="Simulated horizon")

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def never(self) -> bool:
        """True when break-even falls beyond the simulated horizon."""
        return self.break_even_year > self.max_years

    def matrix_cell(self) -> BreakEvenCell:
        """Break-even year, or NEVER when beyond the horizon."""
        return NEVER if self.never else self.break_even_year


class SensitivityPoint(BaseModel):
    """One point of a single-variable ROI sweep."""

    axis_value: float
    roi: float = Field(..., description="Total ROI %, rounded to 1 decimal")
    annualized_roi: float = Field(..., description="Annualized ROI %, rounded to 2 decimals")
    is_baseline: bool = False

    @property
    def label(self) -> str:
        return f"{self.axis_value:g}%"


class BreakEvenPoint(BaseModel):
    """Break-even year for one swept appreciation rate."""

    axis_value: float
    years: int = Field(..., description="Break-even year, capped at the horizon")
    is_profitable: bool
    is_never: bool


class Scenario(BaseModel):
    """A named perturbation of the base parameters and its outcome."""

    name: str
    description: str
    roi: float
    annualized_roi: float
    net_profit: float
    break_even: Optional[BreakEvenResult] = None


class ScenarioSet(BaseModel):
    """Conservative / base / optimistic comparison."""

    conservative: Scenario
    base: Scenario
    optimistic: Scenario

    def as_list(self) -> list[Scenario]:
        return [self.conservative, self.base, self.optimistic]


V = TypeVar("V")


@dataclass(frozen=True)
class SensitivityMatrix(Generic[V]):
    """Two-axis grid of outcomes indexed by (appreciation rate, yield %).

    `values[appreciation][yield]` holds either an ROI percentage or a
    break-even cell, depending on which builder produced it.
    """

    appreciation_rates: tuple[float, ...]
    yield_percents: tuple[float, ...]
    values: dict[float, dict[float, V]] = field(default_factory=dict)

    def cell(self, appreciation_rate: float, yield_percent: float) -> V:
        return self.values[appreciation_rate][yield_percent]

    @staticmethod
    def row_label(appreciation_rate: float) -> str:
        return f"{appreciation_rate:g}%"

    @staticmethod
    def column_key(yield_percent: float) -> str:
        return f"yield{yield_percent:g}"

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Nested mapping keyed by row label, then column key."""
        return {
            self.row_label(a): {self.column_key(y): self.values[a][y] for y in self.yield_percents}
            for a in self.appreciation_rates
        }

    def map(self, fn: Callable[[V], Any]) -> dict[str, dict[str, Any]]:
        """Apply `fn` to every cell, keeping the nested label layout."""
        return {
            row: {col: fn(v) for col, v in cols.items()}
            for row, cols in self.to_dict().items()
        }

    def to_frame(self) -> pd.DataFrame:
        """Rows = appreciation labels, columns = yield keys."""
        data = np.array(
            [[self.values[a][y] for y in self.yield_percents] for a in self.appreciation_rates],
            dtype=object,
        )
        return pd.DataFrame(
            data,
            index=[self.row_label(a) for a in self.appreciation_rates],
            columns=[self.column_key(y) for y in self.yield_percents],
        )

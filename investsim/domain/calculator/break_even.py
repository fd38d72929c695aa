"""Break-even simulator.

Walks year by year to a horizon, tracking cumulative profit net of the
initial investment and credited with mortgage principal repaid.
"""

from __future__ import annotations

from investsim.core.assumptions import DEFAULT_COST_ASSUMPTIONS, DEFAULT_HORIZON_YEARS, CostAssumptions
from investsim.core.exceptions import InvalidInputError
from investsim.domain.calculator.cost_model import CostModel, ProfitAccounting
from investsim.domain.models.parameters import InvestmentParameters, validate_parameters
from investsim.domain.models.results import BreakEvenResult


def simulate_break_even(
    params: InvestmentParameters,
    max_years: int = DEFAULT_HORIZON_YEARS,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
) -> BreakEvenResult:
    """Find the first year in which cumulative profit is non-negative.

    `params.holding_period` is ignored; the simulator runs its own horizon.

    Args:
        params: Investment parameters
        max_years: Simulation horizon in years
        assumptions: Cost model constants

    Returns:
        BreakEvenResult with exactly `max_years` trajectory entries. When no
        year breaks even, break_even_year is max_years + 1.

    Raises:
        InvalidInputError: Parameters fail validation or max_years <= 0
    """
    if max_years <= 0:
        raise InvalidInputError("max_years", max_years, "must be > 0")
    validate_parameters(params, require_holding_period=False)

    model = CostModel.from_params(params, assumptions)

    trajectory: list[float] = []
    break_even_year: int | None = None

    for year in range(1, max_years + 1):
        profit = model.net_profit(year, ProfitAccounting.YEARLY_EQUITY_CREDIT)
        trajectory.append(profit)
        if break_even_year is None and profit >= 0:
            break_even_year = year

    return BreakEvenResult(
        break_even_year=break_even_year if break_even_year is not None else max_years + 1,
        is_profitable=break_even_year is not None,
        cumulative_profit_by_year=trajectory,
        max_years=max_years,
    )

"""Conservative / base / optimistic scenario comparison.

Conservative: appreciation -3 pts (floored at 0), rent and nightly rate
-15%, occupancy -15 pts (floored at 30).
Optimistic: appreciation +3 pts, rent and nightly rate +15%, occupancy
+10 pts (capped at 95).
"""

from __future__ import annotations

import pandas as pd
import structlog

from investsim.core.assumptions import (
    DEFAULT_COST_ASSUMPTIONS,
    DEFAULT_HORIZON_YEARS,
    AnnualizationPolicy,
    CostAssumptions,
)
from investsim.domain.calculator import evaluate, simulate_break_even
from investsim.domain.models import InvestmentParameters, Scenario, ScenarioSet, validate_parameters

log = structlog.get_logger(__name__)

# Cumulative-profit comparison never extends past this many years
CUMULATIVE_TABLE_MAX_YEARS = 20


def conservative_parameters(params: InvestmentParameters) -> InvestmentParameters:
    return params.with_updates(
        appreciation_rate=max(0, params.appreciation_rate - 3),
        annual_rent=params.annual_rent * 0.85,
        daily_rate=params.daily_rate * 0.85,
        occupancy_rate=max(30, params.occupancy_rate - 15),
    )


def optimistic_parameters(params: InvestmentParameters) -> InvestmentParameters:
    return params.with_updates(
        appreciation_rate=params.appreciation_rate + 3,
        annual_rent=params.annual_rent * 1.15,
        daily_rate=params.daily_rate * 1.15,
        occupancy_rate=min(95, params.occupancy_rate + 10),
    )


def _scenario(
    name: str,
    description: str,
    params: InvestmentParameters,
    assumptions: CostAssumptions,
    policy: AnnualizationPolicy,
    include_break_even: bool,
    horizon: int,
) -> Scenario:
    result = evaluate(params, assumptions, policy)
    return Scenario(
        name=name,
        description=description,
        roi=result.roi,
        annualized_roi=result.annualized_roi,
        net_profit=result.net_profit,
        break_even=simulate_break_even(params, horizon, assumptions) if include_break_even else None,
    )


def generate_scenarios(
    params: InvestmentParameters,
    include_break_even: bool = False,
    horizon: int = DEFAULT_HORIZON_YEARS,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
    policy: AnnualizationPolicy = AnnualizationPolicy.CLAMP,
) -> ScenarioSet:
    """Evaluate the three named scenarios.

    Args:
        params: Base parameters (holding_period required)
        include_break_even: Also run the simulator on each variant
        horizon: Simulator horizon in years
        assumptions: Cost model constants
        policy: Annualization policy for roi <= -100

    Returns:
        ScenarioSet with conservative, base and optimistic entries

    Raises:
        InvalidInputError: Base parameters fail validation
    """
    validate_parameters(params)
    conservative = conservative_parameters(params)
    optimistic = optimistic_parameters(params)

    scenarios = ScenarioSet(
        conservative=_scenario(
            "Conservative",
            f"{conservative.appreciation_rate:g}% appreciation, 15% lower rent",
            conservative, assumptions, policy, include_break_even, horizon,
        ),
        base=_scenario(
            "Base Case",
            f"{params.appreciation_rate:g}% appreciation, current rent",
            params, assumptions, policy, include_break_even, horizon,
        ),
        optimistic=_scenario(
            "Optimistic",
            f"{optimistic.appreciation_rate:g}% appreciation, 15% higher rent",
            optimistic, assumptions, policy, include_break_even, horizon,
        ),
    )

    log.debug(
        "scenarios_generated",
        conservative_roi=scenarios.conservative.roi,
        base_roi=scenarios.base.roi,
        optimistic_roi=scenarios.optimistic.roi,
    )
    return scenarios


def cumulative_profit_table(scenarios: ScenarioSet, holding_period: int) -> pd.DataFrame:
    """Year-by-year cumulative profit of the three scenarios side by side.

    Covers years 1 to min(holding_period + 5, 20). Years beyond a simulated
    trajectory read as 0.

    Raises:
        ValueError: If the scenarios were generated without break-even data
    """
    if any(s.break_even is None for s in scenarios.as_list()):
        raise ValueError("Scenarios must be generated with include_break_even=True")

    n_years = min(holding_period + 5, CUMULATIVE_TABLE_MAX_YEARS)

    def _at(scenario: Scenario, i: int) -> float:
        trajectory = scenario.break_even.cumulative_profit_by_year
        return trajectory[i] if i < len(trajectory) else 0.0

    rows = [
        {
            "year": i + 1,
            "conservative": _at(scenarios.conservative, i),
            "base": _at(scenarios.base, i),
            "optimistic": _at(scenarios.optimistic, i),
        }
        for i in range(max(0, n_years))
    ]
    return pd.DataFrame(rows, columns=["year", "conservative", "base", "optimistic"])


def break_even_risk_spread(scenarios: ScenarioSet) -> int | None:
    """Years between the optimistic and conservative break-even.

    None unless both the base and the conservative scenario break even
    within the horizon.
    """
    base = scenarios.base.break_even
    conservative = scenarios.conservative.break_even
    optimistic = scenarios.optimistic.break_even
    if base is None or conservative is None or optimistic is None:
        return None
    if not (base.is_profitable and conservative.is_profitable):
        return None
    return conservative.break_even_year - optimistic.break_even_year

"""Single-variable sensitivity sweeps.

Each point clones the caller's parameters with one value substituted and
re-runs the evaluator (or simulator), holding everything else constant.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from investsim.core.assumptions import (
    DEFAULT_COST_ASSUMPTIONS,
    DEFAULT_HORIZON_YEARS,
    DEFAULT_SWEEP_AXES,
    AnnualizationPolicy,
    CostAssumptions,
    check_axis,
)
from investsim.domain.calculator import evaluate, simulate_break_even
from investsim.domain.models import (
    BreakEvenPoint,
    InvestmentParameters,
    SensitivityPoint,
    UsageType,
    validate_parameters,
)

log = structlog.get_logger(__name__)


def simulated_rent(purchase_price: float, yield_percent: float) -> float:
    """Annual rent producing the given gross yield on the purchase price."""
    return purchase_price * (yield_percent / 100)


def sweep_appreciation(
    params: InvestmentParameters,
    rates: Sequence[float] | None = None,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
    policy: AnnualizationPolicy = AnnualizationPolicy.CLAMP,
) -> list[SensitivityPoint]:
    """ROI across appreciation rates, everything else held constant.

    The point whose rate equals the configured appreciation rate exactly is
    flagged as the baseline.
    """
    validate_parameters(params)
    if rates is None:
        rates = DEFAULT_SWEEP_AXES.appreciation_rates
    else:
        rates = check_axis("appreciation_rates", rates)

    points = []
    for rate in rates:
        result = evaluate(params.with_updates(appreciation_rate=rate), assumptions, policy)
        points.append(SensitivityPoint(
            axis_value=rate,
            roi=round(result.roi, 1),
            annualized_roi=round(result.annualized_roi, 2),
            is_baseline=rate == params.appreciation_rate,
        ))

    log.debug("appreciation_sweep_completed", points=len(points))
    return points


def sweep_yield(
    params: InvestmentParameters,
    yield_percents: Sequence[float] | None = None,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
    policy: AnnualizationPolicy = AnnualizationPolicy.CLAMP,
    epsilon: float = DEFAULT_SWEEP_AXES.yield_baseline_epsilon,
) -> list[SensitivityPoint]:
    """ROI across gross rental yields (% of price).

    Empty for personal use. A point is the baseline when it lies within
    `epsilon` percentage points of the configured rent's yield.
    """
    validate_parameters(params)
    if params.usage_type == UsageType.PERSONAL:
        return []

    if yield_percents is None:
        yield_percents = DEFAULT_SWEEP_AXES.yield_percents
    else:
        yield_percents = check_axis("yield_percents", yield_percents)
    base_yield = params.baseline_yield

    points = []
    for yield_percent in yield_percents:
        rent = simulated_rent(params.purchase_price, yield_percent)
        result = evaluate(params.with_updates(annual_rent=rent), assumptions, policy)
        points.append(SensitivityPoint(
            axis_value=yield_percent,
            roi=round(result.roi, 1),
            annualized_roi=round(result.annualized_roi, 2),
            is_baseline=abs(yield_percent - base_yield) < epsilon,
        ))

    log.debug("yield_sweep_completed", points=len(points), baseline_yield=base_yield)
    return points


def sweep_break_even_by_appreciation(
    params: InvestmentParameters,
    rates: Sequence[float] | None = None,
    horizon: int = DEFAULT_HORIZON_YEARS,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
) -> list[BreakEvenPoint]:
    """Break-even year across appreciation rates, capped at the horizon."""
    validate_parameters(params, require_holding_period=False)
    if rates is None:
        rates = DEFAULT_SWEEP_AXES.break_even_appreciation_rates
    else:
        rates = check_axis("break_even_appreciation_rates", rates)

    points = []
    for rate in rates:
        result = simulate_break_even(params.with_updates(appreciation_rate=rate), horizon, assumptions)
        points.append(BreakEvenPoint(
            axis_value=rate,
            years=min(result.break_even_year, horizon),
            is_profitable=result.is_profitable,
            is_never=result.never,
        ))

    log.debug("break_even_sweep_completed", points=len(points), horizon=horizon)
    return points

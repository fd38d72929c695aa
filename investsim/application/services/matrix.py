"""Two-variable sensitivity matrices.

Rows sweep the appreciation rate, columns sweep the gross rental yield.
Every cell substitutes both values into a fresh copy of the parameters, so
cells are independent and may be computed on a thread pool.
"""

from __future__ import annotations

import concurrent.futures
from typing import Callable, Sequence, TypeVar

import structlog

from investsim.application.services.sweeper import simulated_rent
from investsim.core.assumptions import (
    DEFAULT_COST_ASSUMPTIONS,
    DEFAULT_HORIZON_YEARS,
    DEFAULT_SWEEP_AXES,
    AnnualizationPolicy,
    CostAssumptions,
    check_axis,
)
from investsim.domain.calculator import evaluate, simulate_break_even
from investsim.domain.models import InvestmentParameters, SensitivityMatrix, UsageType, validate_parameters
from investsim.domain.models.results import BreakEvenCell

log = structlog.get_logger(__name__)

V = TypeVar("V")

# Personal use has no rental axis; a single synthetic zero-yield column
PERSONAL_YIELD_AXIS: tuple[float, ...] = (0,)


def cell_parameters(
    params: InvestmentParameters,
    appreciation_rate: float,
    yield_percent: float,
) -> InvestmentParameters:
    """Parameters for one matrix cell."""
    rent = 0.0 if params.usage_type == UsageType.PERSONAL else simulated_rent(params.purchase_price, yield_percent)
    return params.with_updates(appreciation_rate=appreciation_rate, annual_rent=rent)


def _yield_axis(params: InvestmentParameters, yield_percents: Sequence[float] | None) -> tuple[float, ...]:
    if params.usage_type == UsageType.PERSONAL:
        return PERSONAL_YIELD_AXIS
    if yield_percents is None:
        return DEFAULT_SWEEP_AXES.matrix_yield_percents
    return check_axis("matrix_yield_percents", yield_percents)


def _build(
    params: InvestmentParameters,
    appreciation_rates: Sequence[float] | None,
    yield_percents: Sequence[float] | None,
    compute: Callable[[InvestmentParameters], V],
    n_workers: int,
    require_holding_period: bool,
) -> SensitivityMatrix[V]:
    validate_parameters(params, require_holding_period=require_holding_period)
    if appreciation_rates is None:
        rows = DEFAULT_SWEEP_AXES.matrix_appreciation_rates
    else:
        rows = check_axis("matrix_appreciation_rates", appreciation_rates)
    cols = _yield_axis(params, yield_percents)
    cells = [(a, y) for a in rows for y in cols]

    if n_workers > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=n_workers) as executor:
            futures = [executor.submit(compute, cell_parameters(params, a, y)) for a, y in cells]
            # result() re-raises the cell's exception; no partial matrix is returned
            results = [f.result() for f in futures]
    else:
        results = [compute(cell_parameters(params, a, y)) for a, y in cells]

    values: dict[float, dict[float, V]] = {a: {} for a in rows}
    for (a, y), value in zip(cells, results):
        values[a][y] = value

    log.debug("matrix_built", rows=len(rows), columns=len(cols), workers=n_workers)
    return SensitivityMatrix(appreciation_rates=rows, yield_percents=cols, values=values)


def build_roi_matrix(
    params: InvestmentParameters,
    appreciation_rates: Sequence[float] | None = None,
    yield_percents: Sequence[float] | None = None,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
    policy: AnnualizationPolicy = AnnualizationPolicy.CLAMP,
    n_workers: int = 1,
) -> SensitivityMatrix[float]:
    """Total ROI % for every (appreciation, yield) pair."""
    return _build(
        params,
        appreciation_rates,
        yield_percents,
        lambda p: evaluate(p, assumptions, policy).roi,
        n_workers,
        require_holding_period=True,
    )


def build_break_even_matrix(
    params: InvestmentParameters,
    appreciation_rates: Sequence[float] | None = None,
    yield_percents: Sequence[float] | None = None,
    horizon: int = DEFAULT_HORIZON_YEARS,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
    n_workers: int = 1,
) -> SensitivityMatrix[BreakEvenCell]:
    """Break-even year (or NEVER) for every (appreciation, yield) pair."""
    return _build(
        params,
        appreciation_rates,
        yield_percents,
        lambda p: simulate_break_even(p, horizon, assumptions).matrix_cell(),
        n_workers,
        require_holding_period=False,
    )

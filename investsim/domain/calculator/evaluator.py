"""Scenario evaluator.

Total and annualized return of one property held for a fixed period.
"""

from __future__ import annotations

from investsim.core.assumptions import (
    ANNUALIZED_ROI_FLOOR,
    DEFAULT_COST_ASSUMPTIONS,
    AnnualizationPolicy,
    CostAssumptions,
)
from investsim.core.exceptions import DomainUndefinedError, InvalidInputError
from investsim.domain.calculator.cost_model import CostModel, ProfitAccounting
from investsim.domain.models.parameters import InvestmentParameters, validate_parameters
from investsim.domain.models.results import ScenarioResult


def annualize_roi(
    roi: float,
    holding_period: int,
    policy: AnnualizationPolicy = AnnualizationPolicy.CLAMP,
) -> tuple[float, bool]:
    """Compound annual rate equivalent to a total ROI.

    Args:
        roi: Total ROI %
        holding_period: Years held (> 0)
        policy: Handling of roi <= -100, where the root is undefined

    Returns:
        Tuple of (annualized ROI %, clamped flag)

    Raises:
        DomainUndefinedError: roi <= -100 under the RAISE policy
    """
    if roi <= -100:
        if policy is AnnualizationPolicy.RAISE:
            raise DomainUndefinedError(roi, holding_period)
        return ANNUALIZED_ROI_FLOOR, True

    return ((1 + roi / 100) ** (1 / holding_period) - 1) * 100, False


def evaluate(
    params: InvestmentParameters,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
    policy: AnnualizationPolicy = AnnualizationPolicy.CLAMP,
) -> ScenarioResult:
    """Evaluate profitability at the end of the holding period.

    Financing is charged as payments made while held plus the full-term
    interest of the loan (see `ProfitAccounting.EXIT_LUMP_SUM`).

    Args:
        params: Fully specified parameters, including holding_period
        assumptions: Cost model constants
        policy: Annualization policy for roi <= -100

    Returns:
        ScenarioResult with ROI, net profit and annualized ROI

    Raises:
        InvalidInputError: Parameters fail validation, or nothing is invested up front
        DomainUndefinedError: Annualized ROI undefined under the RAISE policy
    """
    validate_parameters(params, require_holding_period=True)

    holding_period = params.holding_period
    model = CostModel.from_params(params, assumptions)
    if model.initial_investment <= 0:
        raise InvalidInputError(
            "down_payment_percent",
            params.down_payment_percent,
            "initial investment must be > 0 (no cash down and no acquisition costs)",
        )

    net_profit = model.net_profit(holding_period, ProfitAccounting.EXIT_LUMP_SUM)
    roi = net_profit / model.initial_investment * 100
    annualized_roi, clamped = annualize_roi(roi, holding_period, policy)

    return ScenarioResult(
        roi=roi,
        net_profit=net_profit,
        annualized_roi=annualized_roi,
        initial_investment=model.initial_investment,
        total_financing_cost=model.financing_cost(holding_period),
        total_interest=model.total_interest(),
        annualization_clamped=clamped,
    )

"""Shared cost model for the return evaluator and the break-even simulator.

Both engines price the same quantities (mortgage payment, rent, ownership
costs, exit costs). They differ only in how financing is credited when
profit is measured, which is captured by `ProfitAccounting`:

- EXIT_LUMP_SUM: profit at sale, charging payments made while held plus the
  full-term interest of the loan. No credit for principal repaid.
- YEARLY_EQUITY_CREDIT: cumulative profit at the end of a given year, net of
  the cash invested up front and credited with the principal repaid so far.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from investsim.core.assumptions import DEFAULT_COST_ASSUMPTIONS, CostAssumptions
from investsim.core.financial import (
    calculate_monthly_payment,
    calculate_remaining_balance,
    compound_value,
)
from investsim.domain.models.parameters import InvestmentParameters, UsageType


class ProfitAccounting(str, Enum):
    """Profit convention used when pricing financing."""

    EXIT_LUMP_SUM = "exit_lump_sum"
    YEARLY_EQUITY_CREDIT = "yearly_equity_credit"


@dataclass(frozen=True)
class CostModel:
    """Per-property cost primitives derived once from the parameters."""

    params: InvestmentParameters
    loan_amount: float
    acquisition_costs: float
    annual_ongoing_costs: float
    monthly_payment: float
    annual_payment: float
    total_payments: int
    rental_income_per_year: float
    initial_investment: float
    exit_cost_pct: float

    @classmethod
    def from_params(
        cls,
        params: InvestmentParameters,
        assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
    ) -> CostModel:
        """Price the purchase, financing and income of one property.

        Parameters are expected to have been validated by the caller.
        """
        price = params.purchase_price
        loan_amount = price * (1 - params.down_payment_percent / 100) if params.use_mortgage else 0.0

        total_payments = params.loan_term_years * 12
        monthly_payment = (
            calculate_monthly_payment(loan_amount, params.interest_rate, total_payments)
            if params.use_mortgage and loan_amount > 0
            else 0.0
        )

        acquisition_costs = price * (assumptions.acquisition_cost_pct / 100)
        if params.use_mortgage:
            initial_investment = price * params.down_payment_percent / 100 + acquisition_costs
        else:
            initial_investment = price + acquisition_costs

        return cls(
            params=params,
            loan_amount=loan_amount,
            acquisition_costs=acquisition_costs,
            annual_ongoing_costs=price * (assumptions.ongoing_cost_pct / 100),
            monthly_payment=monthly_payment,
            annual_payment=monthly_payment * 12,
            total_payments=total_payments,
            rental_income_per_year=rental_income(params, assumptions),
            initial_investment=initial_investment,
            exit_cost_pct=assumptions.exit_cost_pct,
        )

    def property_value(self, years: float) -> float:
        return compound_value(self.params.purchase_price, self.params.appreciation_rate, years)

    def exit_costs(self, property_value: float) -> float:
        return property_value * (self.exit_cost_pct / 100)

    def financing_cost(self, years: int) -> float:
        """Mortgage payments made over the first `years` years."""
        if not self.params.use_mortgage:
            return 0.0
        return self.annual_payment * min(years, self.params.loan_term_years)

    def total_interest(self) -> float:
        """Interest over the entire loan term, regardless of holding period."""
        if not self.params.use_mortgage:
            return 0.0
        return self.monthly_payment * self.total_payments - self.loan_amount

    def remaining_balance(self, years: int) -> float:
        """Loan balance outstanding at the end of `years` years."""
        if not self.params.use_mortgage or years >= self.params.loan_term_years:
            return 0.0
        remaining_months = (self.params.loan_term_years - years) * 12
        return calculate_remaining_balance(self.monthly_payment, self.params.interest_rate, remaining_months)

    def net_profit(self, years: int, accounting: ProfitAccounting) -> float:
        """Net profit if the property is sold at the end of `years` years."""
        value = self.property_value(years)
        capital_appreciation = value - self.params.purchase_price
        rental = self.rental_income_per_year * years
        ongoing = self.annual_ongoing_costs * years
        financing = self.financing_cost(years)
        exit_costs = self.exit_costs(value)

        if accounting is ProfitAccounting.EXIT_LUMP_SUM:
            return (
                capital_appreciation
                + rental
                - ongoing
                - financing
                - exit_costs
                - self.total_interest()
            )

        equity_credit = self.loan_amount - self.remaining_balance(years) if self.params.use_mortgage else 0.0
        return (
            capital_appreciation
            + rental
            - ongoing
            - financing
            - exit_costs
            - self.initial_investment
            + equity_credit
        )


def rental_income(
    params: InvestmentParameters,
    assumptions: CostAssumptions = DEFAULT_COST_ASSUMPTIONS,
) -> float:
    """Annual rental income for the configured usage type."""
    if params.usage_type == UsageType.LONG_TERM:
        return params.annual_rent
    if params.usage_type == UsageType.SHORT_TERM:
        return params.daily_rate * 365 * (params.occupancy_rate / 100) * assumptions.short_term_net_factor
    return 0.0

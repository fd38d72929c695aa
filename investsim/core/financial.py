"""Financial calculation functions.

Fixed-rate annuity primitives shared by the return evaluator and the
break-even simulator.
"""

from __future__ import annotations

import numpy_financial as npf


def monthly_rate(annual_rate_pct: float) -> float:
    """Nominal annual percentage to monthly rate (compounded monthly)."""
    return annual_rate_pct / 100.0 / 12.0


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Calculate monthly loan payment (principal + interest).

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate as percentage (e.g., 4.0 for 4%)
        duration_months: Loan term in months

    Returns:
        Monthly payment amount. Zero when there is nothing to repay.
    """
    if principal <= 0 or duration_months <= 0:
        return 0.0

    rate = monthly_rate(annual_rate_pct)

    if rate <= 0:
        return principal / duration_months

    return float(-npf.pmt(rate, duration_months, principal))


def calculate_remaining_balance(
    payment: float,
    annual_rate_pct: float,
    remaining_months: int,
) -> float:
    """Outstanding balance of a level-payment loan with N payments left.

    Present value of the remaining payments:
        payment * (1 - (1 + r)^-N) / r

    Args:
        payment: Monthly payment amount
        annual_rate_pct: Annual interest rate %
        remaining_months: Number of payments still due

    Returns:
        Remaining balance
    """
    if remaining_months <= 0 or payment <= 0:
        return 0.0

    rate = monthly_rate(annual_rate_pct)

    if rate <= 0:
        return payment * remaining_months

    return float(npf.pv(rate, remaining_months, -payment))


def calculate_total_interest(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Interest paid over the full loan term (all payments minus principal)."""
    if principal <= 0 or duration_months <= 0:
        return 0.0
    payment = calculate_monthly_payment(principal, annual_rate_pct, duration_months)
    return payment * duration_months - principal


def compound_value(
    base_value: float,
    annual_growth_pct: float,
    years: float,
) -> float:
    """Value after compounding annual growth for a number of years."""
    return base_value * (1.0 + annual_growth_pct / 100.0) ** years

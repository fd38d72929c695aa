"""Pytest fixtures for investsim tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from investsim.domain.models import InvestmentParameters, UsageType  # noqa: E402


@pytest.fixture
def financed_long_term() -> InvestmentParameters:
    """1M property, 20% down at 4% over 25 years, 6% gross yield, held 5 years."""
    return InvestmentParameters(
        purchase_price=1_000_000,
        appreciation_rate=5,
        annual_rent=60_000,
        holding_period=5,
        use_mortgage=True,
        down_payment_percent=20,
        interest_rate=4,
        loan_term_years=25,
        property_size=1200,
        usage_type=UsageType.LONG_TERM,
    )


@pytest.fixture
def cash_long_term() -> InvestmentParameters:
    """Cash purchase, 7% gross yield, 4% appreciation, held 10 years."""
    return InvestmentParameters(
        purchase_price=800_000,
        appreciation_rate=4,
        annual_rent=56_000,
        holding_period=10,
        use_mortgage=False,
        usage_type=UsageType.LONG_TERM,
    )


@pytest.fixture
def short_term_rental() -> InvestmentParameters:
    """Holiday let: 900/night at 70% occupancy, 30% down at 5%."""
    return InvestmentParameters(
        purchase_price=1_500_000,
        appreciation_rate=6,
        holding_period=7,
        use_mortgage=True,
        down_payment_percent=30,
        interest_rate=5,
        loan_term_years=20,
        usage_type=UsageType.SHORT_TERM,
        daily_rate=900,
        occupancy_rate=70,
    )


@pytest.fixture
def personal_use() -> InvestmentParameters:
    """Owner-occupied, cash purchase, held 8 years."""
    return InvestmentParameters(
        purchase_price=2_000_000,
        appreciation_rate=6,
        holding_period=8,
        use_mortgage=False,
        usage_type=UsageType.PERSONAL,
        annual_rent=100_000,
    )

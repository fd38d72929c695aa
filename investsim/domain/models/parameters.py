"""Investment parameter model.

One property, one set of financing and income assumptions. Instances are
immutable; sweeps and scenarios derive new instances with `with_updates`.
"""

from __future__ import annotations

from enum import Enum
from math import isfinite
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from investsim.core.exceptions import InvalidInputError


class UsageType(str, Enum):
    """How the owner uses the property."""

    PERSONAL = "personal"
    LONG_TERM = "long-term"
    SHORT_TERM = "short-term"


_NUMERIC_FIELDS = (
    "purchase_price",
    "appreciation_rate",
    "annual_rent",
    "down_payment_percent",
    "interest_rate",
    "property_size",
    "daily_rate",
    "occupancy_rate",
)


class InvestmentParameters(BaseModel):
    """Input assumptions for a single-property evaluation.

    Field bounds are enforced by `validate_parameters`, not by pydantic, so
    the engine checks them on every call regardless of how the instance was
    built.
    """

    # Purchase & growth
    purchase_price: float = Field(..., description="Purchase price in currency units")
    appreciation_rate: float = Field(default=0.0, description="Annual appreciation %")
    holding_period: Optional[int] = Field(default=None, description="Holding period in years (evaluator only)")

    # Financing
    use_mortgage: bool = Field(default=False, description="Finance with a fixed-rate mortgage")
    down_payment_percent: float = Field(default=20.0, description="Down payment % of price")
    interest_rate: float = Field(default=0.0, description="Nominal annual interest %")
    loan_term_years: int = Field(default=25, description="Loan term in years")

    # Usage & income
    usage_type: UsageType = Field(default=UsageType.LONG_TERM, description="personal, long-term or short-term")
    annual_rent: float = Field(default=0.0, description="Annual rent (long-term)")
    daily_rate: float = Field(default=0.0, description="Nightly rate (short-term)")
    occupancy_rate: float = Field(default=0.0, description="Occupancy % (short-term)")

    # Reserved for per-area metrics; not used in arithmetic
    property_size: float = Field(default=0.0, description="Property size (sqft)")

    model_config = {
        "frozen": True,
    }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InvestmentParameters:
        """Build from an untrusted mapping, reporting failures as InvalidInputError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            name = ".".join(str(p) for p in first.get("loc", ())) or "parameters"
            raise InvalidInputError(name, first.get("input"), first.get("msg", "")) from e

    def with_updates(self, **changes: Any) -> InvestmentParameters:
        """Return a copy with the given fields substituted."""
        return self.model_copy(update=changes)

    @property
    def baseline_yield(self) -> float:
        """Gross rental yield implied by the configured rent (% of price)."""
        return self.annual_rent / self.purchase_price * 100.0


def validate_parameters(params: InvestmentParameters, require_holding_period: bool = True) -> None:
    """Fail fast on inputs the engine cannot evaluate.

    Args:
        params: Parameters to check
        require_holding_period: True for the evaluator, False for the simulator

    Raises:
        InvalidInputError: On the first violated rule
    """
    for name in _NUMERIC_FIELDS:
        value = getattr(params, name)
        if not isfinite(value):
            raise InvalidInputError(name, value, "must be a finite number")

    if params.purchase_price <= 0:
        raise InvalidInputError("purchase_price", params.purchase_price, "must be > 0")

    if require_holding_period:
        if params.holding_period is None:
            raise InvalidInputError("holding_period", None, "required for return evaluation")
        if params.holding_period <= 0:
            raise InvalidInputError("holding_period", params.holding_period, "must be > 0")

    if params.use_mortgage and params.loan_term_years <= 0:
        raise InvalidInputError("loan_term_years", params.loan_term_years, "must be > 0 when financed")

    if not 0 <= params.down_payment_percent <= 100:
        raise InvalidInputError("down_payment_percent", params.down_payment_percent, "must be within [0, 100]")

    if not 0 <= params.occupancy_rate <= 100:
        raise InvalidInputError("occupancy_rate", params.occupancy_rate, "must be within [0, 100]")

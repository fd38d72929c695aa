"""Unit tests for parameter and result models."""

import math

import pandas as pd
import pytest

from investsim.core.exceptions import InvalidInputError
from investsim.domain.models import (
    NEVER,
    BreakEvenResult,
    InvestmentParameters,
    SensitivityMatrix,
    UsageType,
    validate_parameters,
)


class TestInvestmentParameters:
    """Tests for InvestmentParameters."""

    def test_usage_type_from_string(self):
        """Usage type accepts its wire value."""
        p = InvestmentParameters(purchase_price=100_000, usage_type="short-term")
        assert p.usage_type is UsageType.SHORT_TERM

    def test_frozen(self, financed_long_term):
        """Parameters cannot be mutated in place."""
        with pytest.raises(Exception):
            financed_long_term.appreciation_rate = 10

    def test_with_updates_returns_new_instance(self, financed_long_term):
        """with_updates clones and leaves the original untouched."""
        updated = financed_long_term.with_updates(appreciation_rate=10)
        assert updated.appreciation_rate == 10
        assert financed_long_term.appreciation_rate == 5
        assert updated.annual_rent == financed_long_term.annual_rent

    def test_baseline_yield(self, financed_long_term):
        """60k rent on 1M is a 6% gross yield."""
        assert financed_long_term.baseline_yield == pytest.approx(6.0)

    def test_from_dict_valid(self):
        """from_dict builds a model from a plain mapping."""
        p = InvestmentParameters.from_dict({"purchase_price": 250_000, "holding_period": 3})
        assert p.purchase_price == 250_000
        assert p.holding_period == 3

    def test_from_dict_wraps_validation_error(self):
        """Type errors surface as InvalidInputError naming the field."""
        with pytest.raises(InvalidInputError) as exc:
            InvestmentParameters.from_dict({"purchase_price": "lots"})
        assert exc.value.param_name == "purchase_price"

    def test_from_dict_unknown_usage(self):
        """Unknown usage types are rejected."""
        with pytest.raises(InvalidInputError) as exc:
            InvestmentParameters.from_dict({"purchase_price": 1, "usage_type": "hotel"})
        assert exc.value.param_name == "usage_type"


class TestValidateParameters:
    """Tests for validate_parameters."""

    @pytest.mark.parametrize("price", [0, -1])
    def test_non_positive_price(self, price):
        """Purchase price must be positive."""
        p = InvestmentParameters(purchase_price=price, holding_period=5)
        with pytest.raises(InvalidInputError) as exc:
            validate_parameters(p)
        assert exc.value.param_name == "purchase_price"

    def test_missing_holding_period(self):
        """Evaluator needs a holding period."""
        p = InvestmentParameters(purchase_price=100_000)
        with pytest.raises(InvalidInputError) as exc:
            validate_parameters(p)
        assert exc.value.param_name == "holding_period"

    def test_holding_period_optional_for_simulator(self):
        """Simulator validation ignores the holding period."""
        validate_parameters(InvestmentParameters(purchase_price=100_000), require_holding_period=False)

    def test_zero_holding_period(self):
        """Holding period must be positive."""
        p = InvestmentParameters(purchase_price=100_000, holding_period=0)
        with pytest.raises(InvalidInputError):
            validate_parameters(p)

    def test_loan_term_checked_only_when_financed(self):
        """A zero loan term is fine for a cash purchase."""
        validate_parameters(InvestmentParameters(purchase_price=100_000, holding_period=5, loan_term_years=0))
        with pytest.raises(InvalidInputError) as exc:
            validate_parameters(InvestmentParameters(
                purchase_price=100_000, holding_period=5, use_mortgage=True, loan_term_years=0,
            ))
        assert exc.value.param_name == "loan_term_years"

    @pytest.mark.parametrize("field,value", [
        ("down_payment_percent", -1),
        ("down_payment_percent", 100.5),
        ("occupancy_rate", -5),
        ("occupancy_rate", 101),
    ])
    def test_percentages_out_of_range(self, field, value):
        """Percent inputs must lie within [0, 100]."""
        p = InvestmentParameters(purchase_price=100_000, holding_period=5, **{field: value})
        with pytest.raises(InvalidInputError) as exc:
            validate_parameters(p)
        assert exc.value.param_name == field

    def test_non_finite(self):
        """NaN and infinity are rejected."""
        p = InvestmentParameters(purchase_price=100_000, holding_period=5, appreciation_rate=math.nan)
        with pytest.raises(InvalidInputError):
            validate_parameters(p)

    def test_error_message(self):
        """Message names the parameter, value and reason."""
        err = InvalidInputError("purchase_price", 0, "must be > 0")
        assert str(err) == "Invalid parameter 'purchase_price': 0 - must be > 0"


class TestBreakEvenResult:
    """Tests for BreakEvenResult."""

    def test_never_flag(self):
        """Sentinel year beyond the horizon reads as never."""
        r = BreakEvenResult(break_even_year=31, is_profitable=False, max_years=30)
        assert r.never
        assert r.matrix_cell() == NEVER

    def test_matrix_cell_year(self):
        """Reached break-even reports the year."""
        r = BreakEvenResult(break_even_year=7, is_profitable=True, max_years=30)
        assert not r.never
        assert r.matrix_cell() == 7


class TestSensitivityMatrix:
    """Tests for SensitivityMatrix."""

    @pytest.fixture
    def matrix(self):
        return SensitivityMatrix(
            appreciation_rates=(0, 2),
            yield_percents=(3, 4),
            values={0: {3: 1.0, 4: 2.0}, 2: {3: 3.0, 4: 4.0}},
        )

    def test_cell(self, matrix):
        """Cells are addressed by (appreciation, yield)."""
        assert matrix.cell(2, 3) == 3.0

    def test_to_dict_labels(self, matrix):
        """Nested mapping keyed by row label then yield key."""
        assert matrix.to_dict() == {
            "0%": {"yield3": 1.0, "yield4": 2.0},
            "2%": {"yield3": 3.0, "yield4": 4.0},
        }

    def test_map(self, matrix):
        """map keeps the nested layout."""
        assert matrix.map(lambda v: v * 10)["2%"]["yield4"] == 40.0

    def test_to_frame(self, matrix):
        """DataFrame export uses labels for index and columns."""
        df = matrix.to_frame()
        assert isinstance(df, pd.DataFrame)
        assert list(df.index) == ["0%", "2%"]
        assert list(df.columns) == ["yield3", "yield4"]
        assert df.loc["2%", "yield3"] == 3.0

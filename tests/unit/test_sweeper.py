"""Unit tests for single-variable sensitivity sweeps."""

import pytest

from investsim.core.assumptions import AnnualizationPolicy
from investsim.core.exceptions import ConfigurationError, DomainUndefinedError, InvalidInputError
from investsim.application.services.sweeper import (
    simulated_rent,
    sweep_appreciation,
    sweep_break_even_by_appreciation,
    sweep_yield,
)
from investsim.domain.calculator import evaluate, simulate_break_even
from investsim.domain.models import InvestmentParameters


class TestSweepAppreciation:
    """Tests for sweep_appreciation."""

    def test_default_axis(self, cash_long_term):
        """Default candidates are 0..15."""
        points = sweep_appreciation(cash_long_term)
        assert [p.axis_value for p in points] == [0, 2, 4, 6, 8, 10, 12, 15]

    def test_rounding(self, cash_long_term):
        """ROI rounded to 1 decimal, annualized ROI to 2."""
        points = sweep_appreciation(cash_long_term, rates=[6])
        direct = evaluate(cash_long_term.with_updates(appreciation_rate=6))
        assert points[0].roi == round(direct.roi, 1)
        assert points[0].annualized_roi == round(direct.annualized_roi, 2)

    def test_exact_baseline_match(self, cash_long_term):
        """Only the configured rate (4%) is flagged."""
        points = sweep_appreciation(cash_long_term)
        assert [p.axis_value for p in points if p.is_baseline] == [4]

    def test_no_baseline_when_rate_off_axis(self, financed_long_term):
        """5% is not on the axis, so nothing is flagged."""
        assert not any(p.is_baseline for p in sweep_appreciation(financed_long_term))

    def test_roi_increases_with_appreciation(self, cash_long_term):
        """Higher appreciation, higher ROI."""
        rois = [p.roi for p in sweep_appreciation(cash_long_term)]
        assert rois == sorted(rois)

    def test_input_not_mutated(self, cash_long_term):
        """Sweeping leaves the caller's parameters untouched."""
        sweep_appreciation(cash_long_term)
        assert cash_long_term.appreciation_rate == 4

    def test_label(self, cash_long_term):
        """Points label themselves as percentages."""
        assert sweep_appreciation(cash_long_term, rates=[12])[0].label == "12%"

    def test_policy_threaded_through(self, financed_long_term):
        """RAISE policy propagates from the sweep."""
        with pytest.raises(DomainUndefinedError):
            sweep_appreciation(financed_long_term, rates=[0], policy=AnnualizationPolicy.RAISE)

    def test_invalid_input_propagates(self, cash_long_term):
        """No partial sweep on invalid input."""
        with pytest.raises(InvalidInputError):
            sweep_appreciation(cash_long_term.with_updates(holding_period=0))


class TestSweepYield:
    """Tests for sweep_yield."""

    def test_simulated_rent(self):
        """Yield % of price."""
        assert simulated_rent(1_000_000, 6) == pytest.approx(60_000)

    def test_default_axis(self, cash_long_term):
        """Default candidates are 3..10."""
        points = sweep_yield(cash_long_term)
        assert [p.axis_value for p in points] == [3, 4, 5, 6, 7, 8, 9, 10]

    def test_baseline_within_epsilon(self, cash_long_term):
        """56k on 800k is 7%, so only 7 is flagged."""
        points = sweep_yield(cash_long_term)
        assert [p.axis_value for p in points if p.is_baseline] == [7]

    def test_baseline_epsilon_is_strict(self, cash_long_term):
        """A yield exactly 0.5 points away is not the baseline."""
        p = cash_long_term.with_updates(annual_rent=100_000)  # exactly 12.5%
        flagged = [pt.axis_value for pt in sweep_yield(p, yield_percents=[12, 12.25, 13]) if pt.is_baseline]
        assert flagged == [12.25]

    def test_custom_epsilon(self, cash_long_term):
        """A wider epsilon flags neighbours too."""
        points = sweep_yield(cash_long_term, epsilon=1.5)
        assert [p.axis_value for p in points if p.is_baseline] == [6, 7, 8]

    def test_matches_evaluator(self, financed_long_term):
        """Each point is the evaluator run with the simulated rent."""
        for point in sweep_yield(financed_long_term):
            rent = simulated_rent(financed_long_term.purchase_price, point.axis_value)
            direct = evaluate(financed_long_term.with_updates(annual_rent=rent))
            assert point.roi == round(direct.roi, 1)

    def test_personal_is_empty(self, personal_use):
        """No yield sweep for personal use."""
        assert sweep_yield(personal_use) == []


class TestSweepBreakEvenByAppreciation:
    """Tests for sweep_break_even_by_appreciation."""

    def test_default_axis(self, financed_long_term):
        """Default candidates are 0..10."""
        points = sweep_break_even_by_appreciation(financed_long_term)
        assert [p.axis_value for p in points] == [0, 2, 4, 6, 8, 10]

    def test_matches_simulator(self, financed_long_term):
        """Each point reflects a direct simulator run."""
        for point in sweep_break_even_by_appreciation(financed_long_term):
            direct = simulate_break_even(financed_long_term.with_updates(appreciation_rate=point.axis_value))
            assert point.is_profitable == direct.is_profitable
            assert point.years == min(direct.break_even_year, 30)

    def test_never_capped_at_horizon(self, personal_use):
        """Zero appreciation with no rent never breaks even; years capped."""
        point = sweep_break_even_by_appreciation(personal_use, rates=[0])[0]
        assert point.is_never
        assert not point.is_profitable
        assert point.years == 30

    def test_custom_horizon(self, personal_use):
        """Cap follows the horizon."""
        point = sweep_break_even_by_appreciation(personal_use, rates=[0], horizon=10)[0]
        assert point.years == 10


class TestSweepValidation:
    """Every sweep validates its input before touching it."""

    def test_zero_price_yield_sweep(self):
        """A zero price is rejected, not divided by."""
        p = InvestmentParameters(purchase_price=0, annual_rent=1000, holding_period=5)
        with pytest.raises(InvalidInputError) as exc_info:
            sweep_yield(p)
        assert exc_info.value.param_name == "purchase_price"

    def test_personal_still_validated(self, personal_use):
        """Personal use returns [] only for valid input."""
        with pytest.raises(InvalidInputError):
            sweep_yield(personal_use.with_updates(purchase_price=0))

    def test_break_even_sweep_invalid_price(self, financed_long_term):
        """Break-even sweep rejects a non-positive price."""
        with pytest.raises(InvalidInputError):
            sweep_break_even_by_appreciation(financed_long_term.with_updates(purchase_price=-1))

    def test_break_even_sweep_needs_no_holding_period(self, financed_long_term):
        """The simulator runs its own horizon."""
        points = sweep_break_even_by_appreciation(financed_long_term.with_updates(holding_period=None))
        assert len(points) == 6

    @pytest.mark.parametrize("sweep", [sweep_appreciation, sweep_yield, sweep_break_even_by_appreciation])
    def test_empty_axis(self, sweep, cash_long_term):
        """An explicitly empty axis is a configuration error."""
        with pytest.raises(ConfigurationError):
            sweep(cash_long_term, [])

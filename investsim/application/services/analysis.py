"""Sensitivity analysis facade.

Runs every view of the sensitivity page for one property: base return,
single-variable sweeps, both matrices and the scenario comparison. This is
the only layer that reads EngineSettings; the engine below it receives
everything as explicit arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from investsim.application.services.matrix import build_break_even_matrix, build_roi_matrix
from investsim.application.services.scenarios import (
    break_even_risk_spread,
    cumulative_profit_table,
    generate_scenarios,
)
from investsim.application.services.sweeper import (
    sweep_appreciation,
    sweep_break_even_by_appreciation,
    sweep_yield,
)
from investsim.core.assumptions import DEFAULT_SWEEP_AXES, SweepAxes
from investsim.core.exceptions import InvestSimError
from investsim.core.logging import configure_logging, get_logger
from investsim.core.settings import EngineSettings, get_settings
from investsim.domain.calculator import evaluate
from investsim.domain.models import (
    BreakEvenPoint,
    InvestmentParameters,
    ScenarioResult,
    ScenarioSet,
    SensitivityMatrix,
    SensitivityPoint,
)
from investsim.domain.models.results import BreakEvenCell


@dataclass(frozen=True)
class SensitivityReport:
    """Everything the sensitivity view displays for one property."""

    base: ScenarioResult
    appreciation_sweep: list[SensitivityPoint]
    yield_sweep: list[SensitivityPoint]
    break_even_by_appreciation: list[BreakEvenPoint]
    roi_matrix: SensitivityMatrix[float]
    break_even_matrix: SensitivityMatrix[BreakEvenCell]
    scenarios: ScenarioSet
    cumulative_profit: pd.DataFrame
    risk_spread: Optional[int]


class SensitivityAnalyzer:
    """Builds SensitivityReports using configured assumptions and axes."""

    def __init__(
        self,
        settings: EngineSettings | None = None,
        axes: SweepAxes | None = None,
    ):
        self.settings = settings or get_settings()
        self.axes = axes or DEFAULT_SWEEP_AXES
        self.assumptions = self.settings.cost_assumptions()
        self.policy = self.settings.annualization_policy
        self.horizon = self.settings.default_horizon_years

        configure_logging(self.settings.log_level, self.settings.json_logs)
        self.log = get_logger(__name__)

    def analyze(self, params: InvestmentParameters) -> SensitivityReport:
        """Run the full analysis.

        Raises:
            InvalidInputError: Parameters fail validation
            DomainUndefinedError: Annualized ROI undefined under the RAISE policy
        """
        self.log.info(
            "sensitivity_analysis_started",
            purchase_price=params.purchase_price,
            usage_type=params.usage_type.value,
            use_mortgage=params.use_mortgage,
            horizon=self.horizon,
        )

        try:
            base = evaluate(params, self.assumptions, self.policy)
            scenarios = generate_scenarios(
                params,
                include_break_even=True,
                horizon=self.horizon,
                assumptions=self.assumptions,
                policy=self.policy,
            )
            report = SensitivityReport(
                base=base,
                appreciation_sweep=sweep_appreciation(
                    params, self.axes.appreciation_rates, self.assumptions, self.policy
                ),
                yield_sweep=sweep_yield(
                    params,
                    self.axes.yield_percents,
                    self.assumptions,
                    self.policy,
                    self.axes.yield_baseline_epsilon,
                ),
                break_even_by_appreciation=sweep_break_even_by_appreciation(
                    params, self.axes.break_even_appreciation_rates, self.horizon, self.assumptions
                ),
                roi_matrix=build_roi_matrix(
                    params,
                    self.axes.matrix_appreciation_rates,
                    self.axes.matrix_yield_percents,
                    self.assumptions,
                    self.policy,
                    n_workers=self.settings.matrix_workers,
                ),
                break_even_matrix=build_break_even_matrix(
                    params,
                    self.axes.matrix_appreciation_rates,
                    self.axes.matrix_yield_percents,
                    self.horizon,
                    self.assumptions,
                    n_workers=self.settings.matrix_workers,
                ),
                scenarios=scenarios,
                cumulative_profit=cumulative_profit_table(scenarios, params.holding_period),
                risk_spread=break_even_risk_spread(scenarios),
            )
        except InvestSimError as e:
            self.log.warning("sensitivity_analysis_failed", error=str(e), error_type=type(e).__name__)
            raise

        self.log.info(
            "sensitivity_analysis_completed",
            roi=base.roi,
            annualized_roi=base.annualized_roi,
            clamped=base.annualization_clamped,
            break_even_year=scenarios.base.break_even.break_even_year,
        )
        return report

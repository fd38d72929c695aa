"""Application services."""

from .analysis import SensitivityAnalyzer, SensitivityReport
from .matrix import build_break_even_matrix, build_roi_matrix
from .scenarios import break_even_risk_spread, cumulative_profit_table, generate_scenarios
from .sweeper import sweep_appreciation, sweep_break_even_by_appreciation, sweep_yield

__all__ = [
    "SensitivityAnalyzer",
    "SensitivityReport",
    "build_break_even_matrix",
    "build_roi_matrix",
    "break_even_risk_spread",
    "cumulative_profit_table",
    "generate_scenarios",
    "sweep_appreciation",
    "sweep_break_even_by_appreciation",
    "sweep_yield",
]

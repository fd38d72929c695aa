"""Pure return and break-even engine."""

from .banding import Band, break_even_band, roi_band
from .break_even import simulate_break_even
from .cost_model import CostModel, ProfitAccounting, rental_income
from .evaluator import annualize_roi, evaluate

__all__ = [
    "Band",
    "break_even_band",
    "roi_band",
    "simulate_break_even",
    "CostModel",
    "ProfitAccounting",
    "rental_income",
    "annualize_roi",
    "evaluate",
]

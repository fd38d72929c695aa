"""Custom exceptions for investsim.

Domain-specific exception types. Every engine failure is one of these,
raised synchronously before any result object is built.
"""

from __future__ import annotations

from typing import Any


class InvestSimError(Exception):
    """Base exception for all investsim errors."""
    pass


# --- Input Errors ---

class InvalidInputError(InvestSimError):
    """Invalid investment parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Calculation Errors ---

class DomainUndefinedError(InvestSimError):
    """Annualized ROI is undefined (total ROI at or below -100%)."""

    def __init__(self, roi: float, holding_period: int):
        self.roi = roi
        self.holding_period = holding_period
        super().__init__(
            f"Annualized ROI undefined for roi={roi:.4f}% over {holding_period} years "
            "(base of fractional power is not positive)"
        )


# --- Configuration Errors ---

class ConfigurationError(InvestSimError):
    """Error in engine configuration (axes, cost assumptions)."""
    pass

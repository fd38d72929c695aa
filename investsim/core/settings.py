"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from .assumptions import DEFAULT_HORIZON_YEARS, AnnualizationPolicy, CostAssumptions


class EngineSettings(BaseSettings):
    """Engine configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Simulation defaults
    default_horizon_years: int = Field(default=DEFAULT_HORIZON_YEARS, ge=1, le=100)
    annualization_policy: AnnualizationPolicy = Field(
        default=AnnualizationPolicy.CLAMP,
        description="Handling of annualized ROI when total ROI <= -100%",
    )

    # Cost assumptions (%)
    acquisition_cost_pct: float = Field(default=7.0, ge=0)
    ongoing_cost_pct: float = Field(default=2.0, ge=0)
    exit_cost_pct: float = Field(default=2.5, ge=0)
    short_term_net_factor: float = Field(default=0.85, ge=0, le=1)

    # Performance
    matrix_workers: int = Field(default=1, ge=1, le=32, description="Threads used per matrix build")

    model_config = {
        "env_prefix": "INVESTSIM_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def cost_assumptions(self) -> CostAssumptions:
        """Build the cost model constants from the configured percentages."""
        return CostAssumptions(
            acquisition_cost_pct=self.acquisition_cost_pct,
            ongoing_cost_pct=self.ongoing_cost_pct,
            exit_cost_pct=self.exit_cost_pct,
            short_term_net_factor=self.short_term_net_factor,
        )


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached engine settings."""
    return EngineSettings()

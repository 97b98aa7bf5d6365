"""Policy constants used by the growth engine."""

from __future__ import annotations

from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GrowthPolicy(BaseSettings):
    """
    Tunable assumptions behind every projection.

    Rates are annual percentages (10 means 10%/yr); withdrawal_rate is a
    fraction (0.04 is the 4% rule). Any field can be overridden through a
    PLANNER_* environment variable, e.g. PLANNER_INFLATION_RATE=2.5 or
    PLANNER_MILESTONES='[500000, 1000000]' (JSON for the tuple).
    """

    default_rate: float = 10.0  # S&P 500 historical average
    savings_rate: float = 1.5
    bonds_rate: float = 4.5
    inflation_rate: float = Field(3.0, ge=0, le=30)
    best_year_rate: float = 37.0
    worst_year_rate: float = -37.0

    withdrawal_rate: float = Field(0.04, gt=0, le=1)
    milestones: Tuple[float, ...] = (1_000_000.0, 2_000_000.0, 5_000_000.0)

    search_horizon_months: int = Field(1200, ge=1)
    required_rate_step: float = Field(0.1, gt=0)
    required_rate_max: float = Field(50.0, ge=0)

    extra_contribution: float = Field(500.0, ge=0)
    early_start_years: int = Field(5, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def horizon_years(self) -> float:
        return self.search_horizon_months / 12

    @property
    def withdrawal_sustainability(self) -> int:
        """Years a balance lasts when withdrawing withdrawal_rate of it per year."""
        return round(1 / self.withdrawal_rate)


def load_policy() -> GrowthPolicy:
    """
    Read the policy from the environment now.

    Malformed PLANNER_* values raise pydantic.ValidationError; variables that
    do not name a policy field are ignored.
    """
    return GrowthPolicy()


# Built once at import, so it carries whatever PLANNER_* overrides were set then.
DEFAULT_POLICY = load_policy()

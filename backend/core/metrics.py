from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from core.config import DEFAULT_POLICY, GrowthPolicy
from core.growth import future_value, whole_units
from core.milestones import milestone_reached, years_to_milestone
from core.projection import ProjectionPoint

logger = logging.getLogger(__name__)


class MilestoneEta(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: float
    years: float  # equals the search horizon when not reached
    reached: bool


class Metrics(BaseModel):
    """Summary of a projection, read off its final month."""

    model_config = ConfigDict(frozen=True)

    final_balance: float
    total_contributions: float
    total_gains: float
    roi: float  # percent gained over everything paid in
    inflation_adjusted_value: float
    monthly_income: float
    milestones: List[MilestoneEta]
    vs_savings: float
    vs_bonds: float
    required_rate: float
    withdrawal_sustainability: int


def _one_decimal(value: float) -> float:
    return whole_units(value * 10) / 10


def _roi(gains: float, contributions: float) -> float:
    if contributions <= 0:
        return 0.0
    return _one_decimal(gains / contributions * 100)


def target_balance_for_income(
    target_monthly_income: float,
    policy: GrowthPolicy = DEFAULT_POLICY,
) -> float:
    """Balance whose withdrawal_rate share pays target_monthly_income every month."""
    return target_monthly_income * 12 / policy.withdrawal_rate


def required_rate(
    principal: float,
    periodic_contribution: float,
    periods: int,
    target_balance: float,
    policy: GrowthPolicy = DEFAULT_POLICY,
) -> float:
    """
    First candidate annual rate whose future value meets target_balance.

    Walks 0..required_rate_max in required_rate_step increments and returns
    the first hit, so the answer can overshoot the exact rate by up to one
    step. Returns 0 when no candidate in range is enough.
    """
    steps = int(round(policy.required_rate_max / policy.required_rate_step))
    for index in range(steps + 1):
        rate = index * policy.required_rate_step
        if future_value(principal, periodic_contribution, rate, periods) >= target_balance:
            return rate

    logger.debug(
        "no rate up to %.1f%% reaches %.0f in %d months",
        policy.required_rate_max,
        target_balance,
        periods,
    )
    return 0.0


def compute_metrics(
    series: Sequence[ProjectionPoint],
    principal: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    target_monthly_income: Optional[float] = None,
    policy: GrowthPolicy = DEFAULT_POLICY,
) -> Metrics:
    """
    Aggregate a projection into headline numbers.

    Only the final point of the series is read; milestone years come from
    fresh searches on the same plan. required_rate is only searched when a
    positive target_monthly_income is given (goal mode), otherwise it is 0.
    """
    if not series:
        raise ValueError("cannot summarise an empty projection")
    final = series[-1]

    monthly_income = final.balance * policy.withdrawal_rate / 12

    milestones = []
    for target in policy.milestones:
        years = years_to_milestone(
            principal,
            periodic_contribution,
            annual_rate_percent,
            target,
            policy.search_horizon_months,
        )
        milestones.append(
            MilestoneEta(
                target=target,
                years=_one_decimal(years),
                reached=milestone_reached(
                    principal,
                    periodic_contribution,
                    annual_rate_percent,
                    target,
                    policy.search_horizon_months,
                ),
            )
        )

    rate_needed = 0.0
    if target_monthly_income:
        rate_needed = required_rate(
            principal,
            periodic_contribution,
            len(series),
            target_balance_for_income(target_monthly_income, policy),
            policy,
        )

    return Metrics(
        final_balance=whole_units(final.balance),
        total_contributions=whole_units(final.contributions),
        total_gains=whole_units(final.gains),
        roi=_roi(final.gains, final.contributions),
        inflation_adjusted_value=whole_units(final.inflation_adjusted),
        monthly_income=whole_units(monthly_income),
        milestones=milestones,
        vs_savings=whole_units(final.balance - final.savings_account),
        vs_bonds=whole_units(final.balance - final.bonds),
        required_rate=_one_decimal(rate_needed),
        withdrawal_sustainability=policy.withdrawal_sustainability,
    )

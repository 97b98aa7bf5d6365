"""What-if comparisons shown next to a projection."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from core.config import DEFAULT_POLICY, GrowthPolicy
from core.growth import future_value, whole_units
from core.metrics import Metrics
from core.projection import ProjectionPoint


class Insights(BaseModel):
    model_config = ConfigDict(frozen=True)

    early_start_advantage: float
    early_start_ratio: float
    extra_contribution_advantage: float
    best_case_gain: float
    worst_case_loss: float
    inflation_loss: float
    inflation_loss_ratio: float
    reaches_first_milestone_in_horizon: bool
    first_to_second_milestone_years: Optional[float] = None  # None unless both are reached


def _share(part: float, whole: float) -> float:
    if whole == 0:
        return 0.0
    return part / whole


def what_if(
    metrics: Metrics,
    final_point: ProjectionPoint,
    principal: float,
    monthly_contribution: float,
    years: int,
    policy: GrowthPolicy = DEFAULT_POLICY,
) -> Insights:
    """
    Deltas against the plan's final balance.

    The early-start and extra-contribution comparisons always use the
    policy's default market rate, whatever rate the plan itself used.
    """
    final_balance = metrics.final_balance

    started_earlier = future_value(
        principal,
        monthly_contribution,
        policy.default_rate,
        (years + policy.early_start_years) * 12,
    )
    contributed_more = future_value(
        principal,
        monthly_contribution + policy.extra_contribution,
        policy.default_rate,
        years * 12,
    )

    early_start_advantage = started_earlier - final_balance
    inflation_loss = final_balance - metrics.inflation_adjusted_value

    first = metrics.milestones[0] if metrics.milestones else None
    in_horizon = bool(first and first.reached and first.years <= years)

    gap = None
    if len(metrics.milestones) >= 2:
        second = metrics.milestones[1]
        if first.reached and second.reached:
            gap = round(second.years - first.years, 1)

    return Insights(
        early_start_advantage=whole_units(early_start_advantage),
        early_start_ratio=_share(early_start_advantage, final_balance),
        extra_contribution_advantage=whole_units(contributed_more - final_balance),
        best_case_gain=whole_units(final_point.best_case - final_balance),
        worst_case_loss=whole_units(final_balance - final_point.worst_case),
        inflation_loss=whole_units(inflation_loss),
        inflation_loss_ratio=_share(inflation_loss, final_balance),
        reaches_first_milestone_in_horizon=in_horizon,
        first_to_second_milestone_years=gap,
    )

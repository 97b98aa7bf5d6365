"""
Investment and goal modes.

Both modes recompute the whole projection from scratch on every call:
  - investment: principal + contribution -> projection -> metrics
  - goal: target monthly income -> target balance -> required principal
          -> projection -> metrics (with the required-rate search)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from core.config import DEFAULT_POLICY, GrowthPolicy
from core.growth import required_principal
from core.insights import Insights, what_if
from core.metrics import Metrics, compute_metrics, target_balance_for_income
from core.projection import ProjectionPoint, project

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    INVESTMENT = "investment"
    GOAL = "goal"


class CalculatorResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Mode
    principal: float
    monthly_contribution: float
    rate: float
    years: int
    target_balance: Optional[float] = None
    projections: List[ProjectionPoint]
    metrics: Metrics
    insights: Insights


def _run(
    mode: Mode,
    principal: float,
    monthly_contribution: float,
    years: int,
    rate: float,
    policy: GrowthPolicy,
    target_monthly_income: Optional[float] = None,
    target_balance: Optional[float] = None,
) -> CalculatorResult:
    if years < 1:
        raise ValueError(f"years must be at least 1, got {years}")

    rows = project(principal, monthly_contribution, rate, years, policy)
    metrics = compute_metrics(
        rows,
        principal,
        monthly_contribution,
        rate,
        target_monthly_income=target_monthly_income,
        policy=policy,
    )
    insights = what_if(metrics, rows[-1], principal, monthly_contribution, years, policy)

    return CalculatorResult(
        mode=mode,
        principal=principal,
        monthly_contribution=monthly_contribution,
        rate=rate,
        years=years,
        target_balance=target_balance,
        projections=rows,
        metrics=metrics,
        insights=insights,
    )


def investment_plan(
    principal: float,
    monthly_contribution: float,
    years: int,
    rate: Optional[float] = None,
    policy: GrowthPolicy = DEFAULT_POLICY,
) -> CalculatorResult:
    """Project a known starting balance. rate=None uses the policy's default rate."""
    rate = policy.default_rate if rate is None else rate
    return _run(Mode.INVESTMENT, principal, monthly_contribution, years, rate, policy)


def goal_plan(
    target_monthly_income: float,
    monthly_contribution: float,
    years: int,
    rate: Optional[float] = None,
    policy: GrowthPolicy = DEFAULT_POLICY,
) -> CalculatorResult:
    """Find the starting balance that funds target_monthly_income, then project it."""
    rate = policy.default_rate if rate is None else rate

    target_balance = target_balance_for_income(target_monthly_income, policy)
    principal = required_principal(target_balance, monthly_contribution, rate, years * 12)
    logger.debug(
        "goal %.2f/month needs %.0f; required principal %.2f at %.2f%%",
        target_monthly_income,
        target_balance,
        principal,
        rate,
    )

    return _run(
        Mode.GOAL,
        principal,
        monthly_contribution,
        years,
        rate,
        policy,
        target_monthly_income=target_monthly_income,
        target_balance=target_balance,
    )


__all__ = [
    "Mode",
    "CalculatorResult",
    "investment_plan",
    "goal_plan",
    "target_balance_for_income",
]

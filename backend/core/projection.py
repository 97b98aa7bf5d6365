from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel, ConfigDict

from core.config import DEFAULT_POLICY, GrowthPolicy
from core.growth import future_value, whole_units

logger = logging.getLogger(__name__)


class ProjectionPoint(BaseModel):
    """
    One month of a projection.

    balance is the primary scenario; savings_account, bonds, best_case and
    worst_case are the same plan compounded at the policy's comparison rates.
    """

    model_config = ConfigDict(frozen=True)

    month: int
    year: int
    balance: float
    contributions: float
    gains: float
    inflation_adjusted: float
    savings_account: float
    bonds: float
    best_case: float
    worst_case: float


def project(
    principal: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    years: int,
    policy: GrowthPolicy = DEFAULT_POLICY,
) -> List[ProjectionPoint]:
    """
    Build a month-by-month table for months 1..years*12.

    Per month:
      1) Primary balance from the closed-form future value (no running sum,
         so rounding never compounds).
      2) Inflation-adjusted balance, deflated by whole and partial years.
      3) Comparison balances at the savings/bonds/best/worst policy rates.
      4) Round every money field to whole units when the row is emitted.
    """
    months = years * 12
    inflation = 1 + policy.inflation_rate / 100

    rows: List[ProjectionPoint] = []
    for month in range(1, months + 1):
        balance = future_value(principal, periodic_contribution, annual_rate_percent, month)
        contributions = principal + periodic_contribution * month
        gains = balance - contributions
        inflation_adjusted = balance / inflation ** (month / 12)

        savings_account = future_value(principal, periodic_contribution, policy.savings_rate, month)
        bonds = future_value(principal, periodic_contribution, policy.bonds_rate, month)
        best_case = future_value(principal, periodic_contribution, policy.best_year_rate, month)
        worst_case = future_value(principal, periodic_contribution, policy.worst_year_rate, month)

        rows.append(
            ProjectionPoint(
                month=month,
                year=month // 12,
                balance=whole_units(balance),
                contributions=whole_units(contributions),
                gains=whole_units(gains),
                inflation_adjusted=whole_units(inflation_adjusted),
                savings_account=whole_units(savings_account),
                bonds=whole_units(bonds),
                best_case=whole_units(best_case),
                worst_case=whole_units(worst_case),
            )
        )

    logger.debug(
        "projected %d months at %.2f%% (principal=%.2f, contribution=%.2f)",
        months,
        annual_rate_percent,
        principal,
        periodic_contribution,
    )
    return rows


__all__ = ["ProjectionPoint", "project"]

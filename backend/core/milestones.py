"""Time-to-milestone search over the future value curve."""

from __future__ import annotations

import logging

from core.config import DEFAULT_POLICY
from core.growth import future_value

logger = logging.getLogger(__name__)


def months_to_milestone(
    principal: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    target_amount: float,
    horizon_months: int = DEFAULT_POLICY.search_horizon_months,
) -> int:
    """
    First month whose balance is at or above target_amount.

    Bisects [0, horizon_months] assuming the balance only grows with time.
    If the target is never met the search settles on horizon_months.
    """
    if principal >= target_amount:
        return 0

    low, high = 0, horizon_months
    while low < high:
        mid = (low + high) // 2
        if future_value(principal, periodic_contribution, annual_rate_percent, mid) < target_amount:
            low = mid + 1
        else:
            high = mid

    if low == horizon_months:
        logger.debug("milestone %.0f not reached within %d months", target_amount, horizon_months)
    return low


def years_to_milestone(
    principal: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    target_amount: float,
    horizon_months: int = DEFAULT_POLICY.search_horizon_months,
) -> float:
    """
    Years (fractional) until the balance first reaches target_amount.

    A result equal to the horizon (100 years by default) means "not reached
    within the horizon". This is a convention of the search: a target met
    exactly at the horizon gives the same value, so use milestone_reached
    when the difference matters.
    """
    months = months_to_milestone(
        principal,
        periodic_contribution,
        annual_rate_percent,
        target_amount,
        horizon_months,
    )
    return months / 12


def is_unreached(years: float, horizon_months: int = DEFAULT_POLICY.search_horizon_months) -> bool:
    return years >= horizon_months / 12


def milestone_reached(
    principal: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    target_amount: float,
    horizon_months: int = DEFAULT_POLICY.search_horizon_months,
) -> bool:
    """Whether the balance meets target_amount at or before the horizon.

    Unlike is_unreached this tells a target met exactly at the horizon apart
    from one never met.
    """
    if principal >= target_amount:
        return True
    return future_value(principal, periodic_contribution, annual_rate_percent, horizon_months) >= target_amount

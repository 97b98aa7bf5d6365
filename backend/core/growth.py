"""
Compound growth with monthly contributions.

    FV = PV * (1 + r)^n + PMT * ((1 + r)^n - 1) / r

where r is the monthly rate (annual percent / 100 / 12), n the number of
months and PMT the contribution added at the end of each month.
"""

from __future__ import annotations

import math


def periodic_rate(annual_rate_percent: float) -> float:
    """Annual percentage (e.g. 10) -> monthly fraction (0.00833...)."""
    return annual_rate_percent / 100 / 12


def _annuity_value(periodic_contribution: float, rate: float, periods: int) -> float:
    # r == 0 makes the annuity factor 0/0; its limit is plain summation
    if rate == 0:
        return periodic_contribution * periods
    return periodic_contribution * (((1 + rate) ** periods - 1) / rate)


def future_value(
    principal: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    periods: int,
) -> float:
    """Balance after `periods` months of compounding plus contributions.

    Negative rates are allowed and shrink the balance.
    """
    rate = periodic_rate(annual_rate_percent)
    return principal * (1 + rate) ** periods + _annuity_value(periodic_contribution, rate, periods)


def required_principal(
    target_value: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    periods: int,
) -> float:
    """
    Starting balance needed so that future_value(...) reaches target_value.

    Solves the future value formula for PV with the contribution held fixed.
    When the contributions alone already meet the target the answer is
    reported as 0 rather than a negative principal.
    """
    rate = periodic_rate(annual_rate_percent)
    shortfall = target_value - _annuity_value(periodic_contribution, rate, periods)
    principal = shortfall / (1 + rate) ** periods
    return max(0.0, principal)


def whole_units(amount: float) -> float:
    """Round to the nearest whole currency unit, halves away from zero."""
    units = math.floor(abs(amount) + 0.5)
    return float(units if amount >= 0 else -units)

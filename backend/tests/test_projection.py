from __future__ import annotations

from math import isclose

from core.config import DEFAULT_POLICY, GrowthPolicy
from core.growth import future_value
from core.projection import project


def test_series_has_one_row_per_month():
    rows = project(10000, 500, 10, 7)

    assert len(rows) == 7 * 12
    assert [row.month for row in rows] == list(range(1, 85))
    assert rows[0].year == 0
    assert rows[11].year == 1
    assert rows[-1].year == 7


def test_thirty_year_scenario_matches_closed_form():
    rows = project(10000, 500, 10, 30)
    final = rows[-1]

    rate = 10 / 100 / 12
    growth = (1 + rate) ** 360
    expected = 10000 * growth + 500 * (growth - 1) / rate

    assert isclose(final.balance, expected, abs_tol=0.5)
    assert 1_328_000 < final.balance < 1_329_000
    assert final.contributions == 10000 + 500 * 360
    # gains are rounded on their own, so allow one unit of drift
    assert isclose(final.gains, final.balance - final.contributions, abs_tol=1)


def test_money_fields_are_whole_units():
    for row in project(1234.56, 78.9, 6.3, 2):
        for value in (
            row.balance,
            row.contributions,
            row.gains,
            row.inflation_adjusted,
            row.savings_account,
            row.bonds,
            row.best_case,
            row.worst_case,
        ):
            assert value == int(value)


def test_project_is_idempotent():
    first = project(5000, 250, 8, 10)
    second = project(5000, 250, 8, 10)

    assert first == second


def test_comparison_scenarios_use_policy_rates():
    policy = GrowthPolicy(savings_rate=2.0, bonds_rate=5.0, best_year_rate=20.0, worst_year_rate=-10.0)
    final = project(1000, 100, 10, 5, policy)[-1]

    assert isclose(final.savings_account, future_value(1000, 100, 2.0, 60), abs_tol=0.5)
    assert isclose(final.bonds, future_value(1000, 100, 5.0, 60), abs_tol=0.5)
    assert isclose(final.best_case, future_value(1000, 100, 20.0, 60), abs_tol=0.5)
    assert isclose(final.worst_case, future_value(1000, 100, -10.0, 60), abs_tol=0.5)
    assert final.worst_case < final.savings_account < final.bonds < final.balance < final.best_case


def test_inflation_adjustment_deflates_by_elapsed_years():
    rows = project(100_000, 0, 0, 2)

    # zero growth: the nominal balance stays put while its real value falls by 3%/yr
    assert rows[11].balance == 100_000
    assert isclose(rows[11].inflation_adjusted, 100_000 / 1.03, abs_tol=0.5)
    assert isclose(rows[23].inflation_adjusted, 100_000 / 1.03 ** 2, abs_tol=0.5)


def test_zero_inflation_keeps_real_equal_to_nominal():
    policy = DEFAULT_POLICY.model_copy(update={"inflation_rate": 0.0})
    for row in project(5000, 200, 7, 3, policy):
        assert row.inflation_adjusted == row.balance


def test_gains_go_negative_under_negative_rate():
    final = project(10000, 100, -20, 3)[-1]
    assert final.gains < 0
    assert final.balance < final.contributions

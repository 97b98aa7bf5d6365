from __future__ import annotations

import pytest
from pydantic import ValidationError

from app import create_app
from core.config import DEFAULT_POLICY, GrowthPolicy, load_policy


def test_defaults_match_historical_assumptions():
    assert DEFAULT_POLICY.default_rate == 10
    assert DEFAULT_POLICY.savings_rate == 1.5
    assert DEFAULT_POLICY.bonds_rate == 4.5
    assert DEFAULT_POLICY.inflation_rate == 3
    assert DEFAULT_POLICY.best_year_rate == 37
    assert DEFAULT_POLICY.worst_year_rate == -37
    assert DEFAULT_POLICY.withdrawal_rate == 0.04
    assert DEFAULT_POLICY.milestones == (1_000_000, 2_000_000, 5_000_000)
    assert DEFAULT_POLICY.search_horizon_months == 1200
    assert DEFAULT_POLICY.horizon_years == 100


def test_no_overrides_returns_defaults(monkeypatch):
    monkeypatch.setenv("PATH", "/usr/bin")
    assert load_policy() == GrowthPolicy()
    assert load_policy().inflation_rate == 3


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PLANNER_INFLATION_RATE", "2.5")
    monkeypatch.setenv("PLANNER_MILESTONES", "[500000, 1000000]")
    monkeypatch.setenv("PLANNER_SEARCH_HORIZON_MONTHS", "600")

    policy = load_policy()

    assert policy.inflation_rate == 2.5
    assert policy.milestones == (500_000, 1_000_000)
    assert policy.search_horizon_months == 600
    assert policy.default_rate == DEFAULT_POLICY.default_rate


def test_lowercase_variable_names_are_read(monkeypatch):
    monkeypatch.setenv("planner_inflation_rate", "2.5")

    assert load_policy().inflation_rate == 2.5


def test_unrelated_planner_variables_are_ignored(monkeypatch):
    monkeypatch.setenv("PLANNER_LOG_LEVEL", "debug")

    assert load_policy() == GrowthPolicy()
    app = create_app()
    assert app.config["GROWTH_POLICY"].default_rate == 10


def test_bad_override_fails_fast(monkeypatch):
    monkeypatch.setenv("PLANNER_WITHDRAWAL_RATE", "zero")

    with pytest.raises(ValidationError):
        load_policy()


def test_policy_is_frozen():
    with pytest.raises(ValidationError):
        GrowthPolicy().inflation_rate = 5

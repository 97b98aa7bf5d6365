"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from core.calculator import goal_plan, investment_plan
from core.config import GrowthPolicy
from core.milestones import milestone_reached, months_to_milestone
from schemas.calculator import (
    GoalRequest,
    InvestmentRequest,
    MilestoneRequest,
    MilestoneResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class BadRequest(ValueError):
    pass


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


def _policy() -> GrowthPolicy:
    return current_app.config["GROWTH_POLICY"]


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequest("request body must be a JSON object")
    return payload


@api_bp.get("/policy")
def policy() -> Any:
    """Active growth assumptions."""
    return jsonify(_policy().model_dump())


@api_bp.post("/calc/investment")
def investment() -> Any:
    """Project a known starting balance month by month."""
    payload = InvestmentRequest.model_validate(_json_body())
    logger.info(
        "investment plan: principal=%.2f contribution=%.2f years=%d",
        payload.principal,
        payload.monthly_contribution,
        payload.years,
    )
    result = investment_plan(
        payload.principal,
        payload.monthly_contribution,
        payload.years,
        rate=payload.rate,
        policy=_policy(),
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/goal")
def goal() -> Any:
    """Derive the starting balance for a target income, then project it."""
    payload = GoalRequest.model_validate(_json_body())
    logger.info(
        "goal plan: income=%.2f contribution=%.2f years=%d",
        payload.target_monthly_income,
        payload.monthly_contribution,
        payload.years,
    )
    result = goal_plan(
        payload.target_monthly_income,
        payload.monthly_contribution,
        payload.years,
        rate=payload.rate,
        policy=_policy(),
    )
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/milestone")
def milestone() -> Any:
    payload = MilestoneRequest.model_validate(_json_body())
    horizon = _policy().search_horizon_months
    months = months_to_milestone(
        payload.principal,
        payload.monthly_contribution,
        payload.rate,
        payload.target_amount,
        horizon,
    )
    response = MilestoneResponse(
        years=months / 12,
        months=months,
        reached=milestone_reached(
            payload.principal,
            payload.monthly_contribution,
            payload.rate,
            payload.target_amount,
            horizon,
        ),
    )
    return jsonify(response.model_dump())

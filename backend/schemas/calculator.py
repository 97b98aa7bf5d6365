"""Data contracts for the calculator endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InvestmentRequest(BaseModel):
    """Inputs for projecting a known starting balance."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, description="Starting balance at month 0.")
    monthly_contribution: float = Field(
        0.0,
        ge=0,
        description="Contribution added at the end of each month.",
    )
    years: int = Field(..., ge=1, le=50, description="Number of years to project.")
    rate: Optional[float] = Field(
        None,
        ge=-100,
        le=100,
        description="Annual return in percent (e.g. 10 for 10%). Defaults to the policy rate.",
    )


class GoalRequest(BaseModel):
    """Inputs for deriving the starting balance behind a retirement income."""

    model_config = ConfigDict(extra="forbid")

    target_monthly_income: float = Field(
        ...,
        ge=0,
        description="Monthly income to draw at the policy withdrawal rate.",
    )
    monthly_contribution: float = Field(0.0, ge=0)
    years: int = Field(..., ge=1, le=50)
    rate: Optional[float] = Field(None, ge=-100, le=100)


class MilestoneRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0)
    monthly_contribution: float = Field(0.0, ge=0)
    rate: float = Field(..., ge=-100, le=100)
    target_amount: float = Field(..., gt=0)


class MilestoneResponse(BaseModel):
    years: float
    months: int
    reached: bool

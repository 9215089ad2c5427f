"""
Schemas for the risk scoring endpoint.
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class BMICategory(str, Enum):
    """Body Mass Index band"""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class BPCategory(str, Enum):
    """Blood pressure band"""

    NORMAL = "Normal"
    ELEVATED = "Elevated"
    STAGE_1 = "Stage 1"
    STAGE_2 = "Stage 2"
    CRISIS = "Crisis"


class RiskCategory(str, Enum):
    """Risk band derived from the total score"""

    LOW = "Low Risk"
    MODERATE = "Moderate Risk"
    HIGH = "High Risk"
    UNINSURABLE = "Uninsurable"


class RiskInput(BaseModel):
    """Normalized biometric inputs for a single scoring call."""

    age: int = Field(ge=0, description="Age in whole years")
    height: float = Field(gt=0, description="Height in centimeters")
    weight: float = Field(gt=0, description="Weight in kilograms")
    systolic: int = Field(description="Systolic pressure in mmHg")
    diastolic: int = Field(description="Diastolic pressure in mmHg")
    family_history: Tuple[str, ...] = Field(
        default=(), description="Condition tags, open vocabulary"
    )

    class Config:
        frozen = True


class RiskAssessment(BaseModel):
    """Scoring result returned by POST /api/calculate-risk."""

    age: int
    bmi: float
    bmi_category: BMICategory = Field(alias="bmiCategory")
    bmi_points: int = Field(alias="bmiPoints")
    systolic: int
    diastolic: int
    bp_category: BPCategory = Field(alias="bpCategory")
    bp_points: int = Field(alias="bpPoints")
    age_points: int = Field(alias="agePoints")
    family_history: List[str] = Field(alias="familyHistory")
    family_points: int = Field(alias="familyPoints")
    total_score: int = Field(alias="totalScore")
    risk_category: RiskCategory = Field(alias="riskCategory")

    class Config:
        frozen = True
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response from the scoring endpoint"""

    error: str

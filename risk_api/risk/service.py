"""
RiskScorerService - Calculates an insurance risk score from biometric inputs.
"""

import logging
import math
from typing import Iterable

from risk_api.risk.schemas import (
    BMICategory,
    BPCategory,
    RiskAssessment,
    RiskCategory,
    RiskInput,
)

logger = logging.getLogger(__name__)

BMI_POINTS = {
    BMICategory.NORMAL: 0,
    BMICategory.OVERWEIGHT: 30,
}
# Underweight and Obese carry the same penalty
OUT_OF_RANGE_BMI_POINTS = 75

BP_POINTS = {
    BPCategory.NORMAL: 0,
    BPCategory.ELEVATED: 15,
    BPCategory.STAGE_1: 30,
    BPCategory.STAGE_2: 75,
    BPCategory.CRISIS: 100,
}

FAMILY_HISTORY_CONDITIONS = ("diabetes", "cancer", "alzheimers")
FAMILY_HISTORY_POINTS = 10

BMI_DECIMALS = 2


class RiskScorerService:
    """
    Service for calculating insurance risk scores.

    Scoring formula:
    - BMI points = 0 (Normal), 30 (Overweight), 75 (Underweight or Obese)
    - BP points = 0 / 15 / 30 / 75 / 100 from Normal up to Crisis
    - Age points = 0 (<30), 10 (<45), 20 (<60), 30 otherwise
    - Family points = 10 per listed condition (diabetes, cancer, alzheimers)
    - Total = sum of the four, banded into Low/Moderate/High Risk or Uninsurable

    The service holds no state; one instance is shared by all requests.
    """

    def calculate(self, risk_input: RiskInput) -> RiskAssessment:
        """
        Calculate the risk assessment for one set of inputs.

        Args:
            risk_input: Validated biometric inputs

        Returns:
            RiskAssessment with sub-scores, categories and total

        Raises:
            ValueError: if height is not positive or BMI is not finite
        """
        bmi = self._calculate_bmi(risk_input.height, risk_input.weight)
        bmi_category = self._bmi_category(bmi)
        bmi_points = self._bmi_points(bmi_category)

        bp_category = self._bp_category(risk_input.systolic, risk_input.diastolic)
        bp_points = BP_POINTS[bp_category]

        age_points = self._age_points(risk_input.age)
        family_points = self._family_history_points(risk_input.family_history)

        total_score = age_points + bmi_points + bp_points + family_points

        return RiskAssessment(
            age=risk_input.age,
            bmi=round(bmi, BMI_DECIMALS),
            bmi_category=bmi_category,
            bmi_points=bmi_points,
            systolic=risk_input.systolic,
            diastolic=risk_input.diastolic,
            bp_category=bp_category,
            bp_points=bp_points,
            age_points=age_points,
            family_history=list(risk_input.family_history),
            family_points=family_points,
            total_score=total_score,
            risk_category=self._risk_category(total_score),
        )

    def _calculate_bmi(self, height_cm: float, weight_kg: float) -> float:
        """BMI = weight (kg) / height (m) squared."""
        if height_cm <= 0:
            raise ValueError(f"height must be positive, got {height_cm}")

        height_m = height_cm / 100
        bmi = weight_kg / (height_m * height_m)

        if not math.isfinite(bmi):
            raise ValueError(f"BMI is not finite for height={height_cm}, weight={weight_kg}")

        return bmi

    def _bmi_category(self, bmi: float) -> BMICategory:
        if bmi < 18.5:
            return BMICategory.UNDERWEIGHT
        elif bmi < 25:
            return BMICategory.NORMAL
        elif bmi < 30:
            return BMICategory.OVERWEIGHT
        else:
            return BMICategory.OBESE

    def _bmi_points(self, category: BMICategory) -> int:
        return BMI_POINTS.get(category, OUT_OF_RANGE_BMI_POINTS)

    def _bp_category(self, systolic: int, diastolic: int) -> BPCategory:
        """
        Classify blood pressure.

        Bands are checked from most to least severe and either reading alone
        is enough to enter a band.
        """
        if systolic >= 180 or diastolic >= 120:
            return BPCategory.CRISIS
        elif systolic >= 140 or diastolic >= 90:
            return BPCategory.STAGE_2
        elif systolic >= 130 or diastolic >= 80:
            return BPCategory.STAGE_1
        elif systolic >= 120 or diastolic >= 80:
            return BPCategory.ELEVATED
        else:
            return BPCategory.NORMAL

    def _age_points(self, age: int) -> int:
        if age < 30:
            return 0
        elif age < 45:
            return 10
        elif age < 60:
            return 20
        else:
            return 30

    def _family_history_points(self, family_history: Iterable[str]) -> int:
        """10 points per known condition; unknown tags and repeats add nothing."""
        conditions = set(family_history)
        return sum(
            FAMILY_HISTORY_POINTS
            for condition in FAMILY_HISTORY_CONDITIONS
            if condition in conditions
        )

    def _risk_category(self, total_score: int) -> RiskCategory:
        if total_score <= 20:
            return RiskCategory.LOW
        elif total_score <= 50:
            return RiskCategory.MODERATE
        elif total_score <= 75:
            return RiskCategory.HIGH
        else:
            return RiskCategory.UNINSURABLE


risk_scorer = RiskScorerService()

"""
Unit tests for RiskScorerService.

Covers each scoring table at its band boundaries plus the two
reference scenarios end to end.
"""

import pytest

from risk_api.risk.schemas import (
    BMICategory,
    BPCategory,
    RiskCategory,
    RiskInput,
)


# =============================================================================
# Tests: calculate (end to end)
# =============================================================================


class TestCalculate:
    def test_healthy_young_adult_is_low_risk(self, scorer, healthy_input):
        result = scorer.calculate(healthy_input)

        assert result.bmi == pytest.approx(22.49, abs=0.01)
        assert result.bmi_category == BMICategory.NORMAL
        assert result.bmi_points == 0
        assert result.bp_category == BPCategory.NORMAL
        assert result.bp_points == 0
        assert result.age_points == 0
        assert result.family_points == 0
        assert result.total_score == 0
        assert result.risk_category == RiskCategory.LOW

    def test_obese_hypertensive_with_family_history_is_uninsurable(
        self, scorer, high_risk_input
    ):
        result = scorer.calculate(high_risk_input)

        assert result.bmi == pytest.approx(35.16, abs=0.01)
        assert result.bmi_category == BMICategory.OBESE
        assert result.bmi_points == 75
        assert result.bp_category == BPCategory.STAGE_2
        assert result.bp_points == 75
        assert result.age_points == 20
        assert result.family_points == 20
        assert result.total_score == 190
        assert result.risk_category == RiskCategory.UNINSURABLE

    def test_echoes_inputs(self, scorer, high_risk_input):
        result = scorer.calculate(high_risk_input)

        assert result.age == 50
        assert result.systolic == 145
        assert result.diastolic == 95
        assert result.family_history == ["diabetes", "cancer"]

    @pytest.mark.parametrize(
        "age,height,weight,systolic,diastolic,history",
        [
            (18, 150, 40, 110, 70, ()),
            (35, 180, 90, 125, 70, ("cancer",)),
            (44, 175, 76.5, 132, 85, ("alzheimers", "diabetes")),
            (61, 165, 120, 190, 125, ("diabetes", "cancer", "alzheimers")),
            (80, 200, 60, 100, 60, ("asthma",)),
        ],
    )
    def test_total_is_sum_of_components(
        self, scorer, age, height, weight, systolic, diastolic, history
    ):
        result = scorer.calculate(
            RiskInput(
                age=age,
                height=height,
                weight=weight,
                systolic=systolic,
                diastolic=diastolic,
                family_history=history,
            )
        )

        assert result.total_score == (
            result.age_points
            + result.bmi_points
            + result.bp_points
            + result.family_points
        )

    def test_same_input_gives_same_output(self, scorer, high_risk_input):
        assert scorer.calculate(high_risk_input) == scorer.calculate(high_risk_input)

    def test_category_uses_unrounded_bmi(self, scorer):
        # 100cm / 24.996kg -> bmi 24.996, shown as 25.0 but still Normal
        result = scorer.calculate(
            RiskInput(age=20, height=100, weight=24.996, systolic=110, diastolic=70)
        )

        assert result.bmi == 25.0
        assert result.bmi_category == BMICategory.NORMAL

    def test_serializes_with_camel_case_keys(self, scorer, healthy_input):
        data = scorer.calculate(healthy_input).model_dump(by_alias=True, mode="json")

        assert set(data) == {
            "age",
            "bmi",
            "bmiCategory",
            "bmiPoints",
            "systolic",
            "diastolic",
            "bpCategory",
            "bpPoints",
            "agePoints",
            "familyHistory",
            "familyPoints",
            "totalScore",
            "riskCategory",
        }
        assert data["riskCategory"] == "Low Risk"


# =============================================================================
# Tests: _calculate_bmi
# =============================================================================


class TestCalculateBmi:
    def test_uses_height_in_meters(self, scorer):
        assert scorer._calculate_bmi(200, 80) == pytest.approx(20.0)

    def test_zero_height_raises(self, scorer):
        with pytest.raises(ValueError):
            scorer._calculate_bmi(0, 80)

    def test_negative_height_raises(self, scorer):
        with pytest.raises(ValueError):
            scorer._calculate_bmi(-170, 80)

    def test_infinite_weight_raises(self, scorer):
        with pytest.raises(ValueError):
            scorer._calculate_bmi(170, float("inf"))


# =============================================================================
# Tests: BMI bands
# =============================================================================


class TestBmiCategory:
    @pytest.mark.parametrize(
        "bmi,expected",
        [
            (10.0, BMICategory.UNDERWEIGHT),
            (18.49, BMICategory.UNDERWEIGHT),
            (18.5, BMICategory.NORMAL),
            (24.99, BMICategory.NORMAL),
            (25, BMICategory.OVERWEIGHT),
            (29.99, BMICategory.OVERWEIGHT),
            (30, BMICategory.OBESE),
            (55.0, BMICategory.OBESE),
        ],
    )
    def test_band_boundaries(self, scorer, bmi, expected):
        assert scorer._bmi_category(bmi) == expected

    @pytest.mark.parametrize(
        "category,points",
        [
            (BMICategory.NORMAL, 0),
            (BMICategory.OVERWEIGHT, 30),
            (BMICategory.UNDERWEIGHT, 75),
            (BMICategory.OBESE, 75),
        ],
    )
    def test_points(self, scorer, category, points):
        assert scorer._bmi_points(category) == points


# =============================================================================
# Tests: blood pressure bands
# =============================================================================


class TestBpCategory:
    @pytest.mark.parametrize(
        "systolic,diastolic,expected",
        [
            (110, 70, BPCategory.NORMAL),
            (119, 79, BPCategory.NORMAL),
            (120, 79, BPCategory.ELEVATED),
            (129, 70, BPCategory.ELEVATED),
            (130, 70, BPCategory.STAGE_1),
            (110, 80, BPCategory.STAGE_1),
            (139, 89, BPCategory.STAGE_1),
            (140, 70, BPCategory.STAGE_2),
            (110, 90, BPCategory.STAGE_2),
            (179, 119, BPCategory.STAGE_2),
            (180, 70, BPCategory.CRISIS),
            (110, 120, BPCategory.CRISIS),
        ],
    )
    def test_band_boundaries(self, scorer, systolic, diastolic, expected):
        assert scorer._bp_category(systolic, diastolic) == expected

    def test_either_reading_is_enough(self, scorer):
        # Normal systolic, crisis diastolic
        assert scorer._bp_category(100, 125) == BPCategory.CRISIS


# =============================================================================
# Tests: age and family history
# =============================================================================


class TestAgePoints:
    @pytest.mark.parametrize(
        "age,points",
        [(0, 0), (29, 0), (30, 10), (44, 10), (45, 20), (59, 20), (60, 30), (99, 30)],
    )
    def test_band_boundaries(self, scorer, age, points):
        assert scorer._age_points(age) == points


class TestFamilyHistoryPoints:
    def test_empty(self, scorer):
        assert scorer._family_history_points([]) == 0

    def test_each_condition_adds_ten(self, scorer):
        assert scorer._family_history_points(["diabetes"]) == 10
        assert scorer._family_history_points(["diabetes", "cancer"]) == 20
        assert scorer._family_history_points(["alzheimers", "cancer", "diabetes"]) == 30

    def test_duplicates_counted_once(self, scorer):
        assert scorer._family_history_points(["diabetes", "diabetes"]) == 10

    def test_order_does_not_matter(self, scorer):
        assert scorer._family_history_points(
            ["cancer", "alzheimers"]
        ) == scorer._family_history_points(["alzheimers", "cancer"])

    def test_unknown_tags_ignored(self, scorer):
        assert scorer._family_history_points(["asthma", "Diabetes", "heart"]) == 0


# =============================================================================
# Tests: risk bands
# =============================================================================


class TestRiskCategory:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, RiskCategory.LOW),
            (20, RiskCategory.LOW),
            (21, RiskCategory.MODERATE),
            (50, RiskCategory.MODERATE),
            (51, RiskCategory.HIGH),
            (75, RiskCategory.HIGH),
            (76, RiskCategory.UNINSURABLE),
            (280, RiskCategory.UNINSURABLE),
        ],
    )
    def test_band_boundaries(self, scorer, score, expected):
        assert scorer._risk_category(score) == expected

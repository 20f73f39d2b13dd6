import pytest

from app.services.growth import (
    NORMAL,
    OBESE,
    OVERWEIGHT,
    UNDERWEIGHT,
    assess_growth_status,
    build_growth_alert,
    calculate_bmi,
    classify_bmi,
    round_half_up,
)


def test_calculate_bmi_rounds_to_two_decimals():
    assert calculate_bmi(6, 0.6) == 16.67
    assert calculate_bmi(2.5, 0.5) == 10.0
    assert calculate_bmi(6, 0.55) == 19.83


@pytest.mark.parametrize("height", [0, -0.5])
def test_calculate_bmi_non_positive_height_is_zero(height):
    assert calculate_bmi(10, height) == 0


@pytest.mark.parametrize(
    "bmi, expected",
    [
        (0, UNDERWEIGHT),
        (13.99, UNDERWEIGHT),
        (14, NORMAL),
        (17.99, NORMAL),
        (18, OVERWEIGHT),
        (19.99, OVERWEIGHT),
        (20, OBESE),
        (35, OBESE),
    ],
)
def test_classify_bmi_band_boundaries(bmi, expected):
    assert classify_bmi(bmi) == expected


def test_assessment_is_deterministic():
    first = assess_growth_status(9.6, 0.75, age_months=10, gender="female")
    second = assess_growth_status(9.6, 0.75, age_months=10, gender="female")
    assert first == second


def test_age_and_gender_do_not_change_the_result():
    baby = assess_growth_status(6, 0.55, age_months=3, gender="male")
    toddler = assess_growth_status(6, 0.55, age_months=30, gender="female")
    assert baby.status == toddler.status == OVERWEIGHT


def test_underweight_alert():
    alert = build_growth_alert(7, assess_growth_status(2.5, 0.5))
    assert alert == {
        "child_id": 7,
        "alert_type": "underweight",
        "message": "Child is underweight. Nutritional assessment recommended.",
    }


@pytest.mark.parametrize("weight, height", [(6, 0.55), (12, 0.7)])
def test_overweight_and_obese_share_the_overweight_alert(weight, height):
    alert = build_growth_alert(1, assess_growth_status(weight, height))
    assert alert["alert_type"] == "overweight"
    assert alert["message"] == "Child is overweight. Dietary consultation recommended."


def test_normal_result_has_no_alert():
    assert build_growth_alert(1, assess_growth_status(6, 0.6)) is None


def test_zero_height_is_not_diagnostic():
    assessment = assess_growth_status(10, 0)
    assert assessment.bmi == 0
    assert assessment.is_diagnostic is False
    assert build_growth_alert(1, assessment) is None


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(1.25, 1) == 1.3

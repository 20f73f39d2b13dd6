"""Growth classification rules for child health records.

The assessment is a flat BMI cut:

    BMI < 14          -> Underweight
    14 <= BMI < 18    -> Normal
    18 <= BMI < 20    -> Overweight
    BMI >= 20         -> Obese

Age and gender are accepted so callers already pass what a real assessment
needs, but they do not take part in the decision. Proper growth assessment
uses the WHO age/gender-indexed percentile charts; until such a table is
provided this simplification stays as is.

Every function here is pure: no database access and no shared state.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


UNDERWEIGHT = "Underweight"
NORMAL = "Normal"
OVERWEIGHT = "Overweight"
OBESE = "Obese"

NUTRITION_STATUSES = (UNDERWEIGHT, NORMAL, OVERWEIGHT, OBESE)

# Lower bound (inclusive) of every band above Underweight
NORMAL_MIN_BMI = 14
OVERWEIGHT_MIN_BMI = 18
OBESE_MIN_BMI = 20

UNDERWEIGHT_ALERT = {
    "alert_type": "underweight",
    "message": "Child is underweight. Nutritional assessment recommended.",
}
OVERWEIGHT_ALERT = {
    "alert_type": "overweight",
    "message": "Child is overweight. Dietary consultation recommended.",
}


class GrowthAssessment(BaseModel):
    """Result of classifying a single weight/height measurement."""

    bmi: float
    status: str
    # False when height <= 0 made the BMI a 0 sentinel
    is_diagnostic: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def is_abnormal(self) -> bool:
        return self.is_diagnostic and self.status != NORMAL


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator (2.5 -> 3), not like Python's banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_bmi(weight: float, height: float) -> float:
    """Body-mass index from weight (kg) and height (m), rounded to 2 decimals.

    A height of 0 or less yields 0 rather than raising; 0 is a
    non-diagnostic sentinel, not a real BMI.
    """
    if height <= 0:
        return 0
    return round_half_up(weight / (height * height), 2)


def classify_bmi(bmi: float) -> str:
    """Map a BMI onto one of the four fixed bands."""
    if bmi < NORMAL_MIN_BMI:
        return UNDERWEIGHT
    if bmi < OVERWEIGHT_MIN_BMI:
        return NORMAL
    if bmi < OBESE_MIN_BMI:
        return OVERWEIGHT
    return OBESE


def assess_growth_status(
    weight: float,
    height: float,
    age_months: Optional[int] = None,
    gender: Optional[str] = None,
) -> GrowthAssessment:
    """Classify a measurement.

    Args:
        weight: Weight in kg
        height: Height in meters
        age_months: Child's age; accepted but unused by the flat thresholds
        gender: 'male' or 'female'; accepted but unused by the flat thresholds

    Returns:
        GrowthAssessment with the BMI and status label
    """
    bmi = calculate_bmi(weight, height)
    return GrowthAssessment(
        bmi=bmi,
        status=classify_bmi(bmi),
        is_diagnostic=height > 0,
    )


def build_growth_alert(child_id: int, assessment: GrowthAssessment) -> Optional[Dict[str, Any]]:
    """Alert payload for an abnormal assessment, or None when nothing is due.

    Overweight and Obese share the dietary-consultation alert.
    """
    if not assessment.is_abnormal:
        return None
    template = UNDERWEIGHT_ALERT if assessment.status == UNDERWEIGHT else OVERWEIGHT_ALERT
    return {"child_id": child_id, **template}


__all__ = [
    "UNDERWEIGHT",
    "NORMAL",
    "OVERWEIGHT",
    "OBESE",
    "NUTRITION_STATUSES",
    "GrowthAssessment",
    "round_half_up",
    "calculate_bmi",
    "classify_bmi",
    "assess_growth_status",
    "build_growth_alert",
]

"""
Biological Age Estimator

Estimates how far a player's physical maturation is ahead of or behind their
calendar age. A proper maturity offset (e.g. Mirwald) needs sitting height and
leg length; this module only has height, weight and age, so it uses a body
proportion heuristic that sorts players into three fixed offsets:

1. Late bloomer: low BMI and short for age -> offset -0.7
2. Early maturer: high BMI and tall for age -> offset +0.5
3. Everyone else -> offset -0.2

Biological age = calendar age + maturity offset
"""

from .models import MaturityEstimate

LATE_BLOOMER = "Late Bloomer"
EARLY_MATURER = "Early Maturer"
AVERAGE = "Average"

LATE_BLOOMER_OFFSET = -0.7
EARLY_MATURER_OFFSET = 0.5
AVERAGE_OFFSET = -0.2


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """Body mass index in kg/m^2"""
    return weight_kg / ((height_cm / 100) ** 2)


def maturity_category(maturity_offset: float) -> str:
    """
    Classify a maturity offset

    The thresholds are looser than the buckets used to assign the offset, so
    any offset, not only the three fixed ones, can be classified.
    """
    if maturity_offset < -0.5:
        return LATE_BLOOMER
    if maturity_offset > 0.3:
        return EARLY_MATURER
    return AVERAGE


def estimate_biological_age(calendar_age: float, height_cm: float, weight_kg: float) -> MaturityEstimate:
    """
    Estimate biological age from calendar age, height and weight

    Args:
        calendar_age: Age in years, must be non-zero
        height_cm: Height in centimeters, must be non-zero
        weight_kg: Weight in kilograms

    Returns:
        MaturityEstimate with biological age, maturity offset and category
    """
    bmi = calculate_bmi(height_cm, weight_kg)
    height_for_age = height_cm / calendar_age

    # Both conditions must hold; mixed profiles stay in the average bucket
    if bmi < 20 and height_for_age < 10.5:
        maturity_offset = LATE_BLOOMER_OFFSET
    elif bmi > 23 and height_for_age > 11:
        maturity_offset = EARLY_MATURER_OFFSET
    else:
        maturity_offset = AVERAGE_OFFSET

    return MaturityEstimate(
        biological_age=calendar_age + maturity_offset,
        maturity_offset=maturity_offset,
        category=maturity_category(maturity_offset),
    )

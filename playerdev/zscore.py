"""
Z-score normalisation against age reference values.
"""

from .models import ReferenceStat


def calculate_zscore(value: float, mean: float, sd: float) -> float:
    """
    Standard score of a value

    Returns 0 when the standard deviation is 0. The sign is not adjusted for
    the direction of the test.
    """
    if sd == 0:
        return 0.0
    return (value - mean) / sd


def timed_test_zscore(time_sec: float, reference: ReferenceStat) -> float:
    """Z-score of a timed test where lower is better; positive means faster than reference"""
    return -calculate_zscore(time_sec, reference.mean, reference.sd)

"""
Qualitative labels for Z-scores.

Two scales are used on purpose:
- ``interpret_zscore`` (five bands) for the overall rating of a player
- ``rate_test_zscore`` (three bands) next to each individual test in reports
"""

from typing import Optional

MUCH_ABOVE_AVERAGE = "Much above average"
ABOVE_AVERAGE = "Above average"
AVERAGE = "Average"
BELOW_AVERAGE = "Below average"
MUCH_BELOW_AVERAGE = "Much below average"

EXCELLENT = "Excellent"
NEEDS_IMPROVEMENT = "Needs improvement"
NO_DATA = "No data"


def interpret_zscore(zscore: float) -> str:
    """Five-band label used for the overall rating"""
    if zscore > 1.5:
        return MUCH_ABOVE_AVERAGE
    if zscore > 0.5:
        return ABOVE_AVERAGE
    if zscore > -0.5:
        return AVERAGE
    if zscore > -1.5:
        return BELOW_AVERAGE
    return MUCH_BELOW_AVERAGE


def rate_test_zscore(zscore: Optional[float]) -> str:
    """Three-band label shown beside a single test result"""
    if zscore is None:
        return NO_DATA
    if zscore > 1:
        return EXCELLENT
    if zscore > -0.5:
        return AVERAGE
    return NEEDS_IMPROVEMENT

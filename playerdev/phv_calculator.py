"""
Peak Height Velocity (PHV) Calculator

PHV is the period of maximum growth velocity during puberty. Finding the true
peak requires a full series of height measurements and a growth curve fit.
This calculator only sees the current and the previous height, so it returns
the latest annualised growth rate as an approximation of PHV:

    rate (cm/year) = (current height - previous height) / months between * 12

The value should be read as "current growth rate", not as a clinical PHV.
"""

from typing import Optional

from .config import PHV_MONTHS_BETWEEN


def estimate_growth_rate(
    current_height: float,
    previous_height: Optional[float] = None,
    months_between: float = PHV_MONTHS_BETWEEN
) -> Optional[float]:
    """
    Calculate annualised growth rate between two height measurements

    Args:
        current_height: Latest height in cm
        previous_height: Earlier height in cm (optional)
        months_between: Months elapsed between the two measurements

    Returns:
        Growth rate in cm/year, or None if there is no previous height or
        no elapsed time
    """
    if not previous_height or months_between == 0:
        return None

    return (current_height - previous_height) / months_between * 12

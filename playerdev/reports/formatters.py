"""
Formatting utilities for numbers and units.

All formatting must be consistent across reports.
"""

from typing import Optional


def format_number(value: Optional[float], decimals: int = 1) -> str:
    """
    Format a number with a fixed number of decimals.

    Args:
        value: Number to format (or None)
        decimals: Digits after the decimal point

    Returns:
        Formatted string, or "Not recorded" for None
    """
    if value is None:
        return "Not recorded"
    return f"{value:.{decimals}f}"


def format_with_unit(value: Optional[float], unit: str, decimals: int = 1) -> str:
    """
    Format a measurement with its unit (e.g. "175.0 cm").

    Args:
        value: Measurement (or None)
        unit: Unit suffix
        decimals: Digits after the decimal point

    Returns:
        Formatted string, or "Not recorded" for None
    """
    if value is None:
        return "Not recorded"
    return f"{format_number(value, decimals)} {unit}"


def format_signed(value: Optional[float], unit: str = "", decimals: int = 1) -> str:
    """Format a change with an explicit sign, e.g. "+2.5 cm" """
    if value is None:
        return "Not recorded"
    text = f"{value:+.{decimals}f}"
    return f"{text} {unit}" if unit else text


def format_zscore(value: Optional[float]) -> str:
    """Z-scores are always shown with 2 decimals"""
    return format_number(value, 2)

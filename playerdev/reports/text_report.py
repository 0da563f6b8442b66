"""
Plain-text player development report.

Renders a Player and its CalculationResults in the same section order as the
printed report: maturity, physical profile, season statistics, performance
tests, mid-season reflection.
"""

from typing import List, Optional

from ..models import Player, CalculationResults
from ..interpretation import rate_test_zscore
from .formatters import format_number, format_with_unit, format_signed, format_zscore

SECTION_RULE = "=" * 50


def _section(title: str) -> List[str]:
    return ["", title, "-" * len(title)]


def _line(label: str, value: str) -> str:
    return f"  {label:<24}{value}"


def _test_line(label: str, time_sec: Optional[float], zscore: Optional[float]) -> str:
    if not time_sec:
        return _line(label, "Not recorded")
    return _line(label, f"{format_with_unit(time_sec, 's', 2)}  {rate_test_zscore(zscore)} (Z {format_zscore(zscore)})")


def render_text_report(player: Player, results: CalculationResults) -> str:
    """
    Render the full report as text.

    Args:
        player: Player snapshot
        results: Metrics calculated for that snapshot

    Returns:
        Multi-line report string
    """
    lines = [SECTION_RULE, player.full_name or "Unnamed player"]
    if player.position:
        lines.append(player.position)
    if player.in_club_since:
        lines.append(f"In club since {player.in_club_since}")
    lines.append(SECTION_RULE)

    if results.report_comments:
        lines.extend(f"* {comment}" for comment in results.report_comments)

    lines.extend(_section("Biological maturity"))
    lines.append(_line("Calendar age", format_with_unit(player.calendar_age, "yrs")))
    lines.append(_line("Biological age", format_with_unit(results.biological_age, "yrs")))
    lines.append(_line("Maturity offset", format_with_unit(results.maturity_offset, "yrs", 2)))
    if results.maturity_category:
        lines.append(_line("Maturity status", results.maturity_category))

    lines.extend(_section("Physical profile"))
    height = format_with_unit(player.height_cm, "cm")
    if results.height_change_cm is not None:
        height += f" ({format_signed(results.height_change_cm, 'cm')})"
    lines.append(_line("Height", height))
    weight = format_with_unit(player.weight_kg, "kg")
    if results.weight_change_kg is not None:
        weight += f" ({format_signed(results.weight_change_kg, 'kg')})"
    lines.append(_line("Weight", weight))
    if player.body_fat_percent:
        lines.append(_line("Body fat", format_with_unit(player.body_fat_percent, "%")))
    if results.bmi is not None:
        lines.append(_line("BMI", format_number(results.bmi)))
    if results.phv is not None:
        lines.append(_line("Growth rate (PHV)", format_with_unit(results.phv, "cm/year")))

    lines.extend(_section("Season statistics"))
    lines.append(_line("Availability", format_with_unit(results.availability, "%", 0)))
    lines.append(_line("Matches / minutes", f"{player.matches or 0:g} / {player.minutes or 0:g}"))
    lines.append(_line("Playing time", format_with_unit(results.playing_time_percent, "%", 0)))
    if player.total_distance_m and player.sprint_distance_m:
        lines.append(_line("Distance", format_with_unit(player.total_distance_m, "m", 0)))
        lines.append(_line("Sprint distance", format_with_unit(player.sprint_distance_m, "m", 0)))
        lines.append(_line("Sprint share", format_with_unit(results.sprint_percent, "%")))

    lines.extend(_section("Performance tests"))
    lines.append(_test_line("Sprint 10m", player.sprint_10m_sec, results.zscore_10m))
    lines.append(_test_line("Sprint 30m", player.sprint_30m_sec, results.zscore_30m))
    lines.append(_test_line("COD left", player.cod_left_sec, results.zscore_cod_left))
    lines.append(_test_line("COD right", player.cod_right_sec, results.zscore_cod_right))

    lines.extend(_section("Mid-season reflection"))
    lines.append(_line("Overall rating", results.overall_rating or "Not rated"))
    lines.append("  Training suggestions:")
    lines.extend(f"    - {suggestion}" for suggestion in results.training_suggestions)
    if player.notes:
        lines.append("  Coach notes:")
        lines.append(f"    {player.notes}")

    return "\n".join(lines) + "\n"

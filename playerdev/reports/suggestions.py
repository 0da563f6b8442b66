"""
Training suggestions and report comments.

Suggestions are produced by an ordered list of rules. Each rule looks at the
already calculated results and returns the messages it wants to add. The
order of ``SUGGESTION_RULES`` is the order of the final list and must not be
changed casually: coaches read the list top down.

Rules only look at fields that are set and non-zero. A zero usually comes
from a zero-denominator fallback and says nothing about the player.
"""

from typing import Callable, List

from ..models import Player, CalculationResults

LATE_BLOOMER_FOCUS = "Late bloomer - focus on technique and tactics, physical development will come later"
LATE_BLOOMER_STRENGTH = "Priority: bodyweight strength training"
EARLY_MATURER_CONTROL = "Early maturer - keep an eye on weight control and body proportions"
IMPROVE_ACCELERATION = "Improve acceleration - plyometric and explosive power training"
IMPROVE_TOP_SPEED = "Improve top speed - 30-60m sprint sessions"
IMPROVE_AGILITY = "Improve agility - change-of-direction and coordination drills"
COD_ASYMMETRY = "Change-of-direction asymmetry - work on the weaker side"
LOW_AVAILABILITY = "Low availability - injury prevention, strengthening and recovery work"
HIGH_SPRINT_LOAD = "High sprint intensity - monitor load and recovery"
LOW_SPRINT_LOAD = "Low sprint intensity - increase high-intensity running volume"
CONTINUE_PROGRAM = "Continue the current training program"
MONITOR_PROGRESS = "Monitor progress regularly"

Rule = Callable[[Player, CalculationResults], List[str]]


def _maturity_rule(player: Player, results: CalculationResults) -> List[str]:
    offset = results.maturity_offset
    if offset and offset < -0.5:
        return [LATE_BLOOMER_FOCUS, LATE_BLOOMER_STRENGTH]
    if offset and offset > 0.3:
        return [EARLY_MATURER_CONTROL]
    return []


def _acceleration_rule(player: Player, results: CalculationResults) -> List[str]:
    if results.zscore_10m and results.zscore_10m < -0.5:
        return [IMPROVE_ACCELERATION]
    return []


def _top_speed_rule(player: Player, results: CalculationResults) -> List[str]:
    if results.zscore_30m and results.zscore_30m < -0.5:
        return [IMPROVE_TOP_SPEED]
    return []


def _agility_rule(player: Player, results: CalculationResults) -> List[str]:
    left = results.zscore_cod_left
    right = results.zscore_cod_right
    if not (left and right):
        return []

    suggestions = []
    if (left + right) / 2 < -0.5:
        suggestions.append(IMPROVE_AGILITY)
    if abs(left - right) > 0.5:
        suggestions.append(COD_ASYMMETRY)
    return suggestions


def _availability_rule(player: Player, results: CalculationResults) -> List[str]:
    if results.availability and results.availability < 80:
        return [LOW_AVAILABILITY]
    return []


def _sprint_load_rule(player: Player, results: CalculationResults) -> List[str]:
    sprint_percent = results.sprint_percent
    if sprint_percent and sprint_percent > 12:
        return [HIGH_SPRINT_LOAD]
    if sprint_percent and sprint_percent < 8:
        return [LOW_SPRINT_LOAD]
    return []


SUGGESTION_RULES: List[Rule] = [
    _maturity_rule,
    _acceleration_rule,
    _top_speed_rule,
    _agility_rule,
    _availability_rule,
    _sprint_load_rule,
]


def generate_training_suggestions(player: Player, results: CalculationResults) -> List[str]:
    """
    Build the ordered list of training suggestions

    Args:
        player: Player snapshot the results were calculated from
        results: Calculated metrics (suggestion fields are ignored)

    Returns:
        List of suggestion strings, never empty
    """
    suggestions = []
    for rule in SUGGESTION_RULES:
        suggestions.extend(rule(player, results))

    if not suggestions:
        suggestions = [CONTINUE_PROGRAM, MONITOR_PROGRESS]

    return suggestions


def generate_report_comments(player: Player, results: CalculationResults) -> List[str]:
    """Short observations printed in the header of a player report"""
    comments = []

    if player.injury_days and player.injury_days > 0:
        comments.append(f"Missed {player.injury_days:g} days due to injury")

    if results.sprint_percent and results.sprint_percent > 12:
        comments.append("High physical output")

    if results.zscore_10m and results.zscore_10m > 1:
        comments.append("Acceleration above average for biological age")

    if results.maturity_offset and results.maturity_offset < -0.5:
        comments.append("Late bloomer - potential for further physical growth")

    return comments

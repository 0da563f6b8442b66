"""
Player metrics engine.

``calculate_player_metrics`` is the single entry point used by storage,
reporting and the command line. It is a pure function of the Player
snapshot: nothing is cached and nothing is written.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .config import MATCH_DURATION_MINUTES, PHV_MONTHS_BETWEEN
from .models import Player, CalculationResults, ReferenceEntry
from .maturity import estimate_biological_age, calculate_bmi
from .phv_calculator import estimate_growth_rate
from .load import (
    calculate_availability,
    calculate_sprint_percentage,
    calculate_playing_time_percentage
)
from .zscore import timed_test_zscore
from .interpretation import interpret_zscore
from .reference_data import lookup as default_lookup
from .reports.suggestions import generate_training_suggestions, generate_report_comments

logger = logging.getLogger(__name__)

ReferenceLookup = Callable[[float], ReferenceEntry]


def _difference(current: Optional[float], previous: Optional[float]) -> Optional[float]:
    if current is None or previous is None:
        return None
    return current - previous


def _zscores(player: Player, reference: ReferenceEntry) -> Dict[str, float]:
    """Sign-corrected Z-scores for every timed test that was recorded"""
    tests = [
        ('zscore_10m', player.sprint_10m_sec, reference.sprint_10m),
        ('zscore_30m', player.sprint_30m_sec, reference.sprint_30m),
        ('zscore_cod_left', player.cod_left_sec, reference.cod),
        ('zscore_cod_right', player.cod_right_sec, reference.cod),
    ]
    # A zero time is an empty form field, not a result
    return {
        field: timed_test_zscore(time_sec, stat)
        for field, time_sec, stat in tests
        if time_sec
    }


def overall_zscore(values: Dict[str, Any]) -> float:
    """
    Mean of the four test Z-scores

    Missing tests count as 0 and the sum is always divided by 4, so a player
    with fewer than four tests is pulled towards "Average".
    """
    recorded = [
        values.get(field)
        for field in ('zscore_10m', 'zscore_30m', 'zscore_cod_left', 'zscore_cod_right')
    ]
    return sum(z for z in recorded if z is not None) / 4


def calculate_player_metrics(
    player: Union[Player, Mapping[str, Any]],
    lookup: ReferenceLookup = default_lookup,
    match_duration: float = MATCH_DURATION_MINUTES,
    months_between: float = PHV_MONTHS_BETWEEN
) -> CalculationResults:
    """
    Calculate all derived metrics for a player

    Args:
        player: Player snapshot, or a mapping of Player fields
        lookup: Function returning reference values for a biological age
        match_duration: Minutes in a full match
        months_between: Months between previous and current height

    Returns:
        CalculationResults; fields whose inputs were missing are left as None
    """
    if not isinstance(player, Player):
        player = Player.model_validate(player)

    values: Dict[str, Any] = {}

    # 1. Biological age
    if player.calendar_age and player.height_cm and player.weight_kg:
        maturity = estimate_biological_age(player.calendar_age, player.height_cm, player.weight_kg)
        values['biological_age'] = maturity.biological_age
        values['maturity_offset'] = maturity.maturity_offset
        values['maturity_category'] = maturity.category
        values['bmi'] = calculate_bmi(player.height_cm, player.weight_kg)
    else:
        logger.debug("Skipping biological age: calendar age, height or weight missing")

    # 2. Growth rate
    if player.height_cm and player.previous_height_cm:
        values['phv'] = estimate_growth_rate(player.height_cm, player.previous_height_cm, months_between)

    values['height_change_cm'] = _difference(player.height_cm, player.previous_height_cm)
    values['weight_change_kg'] = _difference(player.weight_kg, player.previous_weight_kg)

    # 3. Availability
    if player.training_days is not None and player.injury_days is not None:
        values['availability'] = calculate_availability(player.training_days, player.injury_days)

    # 4. Sprint share of distance
    if player.sprint_distance_m is not None and player.total_distance_m is not None:
        values['sprint_percent'] = calculate_sprint_percentage(player.sprint_distance_m, player.total_distance_m)

    # 5. Playing time
    if player.minutes is not None and player.matches is not None:
        values['playing_time_percent'] = calculate_playing_time_percentage(
            player.minutes, player.matches, match_duration
        )

    # 6. Z-scores against the biological age group
    if values.get('biological_age'):
        values.update(_zscores(player, lookup(values['biological_age'])))
    else:
        logger.debug("Skipping Z-scores: no biological age")

    # 7. Overall rating
    values['overall_rating'] = interpret_zscore(overall_zscore(values))

    # 8. Suggestions and comments
    results = CalculationResults(**values)
    return results.model_copy(update={
        'training_suggestions': generate_training_suggestions(player, results),
        'report_comments': generate_report_comments(player, results),
    })

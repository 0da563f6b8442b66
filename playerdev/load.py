"""
Availability and load percentages.

Each function returns 0 instead of dividing by zero. Results are not clamped:
a value above 100 or below 0 means the inputs are inconsistent (e.g. more
injury days than training days) and is passed through as is.
"""


def calculate_availability(training_days: float, injury_days: float) -> float:
    """Percentage of training days the player was not injured"""
    if training_days == 0:
        return 0.0
    return (training_days - injury_days) / training_days * 100


def calculate_sprint_percentage(sprint_meters: float, total_distance: float) -> float:
    """Percentage of total distance covered at sprint speed"""
    if total_distance == 0:
        return 0.0
    return sprint_meters / total_distance * 100


def calculate_playing_time_percentage(minutes_played: float, matches: float, match_duration: float = 90) -> float:
    """Percentage of available match minutes actually played"""
    if matches == 0:
        return 0.0
    total_possible_minutes = matches * match_duration
    return minutes_played / total_possible_minutes * 100

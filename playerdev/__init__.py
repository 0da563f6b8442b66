"""
PlayerDev - youth football athletic development metrics

Turns a player's measurements and test results into biological age,
growth rate, load percentages, age-normalised Z-scores, an overall rating
and training suggestions.
"""

from .models import Player, CalculationResults, ReferenceEntry, ReferenceStat
from .calculations import calculate_player_metrics

__all__ = [
    'Player',
    'CalculationResults',
    'ReferenceEntry',
    'ReferenceStat',
    'calculate_player_metrics',
]

__version__ = "1.0.0"

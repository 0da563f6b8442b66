"""
Configuration constants for PlayerDev
"""
import os

# Regulation match length used for playing-time percentages
MATCH_DURATION_MINUTES = int(os.environ.get('PLAYERDEV_MATCH_DURATION', 90))

# Months assumed between the previous and current height measurement
PHV_MONTHS_BETWEEN = float(os.environ.get('PLAYERDEV_PHV_MONTHS', 6))

# Reference age used when a biological age falls outside the table
DEFAULT_REFERENCE_AGE = 17

LOG_LEVEL = os.environ.get('PLAYERDEV_LOG_LEVEL', 'WARNING').upper()

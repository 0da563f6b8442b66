"""
PlayerDev report helpers

This package turns calculated metrics into text a coach can read:
1. Suggestions - ordered training recommendations and report comments
2. Formatters - consistent number and unit formatting
3. Text report - plain-text rendering of a player and their results
"""

from .suggestions import generate_training_suggestions, generate_report_comments
from .text_report import render_text_report

__all__ = [
    'generate_training_suggestions',
    'generate_report_comments',
    'render_text_report',
]

"""
Surf Session Module

Collects the conditions for one session window and renders them as a note
entry.
"""

from .window import SessionWindow
from .collector import SessionConditions, collect_conditions
from .template import format_value, render_observation, render_session

__all__ = [
    'SessionWindow',
    'SessionConditions',
    'collect_conditions',
    'format_value',
    'render_observation',
    'render_session',
]

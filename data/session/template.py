"""Render session conditions as an org-mode entry"""

from typing import List

from data.pipelines.observations import Observation, ObservationValue
from data.session.collector import SessionConditions
from data.session.window import SessionWindow

SUMMARY_PLACEHOLDER = "(summary)"
PROMPT_PROPERTIES = ["SPOT", "BOARD"]


def format_value(value: ObservationValue) -> str:
    """Render an observation value

    Integral floats drop their fractional part; other floats are rounded to
    two decimals. Strings are used as-is.
    """
    if isinstance(value, float):
        rounded = round(value, 2)
        if rounded.is_integer():
            return str(int(rounded))
        return str(rounded)
    return str(value)


def render_observation(obs: Observation) -> str:
    """Render one observation as a ":LABEL: value" property line"""
    label, value = obs
    return f":{label.upper()}: {format_value(value)}"


def render_session(window: SessionWindow, conditions: SessionConditions) -> str:
    """Render the full note entry for a session"""
    lines: List[str] = [
        f"* Surf session <{window.start:%Y-%m-%d %a %H:%M}>--<{window.end:%Y-%m-%d %a %H:%M}>",
        ":PROPERTIES:",
        f":SESSION-START: {window.start:%Y-%m-%d %H:%M}",
        f":SESSION-END: {window.end:%Y-%m-%d %H:%M}",
    ]
    lines.extend(render_observation(obs) for obs in conditions.observations())
    lines.extend(f":{name}:" for name in PROMPT_PROPERTIES)
    lines.append(":END:")
    lines.append("** Summary")
    lines.append(SUMMARY_PLACEHOLDER)
    return "\n".join(lines) + "\n"

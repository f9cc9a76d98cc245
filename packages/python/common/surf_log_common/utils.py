"""Shared utility functions"""

import math
from typing import Union

from .constants import CARDINAL_OFFSET_DEG, CARDINAL_THRESHOLDS, METERS_TO_FEET
from .errors import ParseError

__all__ = [
    "parse_float",
    "meters_to_feet",
    "degrees_to_cardinal16",
]

Numeric = Union[str, int, float]


def parse_float(value: Numeric, what: str = "value") -> float:
    """Parse a decimal string or number into a finite float

    Args:
        value: Decimal string (e.g. "1.25") or number
        what: Name used in the error message

    Returns:
        The parsed float

    Raises:
        ParseError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ParseError(f"{what} is not numeric: {value!r}")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ParseError(f"{what} is not numeric: {value!r}") from None
    if not math.isfinite(number):
        raise ParseError(f"{what} is not a finite number: {value!r}")
    return number


def meters_to_feet(meters: Numeric) -> float:
    """Convert meters to feet"""
    return parse_float(meters, "meters") * METERS_TO_FEET


def degrees_to_cardinal16(degrees: Numeric) -> str:
    """Convert a bearing in degrees to a 16-point compass label

    The bearing is shifted by 180 degrees and reduced modulo 360, then checked
    against descending thresholds with a strict ">", so a value sitting exactly
    on a threshold lands in the next lower bucket. A normalized value of 0
    matches nothing and falls through to "N".

    Args:
        degrees: Direction in degrees (0-360), as a number or decimal string

    Returns:
        Compass direction label (N, NNE, ..., NNW)
    """
    normalized = (parse_float(degrees, "degrees") + CARDINAL_OFFSET_DEG) % 360
    for threshold, label in CARDINAL_THRESHOLDS:
        if normalized > threshold:
            return label
    return "N"

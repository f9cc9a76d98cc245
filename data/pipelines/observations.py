"""Observation records shared by the tide, wind and wave extractors

Each extractor turns one decoded API payload into an ordered list of
``(label, value)`` pairs. Missing source data makes the list shorter; it never
produces a placeholder value.
"""

from typing import Any, List, NamedTuple, Sequence, Tuple, Union

from surf_log_common import ExtractionError, MissingDataError, ParseError, parse_float

__all__ = [
    "Observation",
    "ObservationRecord",
    "ExtractionError",
    "ParseError",
    "MissingDataError",
    "observation",
    "first_and_last",
    "to_number",
]

ObservationValue = Union[str, int, float]


class Observation(NamedTuple):
    """A single labelled measurement, e.g. ("swell-height", 4.92)"""
    label: str
    value: ObservationValue


ObservationRecord = List[Observation]


def observation(label: str, value: ObservationValue) -> Observation:
    """Build an observation pair"""
    return Observation(label, value)


def first_and_last(items: Any, what: str) -> Tuple[Any, Any]:
    """Return the first and last readings of a non-empty list

    Raises:
        MissingDataError: If items is absent, not a list, or empty
    """
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes)) or not items:
        raise MissingDataError(f"No {what} readings in response")
    return items[0], items[-1]


def to_number(value: Any, label: str) -> Union[int, float]:
    """Parse a numeric API string; integral values come back as int"""
    number = parse_float(value, label)
    if number.is_integer():
        return int(number)
    return number

"""Parse wind observation responses into observations"""

import logging
from typing import Any

from data.pipelines.observations import (
    MissingDataError,
    ObservationRecord,
    first_and_last,
    observation,
    to_number,
)

logger = logging.getLogger(__name__)


def _readings(wind_data: Any) -> Any:
    """Return the "data" array held by the wrapper's second element"""
    if not isinstance(wind_data, (list, tuple)) or len(wind_data) < 2:
        raise MissingDataError("Wind response is not a [metadata, observations] wrapper")
    body = wind_data[1]
    if not isinstance(body, dict):
        raise MissingDataError("Wind response has no observation block")
    return body.get("data")


def extract_wind(wind_data: Any) -> ObservationRecord:
    """Extract wind speed and direction at the start and end of the window

    Speeds are parsed to numbers; directions are already cardinal labels and
    pass through unchanged.

    Raises:
        MissingDataError: If the data array is absent/empty or a reading lacks s/dr
        ParseError: If a speed is not numeric
    """
    logger.debug("Extracting wind observations")

    first, last = first_and_last(_readings(wind_data), "wind")
    try:
        start_speed, start_dir = first["s"], first["dr"]
        end_speed, end_dir = last["s"], last["dr"]
    except (KeyError, TypeError):
        raise MissingDataError("Wind reading is missing 's' or 'dr'") from None

    return [
        observation("wind-knots-start", to_number(start_speed, "wind speed")),
        observation("wind-direction-start", start_dir),
        observation("wind-knots-end", to_number(end_speed, "wind speed")),
        observation("wind-direction-end", end_dir),
    ]

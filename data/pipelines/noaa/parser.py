"""Parse NOAA CO-OPS tide predictions into observations"""

import logging
from typing import Dict

from data.pipelines.observations import (
    MissingDataError,
    ObservationRecord,
    first_and_last,
    observation,
)

logger = logging.getLogger(__name__)


def extract_tide(tide_data: Dict) -> ObservationRecord:
    """Extract the tide level at the start and end of the window

    Args:
        tide_data: Raw CO-OPS predictions response

    Returns:
        [("tide-start", "<v> ft"), ("tide-end", "<v> ft")]

    Raises:
        MissingDataError: If there are no predictions or a reading has no value
    """
    logger.debug("Extracting tide predictions")

    predictions = tide_data.get("predictions") if isinstance(tide_data, dict) else None
    if not predictions and isinstance(tide_data, dict) and "error" in tide_data:
        error = tide_data["error"]
        message = error.get("message", error) if isinstance(error, dict) else error
        raise MissingDataError(f"No tide predictions in response: {message}")

    first, last = first_and_last(predictions, "tide prediction")
    try:
        start, end = first["v"], last["v"]
    except (KeyError, TypeError):
        raise MissingDataError("Tide prediction has no 'v' value") from None

    return [
        observation("tide-start", f"{start} ft"),
        observation("tide-end", f"{end} ft"),
    ]

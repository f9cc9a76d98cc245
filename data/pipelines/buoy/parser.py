"""Extract wave measurements from a buoy observation tree

The observation document is walked depth-first from the root. Nodes whose
``name`` attribute matches a known measurement are converted and not searched
further; every other element is searched child by child in document order.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Callable, Dict, Tuple, Union

from surf_log_common import degrees_to_cardinal16, meters_to_feet

from data.pipelines.observations import (
    ObservationRecord,
    ObservationValue,
    ParseError,
    observation,
)

logger = logging.getLogger(__name__)


def _raw(text: str) -> str:
    return text


# Measurement node name -> (observation label, converter for the node text)
WAVE_MEASUREMENTS: Dict[str, Tuple[str, Callable[[str], ObservationValue]]] = {
    "SignificantWaveHeight": ("overall-wave-height", meters_to_feet),
    "DominantWavePeriod": ("overall-wave-period", _raw),
    "SwellHeight": ("swell-height", meters_to_feet),
    "SwellPeriod": ("swell-period", _raw),
    "SwellWaveDirection": ("swell-direction", degrees_to_cardinal16),
}


def parse_wave_document(content: Union[str, bytes]) -> ET.Element:
    """Decode raw XML into its root element

    Raises:
        ParseError: If the document is not well-formed
    """
    try:
        return ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"Malformed wave observation document: {e}") from e


def _scalar_text(node: ET.Element) -> str:
    """Return the single scalar value carried by a measurement node"""
    text = (node.text or "").strip()
    if text:
        return text

    children = list(node)
    if len(children) == 1:
        child_text = (children[0].text or "").strip()
        if child_text:
            return child_text

    raise ParseError(f"Measurement node {node.get('name')!r} has no value")


def _walk(node: ET.Element, found: Dict[str, ObservationValue]) -> Dict[str, ObservationValue]:
    measurement = WAVE_MEASUREMENTS.get(node.get("name"))
    if measurement is not None:
        label, convert = measurement
        found[label] = convert(_scalar_text(node))
        return found

    for child in node:
        # Comments and processing instructions have a callable tag
        if isinstance(child.tag, str):
            _walk(child, found)
    return found


def extract_waves(root: ET.Element) -> ObservationRecord:
    """Extract wave height, period and swell measurements from a buoy tree

    Heights are converted to feet and the swell direction to a 16-point
    compass label; periods are kept as the raw text (seconds). Labels appear
    in the order their nodes are first met. A tree with no known measurement
    yields an empty record.

    Args:
        root: Root element of the decoded observation document

    Returns:
        Observations for the measurements that were found

    Raises:
        ParseError: If a measurement node has no value or a non-numeric one,
            or the document is nested deeper than the recursion limit
    """
    logger.debug("Extracting wave measurements")

    try:
        found = _walk(root, {})
    except RecursionError:
        raise ParseError("Wave observation document is nested too deeply") from None
    if not found:
        logger.debug("No wave measurements in document")
    return [observation(label, value) for label, value in found.items()]

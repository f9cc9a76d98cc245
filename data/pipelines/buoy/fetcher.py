"""Fetch buoy wave observations as XML"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

import httpx

from data.pipelines.http_client import http_get
from data.pipelines.buoy.parser import parse_wave_document

logger = logging.getLogger(__name__)


class BuoyXMLFetcher:
    """Fetches the latest wave observation document for a buoy

    The document is a tree of elements; measurement nodes are identified by a
    ``name`` attribute (e.g. ``SignificantWaveHeight``) and carry their value
    as text.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize buoy XML fetcher

        Args:
            base_url: Observation endpoint of the buoy service
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client
        """
        self.base_url = base_url
        self.timeout = timeout
        self.client = client

    def fetch_observation_document(self, station_id: str) -> ET.Element:
        """Fetch and decode the latest observation document

        Args:
            station_id: Buoy station ID (e.g., "46237")

        Returns:
            Root element of the decoded document

        Raises:
            ParseError: If the body is not well-formed XML
        """
        logger.info(f"Fetching wave observations for buoy {station_id}")

        params = {"station": station_id}
        response = http_get(self.base_url, params=params, timeout=self.timeout, client=self.client)
        return parse_wave_document(response.content)

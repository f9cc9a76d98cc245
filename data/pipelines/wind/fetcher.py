"""
Wind Observation Fetcher

Fetches observed wind speed and direction for a wind station over the session
window. The service answers with a two-element JSON wrapper whose second
element carries the readings:

    [{...station metadata...}, {"data": [{"s": "12", "dr": "WNW", ...}, ...]}]
"""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from data.pipelines.http_client import decode_json, http_get

logger = logging.getLogger(__name__)


class WindFetcher:
    """Fetches wind observations (knots, cardinal direction) for a station"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize wind fetcher

        Args:
            base_url: Observation endpoint of the wind service
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client
        """
        self.base_url = base_url
        self.timeout = timeout
        self.client = client

    def fetch_wind_observations(
        self,
        station_id: str,
        begin_date: datetime,
        end_date: datetime,
    ) -> Any:
        """Fetch wind readings between two times

        Args:
            station_id: Wind station identifier
            begin_date: Start of the window
            end_date: End of the window

        Returns:
            Decoded JSON wrapper ([metadata, {"data": [...]}])

        Raises:
            ParseError: If the body is not JSON
        """
        logger.info(f"Fetching wind observations for station {station_id}")

        params = {
            "station": station_id,
            "start": begin_date.strftime("%Y-%m-%d %H:%M"),
            "end": end_date.strftime("%Y-%m-%d %H:%M"),
            "units_wind": "kts",
            "format": "json",
        }

        response = http_get(self.base_url, params=params, timeout=self.timeout, client=self.client)
        return decode_json(response, "wind observation")

"""Fetch NOAA CO-OPS tide predictions

NOAA CO-OPS (Center for Operational Oceanographic Products and Services)
publishes tide predictions per station. Requests are blocking and issued once
per run; there is no retry or caching.
"""

import logging
from datetime import datetime
from typing import Dict, Optional

import httpx

from data.pipelines.http_client import decode_json, http_get

logger = logging.getLogger(__name__)

COOPS_DATAGETTER_URL = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"


class NOAATideFetcher:
    """Fetches tide predictions from the NOAA CO-OPS API

    Documentation: https://api.tidesandcurrents.noaa.gov/api/prod/
    """

    def __init__(
        self,
        base_url: str = COOPS_DATAGETTER_URL,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize NOAA CO-OPS tide fetcher

        Args:
            base_url: CO-OPS datagetter endpoint
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client (used as-is, not closed)
        """
        self.base_url = base_url
        self.timeout = timeout
        self.client = client

    def fetch_tide_predictions(
        self,
        station_id: str,
        begin_date: datetime,
        end_date: datetime,
        datum: str = "MLLW",
        interval: str = "h",
        units: str = "english",
    ) -> Dict:
        """Fetch tide predictions for a station

        Args:
            station_id: NOAA station ID (e.g., "9414290" for San Francisco)
            begin_date: Start of the window (station local time)
            end_date: End of the window (station local time)
            datum: Tidal datum (MLLW, MSL, MTL, etc.)
            interval: 'hilo' for high/low only, 'h' for hourly, or '6' for 6-minute
            units: 'metric' or 'english' (feet)

        Returns:
            Decoded JSON with a "predictions" list of {"t": ..., "v": ...}

        Raises:
            ParseError: If the body is not JSON
        """
        logger.info(f"Fetching tide predictions for station {station_id}")

        params = {
            "station": station_id,
            "begin_date": begin_date.strftime("%Y%m%d %H:%M"),
            "end_date": end_date.strftime("%Y%m%d %H:%M"),
            "product": "predictions",
            "datum": datum,
            "interval": interval,
            "units": units,
            "time_zone": "lst_ldt",
            "application": "surf_log",
            "format": "json",
        }

        response = http_get(self.base_url, params=params, timeout=self.timeout, client=self.client)
        return decode_json(response, "tide prediction")

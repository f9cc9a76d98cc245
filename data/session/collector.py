"""
Session Conditions Collector

Fetches tide, wind and wave data for one session window, one request each in
sequence, and normalizes every payload into an observation record.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from data.pipelines.buoy import BuoyXMLFetcher, extract_waves
from data.pipelines.config import StationProfile
from data.pipelines.noaa import NOAATideFetcher, extract_tide
from data.pipelines.observations import ExtractionError, Observation, ObservationRecord
from data.pipelines.wind import WindFetcher, extract_wind
from data.session.window import SessionWindow

logger = logging.getLogger(__name__)


@dataclass
class SessionConditions:
    """Normalized conditions for one session"""
    tide: ObservationRecord = field(default_factory=list)
    wind: ObservationRecord = field(default_factory=list)
    waves: ObservationRecord = field(default_factory=list)

    def observations(self) -> List[Observation]:
        """All observations in tide, wind, wave order"""
        return [*self.tide, *self.wind, *self.waves]


def _extract(section: str, fetch: Callable, extractor: Callable, tolerate_missing: bool) -> ObservationRecord:
    """Fetch and normalize one section; decoding errors count as extraction errors"""
    try:
        record = extractor(fetch())
    except ExtractionError as e:
        if not tolerate_missing:
            raise
        logger.warning(f"Skipping {section} data: {e}")
        return []
    logger.info(f"Extracted {len(record)} {section} observations")
    return record


def collect_conditions(
    window: SessionWindow,
    profile: StationProfile,
    tide_fetcher: NOAATideFetcher,
    wind_fetcher: WindFetcher,
    buoy_fetcher: BuoyXMLFetcher,
    tolerate_missing: bool = False,
) -> SessionConditions:
    """Fetch and normalize conditions for a session

    Args:
        window: Session start/end
        profile: Stations to query
        tide_fetcher: Tide prediction source
        wind_fetcher: Wind observation source
        buoy_fetcher: Wave observation source
        tolerate_missing: Replace a section that fails extraction with an
            empty record instead of raising

    Returns:
        SessionConditions with the three records

    Raises:
        ExtractionError: If a payload cannot be normalized and
            tolerate_missing is False
    """
    logger.info(f"Collecting conditions for {window.start:%Y-%m-%d %H:%M} - {window.end:%H:%M}")

    tide = _extract(
        "tide",
        lambda: tide_fetcher.fetch_tide_predictions(profile.tide_station, window.start, window.end),
        extract_tide,
        tolerate_missing,
    )
    wind = _extract(
        "wind",
        lambda: wind_fetcher.fetch_wind_observations(profile.wind_station, window.start, window.end),
        extract_wind,
        tolerate_missing,
    )
    waves = _extract(
        "wave",
        lambda: buoy_fetcher.fetch_observation_document(profile.wave_station),
        extract_waves,
        tolerate_missing,
    )

    return SessionConditions(tide=tide, wind=wind, waves=waves)

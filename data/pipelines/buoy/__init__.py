"""Buoy wave observations

Example usage:
    from data.pipelines.buoy import BuoyXMLFetcher, extract_waves

    fetcher = BuoyXMLFetcher(base_url)
    root = fetcher.fetch_observation_document("46237")
    record = extract_waves(root)
"""

from .parser import WAVE_MEASUREMENTS, extract_waves, parse_wave_document
from .fetcher import BuoyXMLFetcher

__all__ = [
    "BuoyXMLFetcher",
    "WAVE_MEASUREMENTS",
    "extract_waves",
    "parse_wave_document",
]

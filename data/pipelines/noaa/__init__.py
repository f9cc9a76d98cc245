"""NOAA tide data fetching and parsing

Example usage:
    from data.pipelines.noaa import NOAATideFetcher, extract_tide

    fetcher = NOAATideFetcher()
    raw = fetcher.fetch_tide_predictions("9414290", begin, end)
    record = extract_tide(raw)
"""

from .fetcher import COOPS_DATAGETTER_URL, NOAATideFetcher
from .parser import extract_tide

__all__ = [
    "COOPS_DATAGETTER_URL",
    "NOAATideFetcher",
    "extract_tide",
]

"""
Wind Observation Pipeline

Wind station fetcher and parser for session logs.
"""

from .fetcher import WindFetcher
from .parser import extract_wind

__all__ = [
    "WindFetcher",
    "extract_wind",
]

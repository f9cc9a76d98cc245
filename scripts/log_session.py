#!/usr/bin/env python3
"""
Capture tide, wind and wave conditions for a surf session as a note entry.

Usage:
    # Prompt for the date and times
    python scripts/log_session.py

    # Non-interactive
    python scripts/log_session.py --date 2026-10-17 --start 07:00 --end 09:15

    # Append to a notes file, keep going if one source has no data
    python scripts/log_session.py --date 2026-10-17 --start 07:00 --end 09:15 \
        --output ~/notes/surf.org --tolerate-missing

Stations and endpoints are read from SURFLOG_* environment variables or .env
(see data/pipelines/config.py).
"""

import argparse
import logging
import sys
from pathlib import Path

import httpx
from pydantic import ValidationError

# Add project root and shared package to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "packages" / "python" / "common"))

from data.pipelines.buoy import BuoyXMLFetcher
from data.pipelines.config import Settings, get_settings
from data.pipelines.noaa import NOAATideFetcher
from data.pipelines.observations import ExtractionError
from data.pipelines.wind import WindFetcher
from data.session import SessionWindow, collect_conditions, render_session

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Capture tide, wind and wave conditions for a surf session',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Prompt for everything
  python scripts/log_session.py

  # Morning session, override the buoy
  python scripts/log_session.py --date 2026-10-17 --start 06:45 --end 08:30 --wave-station 46253
        """
    )
    parser.add_argument('--date', type=str, help='Session date (YYYY-MM-DD)')
    parser.add_argument('--start', type=str, help='Session start time (HH:MM)')
    parser.add_argument('--end', type=str, help='Session end time (HH:MM)')
    parser.add_argument('--tide-station', type=str, help='NOAA CO-OPS tide station ID')
    parser.add_argument('--wind-station', type=str, help='Wind station ID')
    parser.add_argument('--wave-station', type=str, help='Wave buoy station ID')
    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Append the entry to this file instead of printing it'
    )
    parser.add_argument(
        '--tolerate-missing',
        action='store_true',
        help='Leave out a section whose data is missing instead of failing'
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser.parse_args(argv)


def prompt(label: str, value):
    """Return value, asking on stdin when it was not given"""
    if value:
        return value
    return input(f"{label}: ")


def build_fetchers(settings: Settings):
    """Create the three fetchers from configured endpoints"""
    return (
        NOAATideFetcher(base_url=settings.tide_base_url, timeout=settings.request_timeout),
        WindFetcher(base_url=settings.wind_base_url, timeout=settings.request_timeout),
        BuoyXMLFetcher(base_url=settings.wave_base_url, timeout=settings.request_timeout),
    )


def main(argv=None) -> int:
    """Collect conditions and write the session entry."""
    args = parse_args(argv)

    overrides = {
        'tide_station': args.tide_station,
        'wind_station': args.wind_station,
        'wave_station': args.wave_station,
    }

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = get_settings(**{k: v for k, v in overrides.items() if v})
        if not args.verbose:
            logging.getLogger().setLevel(settings.log_level.upper())
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    missing = settings.missing_fields()
    if missing:
        logger.error(f"Missing configuration: {', '.join(missing)}")
        return 1

    try:
        window = SessionWindow.parse(
            prompt("Date (YYYY-MM-DD)", args.date),
            prompt("Start (HH:MM)", args.start),
            prompt("End (HH:MM)", args.end),
        )
    except EOFError:
        logger.error("No session time given")
        return 1
    except ValueError as e:
        logger.error(f"Invalid session time: {e}")
        return 1

    tide_fetcher, wind_fetcher, buoy_fetcher = build_fetchers(settings)
    try:
        conditions = collect_conditions(
            window,
            settings.station_profile(),
            tide_fetcher,
            wind_fetcher,
            buoy_fetcher,
            tolerate_missing=args.tolerate_missing,
        )
    except ExtractionError as e:
        logger.error(f"Could not normalize conditions: {e}")
        return 1
    except httpx.HTTPError as e:
        logger.error(f"Request failed: {e}")
        return 1

    entry = render_session(window, conditions)
    if args.output:
        output = args.output.expanduser()
        try:
            with open(output, 'a', encoding='utf-8') as f:
                f.write(entry)
        except OSError as e:
            logger.error(f"Could not write {output}: {e}")
            return 1
        logger.info(f"Appended session entry to {output}")
    else:
        sys.stdout.write(entry)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Station and endpoint configuration

Values come from the environment (prefixed ``SURFLOG_``) or a local ``.env``
file. Station identifiers are handed to the fetchers explicitly through a
StationProfile rather than read from module state.
"""

from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

from data.pipelines.noaa.fetcher import COOPS_DATAGETTER_URL


@dataclass(frozen=True)
class StationProfile:
    """Which upstream stations to query for one session"""
    tide_station: str
    wind_station: str
    wave_station: str


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="SURFLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Stations
    tide_station: str = ""
    wind_station: str = ""
    wave_station: str = ""

    # Endpoints
    tide_base_url: str = COOPS_DATAGETTER_URL
    wind_base_url: str = ""
    wave_base_url: str = ""

    # HTTP
    request_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"

    def station_profile(self) -> StationProfile:
        """Build the station profile from the configured identifiers"""
        return StationProfile(
            tide_station=self.tide_station,
            wind_station=self.wind_station,
            wave_station=self.wave_station,
        )

    def missing_fields(self) -> list:
        """Names of settings that must be set before fetching"""
        required = [
            "tide_station", "wind_station", "wave_station",
            "tide_base_url", "wind_base_url", "wave_base_url",
        ]
        return [name for name in required if not getattr(self, name)]


def get_settings(**overrides) -> Settings:
    """Load settings from the environment, applying explicit overrides"""
    return Settings(**overrides)

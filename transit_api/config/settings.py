# path: transit-api/transit_api/config/settings.py

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Base directory for the project
BASE_DIR = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings, read from ``TRANSIT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRANSIT_",
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
    )

    app_name: str = "transit-api"

    # JSON document with stops/buses/sections/routes/rides to seed the network
    network_file: Optional[Path] = None

    # Behaviour switches
    validate_coordinates: bool = True
    dedupe_route_endpoints: bool = False
    strict_ride_transitions: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    log_file: Optional[Path] = None


@lru_cache()
def get_settings() -> Settings:
    return Settings()

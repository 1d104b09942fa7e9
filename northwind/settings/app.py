# northwind/settings/app.py
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from northwind.settings.sections.database import DatabaseSettings
from northwind.settings.sections.logging import LoggingSettings


class AppSettings(BaseModel):
    """
    Application settings aggregator.
    Each section reads its own environment prefix.
    """

    model_config = ConfigDict(extra="ignore")

    database: DatabaseSettings
    logging: LoggingSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(
        database=DatabaseSettings(),
        logging=LoggingSettings(),
    )

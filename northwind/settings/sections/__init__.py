from northwind.settings.sections.database import DatabaseSettings
from northwind.settings.sections.logging import LoggingSettings

__all__ = ["DatabaseSettings", "LoggingSettings"]

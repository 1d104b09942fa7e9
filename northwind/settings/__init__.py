# Settings package
from northwind.settings.app import AppSettings, get_app_settings
from northwind.settings.sections import DatabaseSettings, LoggingSettings

__all__ = ["get_app_settings", "AppSettings", "DatabaseSettings", "LoggingSettings"]

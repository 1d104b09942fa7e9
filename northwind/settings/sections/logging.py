from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """
    Settings for log output.
    Loaded automatically from .env with prefix NORTHWIND_LOG_*
    """

    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NORTHWIND_LOG_",
        "extra": "ignore",
    }

"""
Centralized configuration for order analytics
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Settings read from the environment and .env (logging, money display, input file)"""

    APP_NAME: str = "Order Analytics"
    LOG_LEVEL: str = "INFO"

    # Money is always summed exactly; this only affects rounded report output
    MONEY_DECIMAL_PLACES: int = 2

    # Default JSON file for the report script (falls back to sample data)
    ORDERS_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


settings = Settings()

# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Group related settings together; calculator defaults live in their own section.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "unit-payment-estimator"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173"]

    # -- Calculator defaults --
    DEFAULT_TAX_RATE: float = Field(
        default=0.0125,
        description="Fallback property tax rate (fraction) for units without their own rate.",
    )
    DEFAULT_DOWN_PAYMENT_PERCENT: float = 20.0
    DEFAULT_INTEREST_RATE: float = Field(
        default=7.5,
        description="Annual interest rate in percent.",
    )
    DEFAULT_LOAN_TERM_YEARS: int = 30
    DEFAULT_INSURANCE_YEARLY: float = 1200.0
    LOAN_TERM_OPTIONS: list[int] = [15, 20, 30]
    DEFAULT_UNIT_PRICE: float | None = Field(
        default=700000.0,
        description="Price of the unit a new session starts with. None starts with no unit.",
    )


settings = Settings()

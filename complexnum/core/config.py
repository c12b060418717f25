"""
Library configuration.

Centralized configuration management with environment variables
(prefix ``COMPLEXNUM_``) and an optional ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="COMPLEXNUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text

    # Formatting: significant digits per component, like a default C++ ostream
    FORMAT_PRECISION: int = 6

    # Division by the zero complex number: "ieee" yields inf/nan, "raise" errors
    ZERO_DIVISION: Literal["ieee", "raise"] = "ieee"

    # Fuzzy comparison defaults used by ComplexNumber.compare()
    DEFAULT_TOLERANCE: float = 0.001
    DEFAULT_TOLERANCE_MODE: Literal["relative", "absolute", "sigfigs"] = "relative"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()

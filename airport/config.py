"""Environment-driven settings for the airport simulation.

Covers the weather (storm threshold, random seed) and logging output.
Values come from environment variables or a .env file and are validated
by pydantic before any component is built.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Weather and logging settings.

    Field names map case-insensitively to environment variables, e.g.
    STORM_THRESHOLD and RANDOM_SEED.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Weather configuration
    storm_threshold: float = Field(
        default=0.5,
        description="Samples strictly above this value are stormy",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the weather's random source (unseeded if unset)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("storm_threshold")
    @classmethod
    def validate_storm_threshold(cls, v: float) -> float:
        """Ensure the storm threshold is a probability."""
        if not 0 <= v <= 1:
            raise ValueError("storm_threshold must be between 0 and 1")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]

"""Composition root for the airport simulation.

This module is the only place that reads configuration and wires the
core components together.
"""

import logging
import sys

from airport.config import Settings, load_settings
from airport.core.airport import Airport
from airport.core.ports import WeatherPort
from airport.core.randomness import PseudoRandomSource
from airport.core.weather import Weather

LOG_FORMATS = {
    "text": "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    "json": (
        '{"ts": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "msg": "%(message)s"}'
    ),
}


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMATS.get(log_format, LOG_FORMATS["text"]),
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_weather(settings: Settings) -> Weather:
    """Create the weather from configured threshold and seed."""
    return Weather(
        random_source=PseudoRandomSource(settings.random_seed),
        threshold=settings.storm_threshold,
    )


def build_airport(settings: Settings, weather: WeatherPort | None = None) -> Airport:
    """Create an airport, building its weather from settings if none is given."""
    if weather is None:
        weather = build_weather(settings)
    return Airport(weather=weather)


def bootstrap(settings: Settings | None = None) -> Airport:
    """Load configuration, configure logging and return a wired airport.

    Args:
        settings: Pre-loaded settings. Loaded from the environment if None.

    Returns:
        An Airport whose weather uses the configured threshold and seed.

    Raises:
        ValidationError: If settings are loaded here and fail validation.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    airport = build_airport(settings)
    seed = settings.random_seed if settings.random_seed is not None else "unseeded"
    logger.info(
        f"Airport ready: storm threshold {settings.storm_threshold}, seed {seed}"
    )
    return airport

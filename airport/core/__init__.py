"""Core domain logic for the airport simulation.

This package depends on the Python standard library only. Configuration
and wiring live in airport.config and airport.main.
"""

from .airport import Airport, ResidentView
from .models import Manoeuvre, StormError
from .plane import Plane
from .ports import AirportPort, RandomSourcePort, WeatherPort
from .randomness import PseudoRandomSource
from .weather import DEFAULT_STORM_THRESHOLD, Weather

__all__ = [
    "DEFAULT_STORM_THRESHOLD",
    "Airport",
    "AirportPort",
    "Manoeuvre",
    "Plane",
    "PseudoRandomSource",
    "RandomSourcePort",
    "ResidentView",
    "StormError",
    "Weather",
    "WeatherPort",
]

"""Fake implementations of core ports for testing.

These in-memory implementations let each component be tested without
its real collaborators:

- FakeRandomSource: Scripted random samples
- FakeWeatherPort: Fixed storm answers with call counting
- FakeAirportPort: Captured clearance requests, optionally stormy
"""

from .airport import FakeAirportPort
from .random_source import FakeRandomSource
from .weather import FakeWeatherPort

__all__ = [
    "FakeAirportPort",
    "FakeRandomSource",
    "FakeWeatherPort",
]

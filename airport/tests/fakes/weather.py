"""Fake WeatherPort implementation for testing."""

from airport.core.ports import WeatherPort


class FakeWeatherPort(WeatherPort):
    """Weather with a fixed, configurable answer.

    Counts queries so tests can assert each gate asks exactly once.
    """

    def __init__(self, stormy: bool = False) -> None:
        self.stormy = stormy
        self.is_stormy_call_count = 0

    def set_stormy(self, stormy: bool) -> None:
        """Configure the answer for subsequent queries."""
        self.stormy = stormy

    def is_stormy(self) -> bool:
        self.is_stormy_call_count += 1
        return self.stormy

    def reset(self) -> None:
        """Return to calm weather and clear the call count."""
        self.stormy = False
        self.is_stormy_call_count = 0

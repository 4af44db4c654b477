"""Port interfaces for the airport simulation.

These abstract base classes define the seams between collaborating
components, so each one can be exercised against a fake of the others.

Port Interface Categories:

1. **RandomSourcePort**: uniform samples consumed by the weather
2. **WeatherPort**: storminess signal consumed by airports
3. **AirportPort**: landing/take-off clearance consumed by planes
"""

from abc import ABC, abstractmethod
from typing import Any


class RandomSourcePort(ABC):
    """Port for drawing uniform random samples."""

    @abstractmethod
    def random(self) -> float:
        """Draw the next sample.

        Returns:
            A float in the half-open interval [0, 1).
        """


class WeatherPort(ABC):
    """Port for querying current weather conditions.

    Each query is independent; implementations may return different
    answers on consecutive calls.
    """

    @abstractmethod
    def is_stormy(self) -> bool:
        """Report whether it is stormy right now.

        Returns:
            True if conditions are stormy, False otherwise.
        """


class AirportPort(ABC):
    """Port for requesting landing and take-off clearance.

    Implementations decide whether the manoeuvre may proceed and record
    the resulting change in residency.
    """

    @abstractmethod
    def clear_for_landing(self, plane: Any) -> None:
        """Admit a plane as a resident of the airport.

        Args:
            plane: The plane requesting to land.

        Raises:
            StormError: If the weather forbids landing. No state changes.
        """

    @abstractmethod
    def clear_for_takeoff(self, plane: Any) -> None:
        """Release the airport's residents for take-off.

        Args:
            plane: The plane requesting to take off.

        Raises:
            StormError: If the weather forbids take-off. No state changes.
        """

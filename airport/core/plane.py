"""Plane location tracking."""

import logging

from .ports import AirportPort

logger = logging.getLogger(__name__)


class Plane:
    """Requests clearance from airports and remembers where it landed.

    The plane holds a non-owning reference to its current airport; it is
    None before the first landing and after a successful take-off.
    """

    def __init__(self) -> None:
        self._location: AirportPort | None = None

    @property
    def location(self) -> AirportPort | None:
        return self._location

    def land(self, airport: AirportPort) -> None:
        """Land at an airport.

        StormError from the airport propagates and the location is kept.
        """
        logger.debug(f"{self!r} requesting landing at {airport!r}")
        airport.clear_for_landing(self)
        self._location = airport

    def takeoff(self) -> None:
        """Take off from the airport the plane last landed at.

        Raises:
            ValueError: If the plane is not at an airport.
            StormError: If the airport refuses; the plane stays resident.
        """
        if self._location is None:
            raise ValueError("plane is not at an airport")

        logger.debug(f"{self!r} requesting take-off from {self._location!r}")
        self._location.clear_for_takeoff(self)
        self._location = None

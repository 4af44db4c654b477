"""Airport residency and weather-gated clearance.

The airport owns the ordered list of planes currently on the ground and
consults its weather collaborator once per clearance request.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from .models import Manoeuvre, StormError
from .ports import AirportPort, WeatherPort
from .weather import Weather

logger = logging.getLogger(__name__)


class ResidentView(Sequence):
    """Read-only, live view over an airport's resident planes.

    The view shares the airport's underlying list, so later landings and
    take-offs are visible through it. Compares equal to any sequence with
    the same planes in the same order.
    """

    def __init__(self, residents: list[Any]):
        self._residents = residents

    def __getitem__(self, index):
        return self._residents[index]

    def __len__(self) -> int:
        return len(self._residents)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._residents)

    def __contains__(self, plane: object) -> bool:
        return plane in self._residents

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return list(self._residents) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ResidentView({self._residents!r})"


class Airport(AirportPort):
    """Holds resident planes and gates landing/take-off on the weather.

    Take-off clearance empties the whole resident list, not only the
    requesting plane.
    """

    def __init__(self, weather: WeatherPort | None = None):
        self.weather = weather if weather is not None else Weather()
        self._residents: list[Any] = []

    def planes(self) -> ResidentView:
        """Return a live, read-only view of the resident planes."""
        return ResidentView(self._residents)

    def clear_for_landing(self, plane: Any) -> None:
        """Admit a plane unless it is stormy.

        Raises:
            StormError: "cannot land during storm"; residents unchanged.
        """
        if self.weather.is_stormy():
            logger.warning(f"Landing refused for {plane!r}: storm")
            raise StormError(Manoeuvre.LAND)

        self._residents.append(plane)
        logger.info(
            f"Landing cleared for {plane!r} ({len(self._residents)} resident)"
        )

    def clear_for_takeoff(self, plane: Any) -> None:
        """Release every resident plane unless it is stormy.

        Raises:
            StormError: "cannot takeoff during storm"; residents unchanged.
        """
        if self.weather.is_stormy():
            logger.warning(f"Take-off refused for {plane!r}: storm")
            raise StormError(Manoeuvre.TAKEOFF)

        released = len(self._residents)
        self._residents.clear()
        logger.info(
            f"Take-off cleared for {plane!r} ({released} released)"
        )

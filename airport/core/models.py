"""Domain types shared by the airport, plane and weather components."""

from enum import Enum


class Manoeuvre(Enum):
    """Operations an airport gates on the weather."""

    LAND = "land"
    TAKEOFF = "takeoff"


class StormError(Exception):
    """Raised when an airport refuses a manoeuvre because of a storm.

    The message names the refused manoeuvre, e.g.
    "cannot land during storm" or "cannot takeoff during storm".
    """

    def __init__(self, manoeuvre: Manoeuvre):
        self.manoeuvre = manoeuvre
        super().__init__(f"cannot {manoeuvre.value} during storm")

"""Unit tests for domain types."""

import pytest

from airport.core.models import Manoeuvre, StormError


def test_landing_storm_message() -> None:
    assert str(StormError(Manoeuvre.LAND)) == "cannot land during storm"


def test_takeoff_storm_message() -> None:
    assert str(StormError(Manoeuvre.TAKEOFF)) == "cannot takeoff during storm"


def test_storm_error_carries_manoeuvre() -> None:
    error = StormError(Manoeuvre.TAKEOFF)
    assert error.manoeuvre is Manoeuvre.TAKEOFF


def test_storm_error_is_an_exception() -> None:
    with pytest.raises(Exception):
        raise StormError(Manoeuvre.LAND)

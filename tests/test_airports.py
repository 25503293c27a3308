"""Mini README: Tests for the airport lookup table."""

from __future__ import annotations

import pytest

from skyroute.airports import Airport, AirportCatalogue
from skyroute.errors import InvalidArgumentError
from skyroute.geometry import Coordinate


def test_default_catalogue_resolves_case_insensitively() -> None:
    catalogue = AirportCatalogue.default()

    airport = catalogue.resolve(" sin ")

    assert airport is not None
    assert airport.name == "Singapore"
    assert airport.coordinate == Coordinate(1.3521, 103.8198)
    assert "lax" in catalogue
    assert len(catalogue) == 5


def test_unknown_code_resolves_to_none() -> None:
    catalogue = AirportCatalogue.default()

    assert catalogue.resolve("ZZZ") is None
    assert catalogue.resolve(None) is None  # type: ignore[arg-type]


def test_airport_validation() -> None:
    with pytest.raises(InvalidArgumentError):
        Airport("BAD", "Bad fare", Coordinate(0, 0), price=-1)
    with pytest.raises(InvalidArgumentError):
        AirportCatalogue(
            [
                Airport("AAA", "First", Coordinate(0, 0)),
                Airport("aaa", "Second", Coordinate(1, 1)),
            ]
        )


def test_airport_as_dict_uses_lat_lon_pairs() -> None:
    airport = Airport("dxb", "Dubai", Coordinate(25.276987, 55.296249), 600)

    assert airport.as_dict() == {
        "code": "DXB",
        "name": "Dubai",
        "coordinate": [25.276987, 55.296249],
        "price": 600,
    }

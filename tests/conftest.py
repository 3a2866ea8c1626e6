"""Shared fixtures for route_boxer tests."""

import pytest

from route_boxer import LatLng


@pytest.fixture
def reference_route():
    """Bratislava -> Kosice style route used as the regression scenario."""
    return [
        (48.167, 17.104),
        (48.399, 17.586),
        (48.908, 18.049),
        (49.22253, 18.734436),
        (48.728115, 21.255798),
    ]


@pytest.fixture
def reference_latlngs(reference_route):
    return [LatLng(lat, lng) for lat, lng in reference_route]

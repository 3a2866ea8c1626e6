# Route boxing: cover the corridor around a lat/lng polyline with a small
# set of lat/lng rectangles. Re-exports the public API.

from .boxer import RouteBoxer, RouteBoxes, box_route, box_route_detailed
from .errors import (
    DegenerateSegmentError,
    EmptyBoundsError,
    EmptyRouteError,
    GridTooLargeError,
    GridWrapError,
    InvalidPointError,
    InvalidRangeError,
    LatitudeOutOfRangeError,
    RouteBoxerError,
)
from .ingest import to_latlngs
from .models import LatLng, LatLngBounds

__version__ = "0.1.0"

__all__ = [
    "RouteBoxer",
    "RouteBoxes",
    "box_route",
    "box_route_detailed",
    "to_latlngs",
    "LatLng",
    "LatLngBounds",
    "RouteBoxerError",
    "EmptyRouteError",
    "InvalidRangeError",
    "InvalidPointError",
    "LatitudeOutOfRangeError",
    "DegenerateSegmentError",
    "GridWrapError",
    "GridTooLargeError",
    "EmptyBoundsError",
]

# models.py
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import EARTH_RADIUS_KM
from .errors import EmptyBoundsError
from .geometry import lng_span, normalize_lng, rhumb_bearing, rhumb_destination


# region Coordinate
@dataclass(frozen=True)
class LatLng:
    # Equality is exact float equality of both fields
    lat: float
    lng: float

    def rhumb_destination_point(self, bearing: float, distance: float, R: float = EARTH_RADIUS_KM) -> "LatLng":
        lat, lng = rhumb_destination(self.lat, self.lng, bearing, distance, R)
        return LatLng(lat, lng)

    def rhumb_bearing_to(self, dest: "LatLng") -> float:
        return rhumb_bearing(self.lat, self.lng, dest.lat, dest.lng)

    def equals(self, other: "LatLng") -> bool:
        return self == other

    def to_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lng)
# endregion


# region Rectangle
@dataclass
class LatLngBounds:
    """
    Axis-aligned lat/lng rectangle. When the south-west longitude is greater
    than the north-east longitude the rectangle crosses the antimeridian.
    """
    south_west: Optional[LatLng] = None
    north_east: Optional[LatLng] = None

    @classmethod
    def from_tuple(cls, box: Tuple[float, float, float, float]) -> "LatLngBounds":
        south, west, north, east = box
        return cls(LatLng(float(south), float(west)), LatLng(float(north), float(east)))

    # region Accessors
    def _corners(self) -> Tuple[LatLng, LatLng]:
        if self.south_west is None or self.north_east is None:
            raise EmptyBoundsError("bounds have no corners yet")
        return self.south_west, self.north_east

    @property
    def south(self) -> float:
        return self._corners()[0].lat

    @property
    def west(self) -> float:
        return self._corners()[0].lng

    @property
    def north(self) -> float:
        return self._corners()[1].lat

    @property
    def east(self) -> float:
        return self._corners()[1].lng

    def is_empty(self) -> bool:
        return self.south_west is None or self.north_east is None

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.south, self.west, self.north, self.east)
    # endregion

    # region Longitude Logic
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east

    def contains_lng(self, lng: float) -> bool:
        if self.crosses_antimeridian():
            return lng <= self.east or lng >= self.west
        return self.west <= lng <= self.east
    # endregion

    def contains(self, point: LatLng) -> bool:
        if self.south > point.lat or point.lat > self.north:
            return False
        return self.contains_lng(point.lng)

    def extend(self, point: LatLng) -> "LatLngBounds":
        if self.is_empty():
            self.south_west = self.north_east = point
            return self

        new_south = min(self.south, point.lat)
        new_north = max(self.north, point.lat)
        new_west, new_east = self.west, self.east

        if not self.contains_lng(point.lng):
            # take whichever direction leaves the smaller longitudinal span
            extend_east_span = lng_span(new_west, point.lng)
            extend_west_span = lng_span(point.lng, new_east)
            if extend_east_span <= extend_west_span:
                new_east = point.lng
            else:
                new_west = point.lng

        self.south_west = LatLng(new_south, new_west)
        self.north_east = LatLng(new_north, new_east)
        return self

    def union(self, other: "LatLngBounds") -> "LatLngBounds":
        if other.is_empty():
            return self
        self.extend(other.south_west)
        self.extend(other.north_east)
        return self

    def intersects(self, other: "LatLngBounds") -> bool:
        if self.is_empty() or other.is_empty():
            return False
        if self.north < other.south or other.north < self.south:
            return False
        # two longitude intervals overlap iff one contains the other's west edge
        return self.contains_lng(other.west) or other.contains_lng(self.west)

    def equals(self, other: "LatLngBounds") -> bool:
        return self.south_west == other.south_west and self.north_east == other.north_east

    def get_center(self) -> LatLng:
        if self.crosses_antimeridian():
            span = lng_span(self.west, self.east)
            lng = normalize_lng(self.west + span / 2)
        else:
            lng = (self.west + self.east) / 2
        return LatLng((self.south + self.north) / 2, lng)

    def to_span(self) -> LatLng:
        """Latitude/longitude extent, returned as a LatLng-shaped delta."""
        return LatLng(self.north - self.south, lng_span(self.west, self.east))
# endregion

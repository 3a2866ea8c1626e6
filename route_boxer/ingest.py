# region Imports
import math
from collections.abc import Mapping
from typing import Any, Iterable, List
from .errors import InvalidPointError, LatitudeOutOfRangeError
from .models import LatLng
# endregion

# region Point Conversion
def _as_float(value: Any, what: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidPointError(f"{what} must be a number, got {value!r}") from e
    if not math.isfinite(v):
        raise InvalidPointError(f"{what} must be finite, got {value!r}")
    return v


def to_latlng(point: Any) -> LatLng:
    """Accepts a LatLng, a (lat, lng) pair or a {"lat", "lng"/"lon"} mapping."""
    if isinstance(point, LatLng):
        lat, lng = point.lat, point.lng
    elif isinstance(point, Mapping):
        if "lat" not in point or not ("lng" in point or "lon" in point):
            raise InvalidPointError(f"position needs lat and lng/lon keys: {point!r}")
        lat = _as_float(point["lat"], "lat")
        lng = _as_float(point["lng"] if "lng" in point else point["lon"], "lng")
    else:
        try:
            pair = list(point)
        except TypeError as e:
            raise InvalidPointError(f"unsupported point {point!r}") from e
        if len(pair) != 2:
            raise InvalidPointError(f"point must be a (lat, lng) pair: {point!r}")
        lat = _as_float(pair[0], "lat")
        lng = _as_float(pair[1], "lng")

    if not -90.0 <= lat <= 90.0:
        raise LatitudeOutOfRangeError(f"latitude {lat} outside [-90, 90]")
    if isinstance(point, LatLng):
        return point
    return LatLng(lat, lng)


def to_latlngs(points: Iterable[Any]) -> List[LatLng]:
    if isinstance(points, (str, bytes)) or isinstance(points, Mapping):
        raise InvalidPointError("points must be a sequence of coordinates")
    return [to_latlng(p) for p in points]
# endregion

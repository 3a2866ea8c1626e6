# region Imports
import math
from typing import Tuple
from .config import EARTH_RADIUS_KM
from .errors import LatitudeOutOfRangeError
# endregion

# region Longitude Helpers
def normalize_lng(lng: float) -> float:
    """Map a longitude into (-180, 180]; in-range values come back unchanged."""
    if -180.0 < lng <= 180.0:
        return lng
    lng = math.fmod(lng + 180.0, 360.0)
    if lng <= 0.0:
        lng += 360.0
    return lng - 180.0


def unwrap_lng(lng: float, ref: float) -> float:
    """Shift lng by whole turns so it lies in (ref - 180, ref + 180]."""
    if lng - ref > 180.0:
        lng -= 360.0 * math.ceil((lng - ref - 180.0) / 360.0)
    elif lng - ref <= -180.0:
        lng += 360.0 * math.floor((ref - lng + 180.0) / 360.0)
    return lng


def lng_span(west: float, east: float) -> float:
    return east - west if east >= west else east - west + 360.0
# endregion

# region Rhumb Navigation
def rhumb_destination(
    lat: float,
    lng: float,
    bearing_deg: float,
    distance: float,
    R: float = EARTH_RADIUS_KM,
) -> Tuple[float, float]:
    dist = distance / R  # angular distance (rad)
    brng = math.radians(bearing_deg)
    lat1 = math.radians(lat)
    lon1 = math.radians(lng)

    s = math.sin(lat1) * math.cos(dist) + math.cos(lat1) * math.sin(dist) * math.cos(brng)
    lat2 = math.asin(max(-1.0, min(1.0, s)))
    lon2 = lon1 + math.atan2(
        math.sin(brng) * math.sin(dist) * math.cos(lat1),
        math.cos(dist) - math.sin(lat1) * math.sin(lat2),
    )
    lon2 = math.fmod(lon2 + 3 * math.pi, 2 * math.pi) - math.pi

    lat2, lon2 = math.degrees(lat2), math.degrees(lon2)
    if not (math.isfinite(lat2) and math.isfinite(lon2)):
        raise LatitudeOutOfRangeError(
            f"destination from ({lat}, {lng}) at {bearing_deg} deg / {distance} km is not finite"
        )
    # fmod can land exactly on -180 for eastward +pi results
    return lat2, normalize_lng(lon2)


def rhumb_bearing(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Constant compass bearing from point 1 to point 2, degrees in [0, 360)."""
    d_lon = math.radians(lng2 - lng1)
    d_phi = math.log(
        math.tan(math.radians(lat2) / 2 + math.pi / 4)
        / math.tan(math.radians(lat1) / 2 + math.pi / 4)
    )
    if abs(d_lon) > math.pi:
        d_lon = -(2 * math.pi - d_lon) if d_lon > 0 else (2 * math.pi + d_lon)
    return math.fmod(math.degrees(math.atan2(d_lon, d_phi)) + 360.0, 360.0)
# endregion

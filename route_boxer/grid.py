# region Imports
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import EARTH_RADIUS_KM, MAX_GRID_LINES
from .errors import EmptyRouteError, GridTooLargeError, GridWrapError, LatitudeOutOfRangeError
from .geometry import normalize_lng, unwrap_lng
from .models import LatLng, LatLngBounds
# endregion

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


# region Grid Container
@dataclass
class RouteGrid:
    """
    lat_lines / lng_lines: ascending grid lines. Longitudes are unwrapped
    around the route centre so they stay ascending across the antimeridian.
    cells: bool matrix indexed [x, y]; cell (x, y) spans
    lng_lines[x]..lng_lines[x+1] and lat_lines[y]..lat_lines[y+1].
    row_reach: per-row column reach used when marking, or None for the
    plain 3x3 neighbourhood.
    """
    lat_lines: List[float]
    lng_lines: List[float]
    cells: np.ndarray
    center_lng: float
    row_reach: Optional[np.ndarray] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    def marked_count(self) -> int:
        return int(self.cells.sum())

    def local_lng(self, lng: float) -> float:
        return unwrap_lng(lng, self.center_lng)

    # region Cell Lookup
    def cell_coords(self, point: LatLng) -> Cell:
        """Brute-force search over every grid line."""
        lng = self.local_lng(point.lng)
        x = 0
        while x < len(self.lng_lines) and self.lng_lines[x] < lng:
            x += 1
        y = 0
        while y < len(self.lat_lines) and self.lat_lines[y] < point.lat:
            y += 1
        return self._clamp(x - 1, y - 1)

    def cell_coords_from_hint(self, point: LatLng, hint_point: LatLng, hint: Cell) -> Cell:
        """
        Locate a point starting from the known cell of a nearby point and
        walking outwards, instead of scanning the whole axis.
        """
        nx, ny = self.cells.shape
        lng = self.local_lng(point.lng)
        x, y = hint

        if lng > self.local_lng(hint_point.lng):
            while x + 1 < nx and self.lng_lines[x + 1] < lng:
                x += 1
        else:
            while x > 0 and self.lng_lines[x] > lng:
                x -= 1

        if point.lat > hint_point.lat:
            while y + 1 < ny and self.lat_lines[y + 1] < point.lat:
                y += 1
        else:
            while y > 0 and self.lat_lines[y] > point.lat:
                y -= 1

        return self._clamp(x, y)

    def _clamp(self, x: int, y: int) -> Cell:
        nx, ny = self.cells.shape
        return (max(0, min(nx - 1, x)), max(0, min(ny - 1, y)))
    # endregion

    # region Marking
    def mark_cell(self, cell: Cell) -> None:
        """
        Mark a cell and its 8 neighbours, clipped at the grid edge. With a
        row_reach, each neighbouring row is widened to its own column reach.
        """
        x, y = cell
        if self.row_reach is None:
            self.cells[max(0, x - 1):x + 2, max(0, y - 1):y + 2] = True
            return
        for row in range(max(0, y - 1), min(self.cells.shape[1], y + 2)):
            k = int(self.row_reach[row])
            self.cells[max(0, x - k):x + k + 1, row] = True

    def fill_row(self, start_x: int, end_x: int, y: int) -> None:
        step = 1 if start_x < end_x else -1
        for x in range(start_x, end_x + step, step):
            self.mark_cell((x, y))
    # endregion

    def cell_bounds(self, x0: int, y0: int, x1: Optional[int] = None, y1: Optional[int] = None) -> LatLngBounds:
        """Bounds of the inclusive cell range (x0..x1, y0..y1)."""
        x1 = x0 if x1 is None else x1
        y1 = y0 if y1 is None else y1
        south_west = LatLng(self.lat_lines[y0], normalize_lng(self.lng_lines[x0]))
        north_east = LatLng(self.lat_lines[y1 + 1], normalize_lng(self.lng_lines[x1 + 1]))
        return LatLngBounds(south_west, north_east)
# endregion


# region Grid Line Stepping
def _step_lines(center: LatLng, bearing: float, range_km: float, R: float, i: int) -> float:
    p = center.rhumb_destination_point(bearing, range_km * i, R)
    if bearing in (0, 180):
        return p.lat
    return unwrap_lng(p.lng, center.lng)


def _check_growth(lines: List[float], new: float, ascending: bool, axis: str) -> None:
    edge = lines[-1] if ascending else lines[0]
    if (new <= edge) if ascending else (new >= edge):
        if axis == "lat":
            raise LatitudeOutOfRangeError("latitude grid lines stepped over a pole; range too large for this route")
        raise GridWrapError("longitude grid lines wrapped around the globe; range too large for this route")
    if len(lines) >= MAX_GRID_LINES:
        raise GridTooLargeError(f"more than {MAX_GRID_LINES} {axis} grid lines; increase the range")


def _axis_lines(
    center: LatLng,
    center_value: float,
    low_edge: float,
    high_edge: float,
    bearings: Tuple[float, float],
    range_km: float,
    R: float,
    axis: str,
) -> List[float]:
    up, down = bearings
    lines = [center_value, _step_lines(center, up, range_km, R, 1)]
    _check_growth(lines[:1], lines[1], True, axis)

    # Keep one extra line past the first line that reaches the edge
    i = 2
    while lines[i - 2] < high_edge:
        new = _step_lines(center, up, range_km, R, i)
        _check_growth(lines, new, True, axis)
        lines.append(new)
        i += 1

    i = 1
    while lines[1] > low_edge:
        new = _step_lines(center, down, range_km, R, i)
        _check_growth(lines, new, False, axis)
        lines.insert(0, new)
        i += 1
    return lines
# endregion


# region Grid Builder
def route_bounds(vertices: Sequence[LatLng]) -> LatLngBounds:
    bounds = LatLngBounds()
    for v in vertices:
        bounds.extend(v)
    return bounds


def row_reach(
    lat_lines: Sequence[float],
    lng_lines: Sequence[float],
    range_km: float,
    R: float,
) -> np.ndarray:
    """
    Columns a marking must reach on each side so that a row's narrowest
    cells still span range_km east and west. Widths are taken at the
    poleward edge of the row and the narrowest column spacing.
    """
    lats = np.asarray(lat_lines, dtype=float)
    min_dlng = float(np.min(np.diff(np.asarray(lng_lines, dtype=float))))
    poleward = np.maximum(np.abs(lats[:-1]), np.abs(lats[1:]))
    width_km = R * np.radians(min_dlng) * np.cos(np.radians(poleward))
    reach = np.ceil(range_km / np.maximum(width_km, 1e-12))
    return np.clip(reach, 1, len(lng_lines) - 1).astype(int)


def build_grid(
    vertices: Sequence[LatLng],
    range_km: float,
    R: float = EARTH_RADIUS_KM,
    full_coverage: bool = False,
) -> RouteGrid:
    if not vertices:
        raise EmptyRouteError("cannot build a grid for an empty route")

    bounds = route_bounds(vertices)
    center = bounds.get_center()

    lat_lines = _axis_lines(center, center.lat, bounds.south, bounds.north, (0, 180), range_km, R, "lat")
    lng_lines = _axis_lines(
        center,
        center.lng,
        unwrap_lng(bounds.west, center.lng),
        unwrap_lng(bounds.east, center.lng),
        (90, 270),
        range_km,
        R,
        "lng",
    )

    cells = np.zeros((len(lng_lines) - 1, len(lat_lines) - 1), dtype=bool)
    logger.debug(
        "Grid over %s: %d lng lines x %d lat lines (range=%.3f km)",
        bounds.to_tuple(), len(lng_lines), len(lat_lines), range_km,
    )
    reach = None
    if full_coverage:
        reach = row_reach(lat_lines, lng_lines, range_km, R)
        logger.debug("Widened marking: column reach %d..%d", int(reach.min()), int(reach.max()))
    return RouteGrid(
        lat_lines=lat_lines, lng_lines=lng_lines, cells=cells, center_lng=center.lng, row_reach=reach,
    )
# endregion

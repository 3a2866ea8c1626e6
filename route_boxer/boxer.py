# region Imports
import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, List

from .config import DEFAULT_FULL_COVERAGE, EARTH_RADIUS_KM
from .errors import EmptyRouteError, InvalidRangeError
from .grid import RouteGrid, build_grid
from .ingest import to_latlngs
from .intersect import find_intersecting_cells
from .merge import merge_columns_first, merge_rows_first
from .models import LatLngBounds
# endregion

logger = logging.getLogger(__name__)


# region Result
@dataclass
class RouteBoxes:
    boxes: List[LatLngBounds]
    rows_first: List[LatLngBounds]
    cols_first: List[LatLngBounds]
    grid: RouteGrid
# endregion


# region Validation
def _positive(value: Any, name: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidRangeError(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(v) or v <= 0:
        raise InvalidRangeError(f"{name} must be a positive distance in km, got {value!r}")
    return v
# endregion


# region Boxing
def box_route_detailed(
    points: Iterable[Any],
    range_km: float,
    earth_radius: float = EARTH_RADIUS_KM,
    full_coverage: bool = DEFAULT_FULL_COVERAGE,
) -> RouteBoxes:
    """
    Cover every point within range_km of the route with lat/lng boxes.

    Builds a grid of range_km cells over the route, marks the cells the route
    passes through plus their neighbours, and merges them row-first and
    column-first. The cover with fewer boxes wins (row-first on a tie).

    Longitude lines are range_km apart at the centre latitude only, so on
    routes spanning many degrees of latitude the poleward cells are narrower
    than range_km. full_coverage widens the marking in those rows so the
    corridor is covered there too, at the cost of more cells and boxes.
    """
    range_km = _positive(range_km, "range_km")
    R = _positive(earth_radius, "earth_radius")
    vertices = to_latlngs(points)
    if not vertices:
        raise EmptyRouteError("route must contain at least one point")

    grid = build_grid(vertices, range_km, R, full_coverage=bool(full_coverage))
    find_intersecting_cells(grid, vertices, R)

    rows_first = merge_rows_first(grid)
    cols_first = merge_columns_first(grid)
    logger.debug(
        "Marked %d cells; rows-first cover %d boxes, columns-first cover %d boxes",
        grid.marked_count(), len(rows_first), len(cols_first),
    )

    boxes = rows_first if len(rows_first) <= len(cols_first) else cols_first
    logger.info("Boxed %d-point route at %.3f km into %d boxes", len(vertices), range_km, len(boxes))
    return RouteBoxes(boxes=boxes, rows_first=rows_first, cols_first=cols_first, grid=grid)


def box_route(
    points: Iterable[Any],
    range_km: float,
    earth_radius: float = EARTH_RADIUS_KM,
    full_coverage: bool = DEFAULT_FULL_COVERAGE,
) -> List[LatLngBounds]:
    return box_route_detailed(points, range_km, earth_radius, full_coverage).boxes


class RouteBoxer:
    """Keeps only the Earth radius and coverage mode; every box() call works on a fresh grid."""

    def __init__(self, earth_radius: float = EARTH_RADIUS_KM, full_coverage: bool = DEFAULT_FULL_COVERAGE):
        self.earth_radius = _positive(earth_radius, "earth_radius")
        self.full_coverage = full_coverage

    def box(self, points: Iterable[Any], range_km: float) -> List[LatLngBounds]:
        return box_route(points, range_km, self.earth_radius, self.full_coverage)
# endregion

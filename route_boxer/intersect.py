# region Imports
import math
from typing import Sequence
from .config import EARTH_RADIUS_KM, EAST_WEST_TOLERANCE
from .errors import DegenerateSegmentError, EmptyRouteError
from .grid import Cell, RouteGrid
from .models import LatLng
# endregion

# region Route Walk
def find_intersecting_cells(grid: RouteGrid, vertices: Sequence[LatLng], R: float = EARTH_RADIUS_KM) -> None:
    """Mark every cell the route passes through, plus its neighbours."""
    if not vertices:
        raise EmptyRouteError("route has no vertices")

    hint_xy = grid.cell_coords(vertices[0])
    grid.mark_cell(hint_xy)

    for i in range(1, len(vertices)):
        grid_xy = grid.cell_coords_from_hint(vertices[i], vertices[i - 1], hint_xy)
        dx = abs(hint_xy[0] - grid_xy[0])
        dy = abs(hint_xy[1] - grid_xy[1])

        if dx == 0 and dy == 0:
            continue
        if dx + dy == 1:
            # shares an edge with the previous cell
            grid.mark_cell(grid_xy)
        else:
            get_grid_intersects(grid, vertices[i - 1], vertices[i], hint_xy, grid_xy, R)

        hint_xy = grid_xy
# endregion

# region Segment Crossings
def get_grid_intersects(
    grid: RouteGrid,
    start: LatLng,
    end: LatLng,
    start_xy: Cell,
    end_xy: Cell,
    R: float = EARTH_RADIUS_KM,
) -> None:
    """
    Mark the cells a segment crosses between two non-adjacent cells:
    intersect the segment with each latitude line between the two rows,
    then fill each row between the previous crossing column and this one.
    """
    (start_x, start_y), (end_x, end_y) = start_xy, end_xy

    if start_y == end_y:
        grid.fill_row(start_x, end_x, start_y)
        return

    brng = start.rhumb_bearing_to(end)
    hint, hint_xy = start, start_xy

    if end.lat > start.lat:
        for i in range(start_y + 1, end_y + 1):
            edge_point = grid_intersect(start, brng, grid.lat_lines[i], R)
            edge_xy = grid.cell_coords_from_hint(edge_point, hint, hint_xy)
            grid.fill_row(hint_xy[0], edge_xy[0], i - 1)
            hint, hint_xy = edge_point, edge_xy
        grid.fill_row(hint_xy[0], end_x, max(start_y, end_y))
    else:
        for i in range(start_y, end_y, -1):
            edge_point = grid_intersect(start, brng, grid.lat_lines[i], R)
            edge_xy = grid.cell_coords_from_hint(edge_point, hint, hint_xy)
            grid.fill_row(hint_xy[0], edge_xy[0], i)
            hint, hint_xy = edge_point, edge_xy
        grid.fill_row(hint_xy[0], end_x, min(start_y, end_y))


def grid_intersect(start: LatLng, brng: float, grid_line_lat: float, R: float = EARTH_RADIUS_KM) -> LatLng:
    """Point where a segment leaving start on bearing brng meets a latitude line."""
    cos_brng = math.cos(math.radians(brng))
    if abs(cos_brng) < EAST_WEST_TOLERANCE:
        raise DegenerateSegmentError(f"bearing {brng} never crosses latitude {grid_line_lat}")
    d = R * (math.radians(grid_line_lat) - math.radians(start.lat)) / cos_brng
    return start.rhumb_destination_point(brng, d, R)
# endregion

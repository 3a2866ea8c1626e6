import numpy as np
import pytest

from route_boxer import EmptyRouteError, GridTooLargeError, GridWrapError, LatitudeOutOfRangeError, LatLng
from route_boxer.grid import RouteGrid, build_grid, route_bounds, row_reach


def test_single_point_grid_is_well_formed():
    p = LatLng(48.0, 17.0)
    grid = build_grid([p], 10.0)
    assert len(grid.lat_lines) == 3
    assert len(grid.lng_lines) == 3
    assert grid.shape == (2, 2)
    assert grid.lat_lines[1] == p.lat
    assert grid.lng_lines[1] == p.lng
    assert grid.marked_count() == 0


def test_lines_ascend_and_cover_route(reference_latlngs):
    grid = build_grid(reference_latlngs, 10.0)
    b = route_bounds(reference_latlngs)
    assert all(a < c for a, c in zip(grid.lat_lines, grid.lat_lines[1:]))
    assert all(a < c for a, c in zip(grid.lng_lines, grid.lng_lines[1:]))
    # at least one full cell of margin beyond the route on every side
    assert grid.lat_lines[1] <= b.south and grid.lat_lines[-2] >= b.north
    assert grid.lng_lines[1] <= b.west and grid.lng_lines[-2] >= b.east
    assert grid.shape == (len(grid.lng_lines) - 1, len(grid.lat_lines) - 1)


def test_latitude_spacing_matches_range():
    grid = build_grid([LatLng(10.0, 10.0), LatLng(11.0, 11.0)], 10.0)
    steps = np.diff(grid.lat_lines)
    assert steps == pytest.approx(np.full(len(steps), 10.0 / 6371 * 180 / np.pi))


def test_cell_coords_brute_force(reference_latlngs):
    grid = build_grid(reference_latlngs, 10.0)
    for v in reference_latlngs:
        x, y = grid.cell_coords(v)
        assert grid.lng_lines[x] < v.lng <= grid.lng_lines[x + 1]
        assert grid.lat_lines[y] < v.lat <= grid.lat_lines[y + 1]


def test_hinted_lookup_agrees_with_brute_force(reference_latlngs):
    grid = build_grid(reference_latlngs, 10.0)
    rng = np.random.default_rng(7)
    b = route_bounds(reference_latlngs)
    hint_point = reference_latlngs[2]
    hint = grid.cell_coords(hint_point)
    for _ in range(200):
        p = LatLng(float(rng.uniform(b.south, b.north)), float(rng.uniform(b.west, b.east)))
        assert grid.cell_coords_from_hint(p, hint_point, hint) == grid.cell_coords(p)


def test_mark_cell_is_bounds_safe():
    grid = build_grid([LatLng(48.0, 17.0)], 10.0)
    nx, ny = grid.shape
    grid.mark_cell((0, 0))
    grid.mark_cell((nx - 1, ny - 1))
    grid.mark_cell((0, ny - 1))
    assert grid.cells.all()


def test_mark_cell_marks_three_by_three():
    grid = RouteGrid(
        lat_lines=[float(v) for v in range(6)],
        lng_lines=[float(v) for v in range(6)],
        cells=np.zeros((5, 5), dtype=bool),
        center_lng=2.5,
    )
    grid.mark_cell((2, 2))
    assert grid.marked_count() == 9
    assert grid.cells[1:4, 1:4].all()
    grid.mark_cell((4, 0))
    assert grid.marked_count() == 9 + 4 - 1


def test_fill_row_either_direction():
    grid = RouteGrid(
        lat_lines=[float(v) for v in range(6)],
        lng_lines=[float(v) for v in range(9)],
        cells=np.zeros((8, 5), dtype=bool),
        center_lng=4.0,
    )
    grid.fill_row(6, 2, 2)
    assert grid.cells[1:8, 1:4].all()
    assert not grid.cells[0].any()
    assert not grid.cells[:, 0].any() and not grid.cells[:, 4].any()


def test_cell_bounds_spans_range():
    grid = RouteGrid(
        lat_lines=[0.0, 1.0, 2.0],
        lng_lines=[178.0, 179.0, 180.0, 181.0],
        cells=np.zeros((3, 2), dtype=bool),
        center_lng=179.5,
    )
    assert grid.cell_bounds(0, 0).to_tuple() == (0.0, 178.0, 1.0, 179.0)
    wrap = grid.cell_bounds(1, 0, 2, 1)
    assert wrap.to_tuple() == pytest.approx((0.0, 179.0, 2.0, -179.0))
    assert wrap.crosses_antimeridian()


def test_grid_over_antimeridian_stays_ascending():
    route = [LatLng(10.0, 179.9), LatLng(10.2, -179.9)]
    grid = build_grid(route, 10.0)
    assert all(a < c for a, c in zip(grid.lng_lines, grid.lng_lines[1:]))
    x0, _ = grid.cell_coords(route[0])
    x1, _ = grid.cell_coords(route[1])
    assert x1 > x0


def test_empty_route_rejected():
    with pytest.raises(EmptyRouteError):
        build_grid([], 10.0)


def test_stepping_over_pole_rejected():
    with pytest.raises(LatitudeOutOfRangeError):
        build_grid([LatLng(89.95, 0.0), LatLng(89.96, 10.0)], 10.0)


def test_longitude_wrap_rejected():
    with pytest.raises(GridWrapError):
        build_grid([LatLng(0.0, 0.0), LatLng(0.0, 179.0)], 15000.0)


def test_too_many_lines_rejected():
    with pytest.raises(GridTooLargeError):
        build_grid([LatLng(0.0, 0.0), LatLng(1.0, 0.0)], 0.001)


def test_row_reach_grows_poleward():
    route = [LatLng(50.0 + i, 10.0 + 0.015 * i) for i in range(21)]
    assert build_grid(route, 10.0).row_reach is None
    grid = build_grid(route, 10.0, full_coverage=True)
    reach = grid.row_reach
    assert len(reach) == grid.shape[1]
    assert reach[0] == 1
    assert reach[-1] >= 2
    assert all(a <= b for a, b in zip(reach[len(reach) // 2:], reach[len(reach) // 2 + 1:]))


def test_row_reach_matches_cell_width():
    # 1 degree of longitude at 60N on a 6371 km sphere is ~55.6 km
    reach = row_reach([59.0, 60.0, 61.0], [0.0, 1.0, 2.0, 3.0, 4.0, 5.0], 100.0, 6371.0)
    assert list(reach) == [2, 2]
    reach = row_reach([0.0, 1.0], [0.0, 1.0, 2.0], 100.0, 6371.0)
    assert list(reach) == [1]


def test_mark_cell_uses_row_reach():
    grid = RouteGrid(
        lat_lines=[float(v) for v in range(6)],
        lng_lines=[float(v) for v in range(10)],
        cells=np.zeros((9, 5), dtype=bool),
        center_lng=4.5,
        row_reach=np.array([1, 2, 3, 1, 1]),
    )
    grid.mark_cell((4, 1))
    assert grid.marked_count() == 3 + 5 + 7
    assert grid.cells[3:6, 0].all()
    assert grid.cells[2:7, 1].all()
    assert grid.cells[1:8, 2].all()
    assert not grid.cells[:, 3].any()
    grid.mark_cell((0, 2))
    assert grid.cells[0:4, 2].all()
    assert grid.cells[0:2, 3].all() and not grid.cells[2, 3]

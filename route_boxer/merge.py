# region Imports
from dataclasses import dataclass
from typing import List, Optional
from .grid import RouteGrid
from .models import LatLngBounds
# endregion

# region Cell Boxes
@dataclass
class CellBox:
    """Inclusive range of grid cells; x is the longitude axis, y latitude."""
    x0: int
    y0: int
    x1: int
    y1: int

    def to_bounds(self, grid: RouteGrid) -> LatLngBounds:
        return grid.cell_bounds(self.x0, self.y0, self.x1, self.y1)
# endregion

# region Merge Steps
def _merge_vertically(boxes: List[CellBox], box: Optional[CellBox]) -> None:
    """Grow a box spanning the same columns in the row just below, else append."""
    if box is None:
        return
    for other in boxes:
        if other.y1 + 1 == box.y0 and other.x0 == box.x0 and other.x1 == box.x1:
            other.y1 = box.y1
            return
    boxes.append(box)


def _merge_horizontally(boxes: List[CellBox], box: Optional[CellBox]) -> None:
    """Grow a box spanning the same rows in the column just left, else append."""
    if box is None:
        return
    for other in boxes:
        if other.x1 + 1 == box.x0 and other.y0 == box.y0 and other.y1 == box.y1:
            other.x1 = box.x1
            return
    boxes.append(box)
# endregion

# region Cover Passes
def merge_rows_first_cells(grid: RouteGrid) -> List[CellBox]:
    nx, ny = grid.shape
    boxes: List[CellBox] = []
    for y in range(ny):
        current = None
        for x in range(nx):
            if grid.cells[x, y]:
                if current is None:
                    current = CellBox(x, y, x, y)
                else:
                    current.x1 = x
            else:
                _merge_vertically(boxes, current)
                current = None
        _merge_vertically(boxes, current)
    return boxes


def merge_columns_first_cells(grid: RouteGrid) -> List[CellBox]:
    nx, ny = grid.shape
    boxes: List[CellBox] = []
    for x in range(nx):
        current = None
        for y in range(ny):
            if grid.cells[x, y]:
                if current is None:
                    current = CellBox(x, y, x, y)
                else:
                    current.y1 = y
            else:
                _merge_horizontally(boxes, current)
                current = None
        _merge_horizontally(boxes, current)
    return boxes


def merge_rows_first(grid: RouteGrid) -> List[LatLngBounds]:
    """Join marked cells along each row, then stack equal-width runs upwards."""
    return [b.to_bounds(grid) for b in merge_rows_first_cells(grid)]


def merge_columns_first(grid: RouteGrid) -> List[LatLngBounds]:
    """Join marked cells along each column, then join equal-height runs eastwards."""
    return [b.to_bounds(grid) for b in merge_columns_first_cells(grid)]
# endregion

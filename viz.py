# region Imports
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch, Rectangle
from matplotlib.lines import Line2D
from route_boxer.geometry import unwrap_lng
# endregion

# region Visualization Function
def show_route_boxes(
    route,
    result,
    title="Route boxes",
    show_grid=True,
    ax=None,
):
    """
    Render the marked grid cells, the winning boxes and the route itself.
    Longitudes are drawn in the grid's unwrapped frame so routes over the
    antimeridian stay in one piece.
    """
    grid = result.grid
    own_fig = ax is None
    if own_fig:
        fig, ax = plt.subplots(figsize=(9, 7))
    else:
        fig = ax.figure

    lngs = np.asarray(grid.lng_lines)
    lats = np.asarray(grid.lat_lines)

    # region Marked Cells
    ax.pcolormesh(lngs, lats, grid.cells.T.astype(np.float32), cmap="Greys", vmin=0, vmax=3, shading="flat")
    if show_grid:
        ax.vlines(lngs, lats[0], lats[-1], colors="lightgray", linewidth=0.5)
        ax.hlines(lats, lngs[0], lngs[-1], colors="lightgray", linewidth=0.5)
    # endregion

    # region Boxes
    for b in result.boxes:
        west = unwrap_lng(b.west, grid.center_lng)
        east = unwrap_lng(b.east, grid.center_lng)
        if east < west:
            east += 360.0
        ax.add_patch(Rectangle((west, b.south), east - west, b.north - b.south,
                               fill=False, edgecolor="tab:orange", linewidth=1.5))
    # endregion

    # region Route Overlay
    xs = [unwrap_lng(p.lng, grid.center_lng) for p in route]
    ys = [p.lat for p in route]
    ax.plot(xs, ys, color="tab:blue", linewidth=2.0, marker="o", markersize=4)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], color="tab:blue", lw=2, marker="o", label="Route"),
        Patch(facecolor="white", edgecolor="tab:orange", label=f"Boxes ({len(result.boxes)})"),
        Patch(facecolor="darkgray", label="Marked cells"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_title(title)
    ax.set_xlabel("Longitude (deg)")
    ax.set_ylabel("Latitude (deg)")
    ax.set_aspect("auto")
    if own_fig:
        plt.tight_layout()
        plt.show()
    return fig, ax
    # endregion
# endregion

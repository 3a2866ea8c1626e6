# region Imports
from __future__ import annotations
import json
from typing import Any, Dict, List, Optional, Sequence
from route_boxer import LatLngBounds
# endregion

# region Plain JSON
def box_to_dict(box: LatLngBounds) -> Dict[str, float]:
    south, west, north, east = box.to_tuple()
    return {"south": south, "west": west, "north": north, "east": east}


def write_boxes_json(
    boxes: Sequence[LatLngBounds],
    out_path: str = "route_boxes.json",
) -> str:
    """Write boxes as {"boxes": [{south, west, north, east}, ...]}."""
    with open(out_path, "w") as f:
        json.dump({"boxes": [box_to_dict(b) for b in boxes]}, f, indent=2)
    print(f"Wrote {len(boxes)} boxes to {out_path}")
    return out_path
# endregion

# region GeoJSON
def box_ring(box: LatLngBounds) -> List[List[float]]:
    """Closed lon/lat ring; boxes over the antimeridian run east past 180."""
    south, west, north, east = box.to_tuple()
    if box.crosses_antimeridian():
        east += 360.0
    return [[west, south], [east, south], [east, north], [west, north], [west, south]]


def boxes_to_geojson(
    boxes: Sequence[LatLngBounds],
    properties: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    features = []
    for i, b in enumerate(boxes):
        props = {"index": i}
        if properties:
            props.update(properties)
        features.append({
            "type": "Feature",
            "properties": props,
            "geometry": {"type": "Polygon", "coordinates": [box_ring(b)]},
        })
    return {"type": "FeatureCollection", "features": features}


def write_boxes_geojson(
    boxes: Sequence[LatLngBounds],
    out_path: str = "route_boxes.geojson",
    properties: Optional[Dict[str, Any]] = None,
) -> str:
    with open(out_path, "w") as f:
        json.dump(boxes_to_geojson(boxes, properties), f, indent=2)
    print(f"Wrote {len(boxes)} boxes to {out_path}")
    return out_path
# endregion

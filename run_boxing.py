# region Header
"""
run_boxing.py — box the corridor around a route and report the cover

Requires:
  pip install numpy flask
Optional (for --plot):
  pip install matplotlib        # or: pip install ".[plot]"

Examples:
  python run_boxing.py                          # reference route, 10 km
  python run_boxing.py --points route.json --range 5 --geojson boxes.geojson
  python run_boxing.py --plot -v

route.json is either a list of [lat, lng] pairs or {"positions": [{"lat":..,"lon":..}, ...]}.
"""
# endregion

# region Imports
import argparse
import json
import logging
import sys

from route_boxer import RouteBoxerError, box_route_detailed, to_latlngs
from route_boxer.config import DEFAULT_RANGE_KM, EARTH_RADIUS_KM
from route_export import write_boxes_geojson, write_boxes_json
# endregion

REFERENCE_ROUTE = [
    [48.167, 17.104],
    [48.399, 17.586],
    [48.908, 18.049],
    [49.22253, 18.734436],
    [48.728115, 21.255798],
]

# region Input
def load_points(path):
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("positions") or data.get("points") or []
    return data
# endregion

# region CLI
def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Cover a route corridor with lat/lng boxes.")
    ap.add_argument("--points", help="JSON file with the route (default: built-in reference route)")
    ap.add_argument("--range", type=float, default=DEFAULT_RANGE_KM, help="corridor half-width in km")
    ap.add_argument("--radius", type=float, default=EARTH_RADIUS_KM, help="Earth radius in km")
    ap.add_argument("--json", dest="json_out", help="write boxes as plain JSON")
    ap.add_argument("--geojson", dest="geojson_out", help="write boxes as a GeoJSON FeatureCollection")
    ap.add_argument("--full-coverage", action="store_true",
                    help="widen marking where cells are narrower than the range (long north-south routes)")
    ap.add_argument("--plot", action="store_true", help="show the grid and boxes (needs matplotlib)")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        raw = load_points(args.points) if args.points else REFERENCE_ROUTE
        route = to_latlngs(raw)
        result = box_route_detailed(route, args.range, args.radius, args.full_coverage)
    except (OSError, json.JSONDecodeError, RouteBoxerError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"{len(result.boxes)} boxes "
          f"(rows-first {len(result.rows_first)}, columns-first {len(result.cols_first)})")
    for b in result.boxes:
        s, w, n, e = b.to_tuple()
        print(f"  S {s:.6f}  W {w:.6f}  N {n:.6f}  E {e:.6f}")

    if args.json_out:
        write_boxes_json(result.boxes, args.json_out)
    if args.geojson_out:
        write_boxes_geojson(result.boxes, args.geojson_out, {"range_km": args.range})
    if args.plot:
        from viz import show_route_boxes
        show_route_boxes(route, result, title=f"{len(result.boxes)} boxes @ {args.range} km")
    return 0
# endregion


if __name__ == "__main__":
    sys.exit(main())

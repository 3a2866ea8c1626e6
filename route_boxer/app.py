# app.py — Flask API around the route boxer
# deps: pip install flask numpy

from __future__ import annotations
import logging
from typing import Any, Dict, List

from flask import Flask, request, jsonify

from .boxer import box_route_detailed
from .config import API_HOST, API_PORT, DEFAULT_FULL_COVERAGE, DEFAULT_RANGE_KM, EARTH_RADIUS_KM
from .errors import RouteBoxerError
from .models import LatLngBounds

logger = logging.getLogger(__name__)

app = Flask(__name__)

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp

@app.errorhandler(RouteBoxerError)
def _bad_route(e: RouteBoxerError):
    logger.warning("Rejected boxing request: %s", e)
    return jsonify({"error": str(e)}), 400

def _box_json(b: LatLngBounds) -> Dict[str, float]:
    south, west, north, east = b.to_tuple()
    return {"south": south, "west": west, "north": north, "east": east}

# ======= endpoints =======
@app.route("/", methods=["GET"])
def root():
    return {"ok": True, "box": "/routebox/box (POST JSON)", "earth_radius_km": EARTH_RADIUS_KM}

@app.route("/routebox/box", methods=["POST"])
def routebox_box():
    """
    JSON body:
    {
      "positions":[{"lat":..,"lon":..}, ...],  // or "points":[[lat, lng], ...]
      "range_km": 10,
      "earth_radius_km": 6371,                 // optional
      "full_coverage": false                   // optional
    }
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "request body must be a JSON object"}), 400
    pts: List[Any] = data.get("positions")
    if pts is None:
        pts = data.get("points") or []
    if not pts:
        return jsonify({"error": "positions must have at least 1 point"}), 400

    range_km = data.get("range_km", DEFAULT_RANGE_KM)
    radius = data.get("earth_radius_km", EARTH_RADIUS_KM)
    full_coverage = data.get("full_coverage", DEFAULT_FULL_COVERAGE)
    if not isinstance(full_coverage, bool):
        return jsonify({"error": "full_coverage must be true or false"}), 400

    result = box_route_detailed(pts, range_km, radius, full_coverage)

    return jsonify({
        "boxes": [_box_json(b) for b in result.boxes],
        "count": len(result.boxes),
        "rows_first_count": len(result.rows_first),
        "cols_first_count": len(result.cols_first),
        "grid": {
            "lng_lines": [float(v) for v in result.grid.lng_lines],
            "lat_lines": [float(v) for v in result.grid.lat_lines],
        },
    })


if __name__ == "__main__":
    app.run(host=API_HOST, port=API_PORT, threaded=True)

# config.py
EARTH_RADIUS_KM = 6371.0  # Earth mean radius (km)
DEFAULT_RANGE_KM = 10.0

# Hard cap on grid lines per axis
MAX_GRID_LINES = 10_000

# |cos(bearing)| below this is treated as a due east/west segment
EAST_WEST_TOLERANCE = 1e-12

API_HOST = "0.0.0.0"
API_PORT = 8081

# Widen marking in rows whose cells are narrower than the range
DEFAULT_FULL_COVERAGE = False

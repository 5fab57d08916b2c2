"""
todo_gateway/constants.py

Geospatial and validation constants used by the gateway.
Numeric values in business logic must be referenced from this module.
"""

# ── Earth model ──────────────────────────────────────────────
EARTH_RADIUS_M: float = 6_371_000.0  # mean radius, sphere approximation

# ── Coordinate ranges (degrees) ──────────────────────────────
LATITUDE_MIN: float = -90.0
LATITUDE_MAX: float = 90.0
LONGITUDE_MIN: float = -180.0
LONGITUDE_MAX: float = 180.0

# ── Task progress ────────────────────────────────────────────
COMPLETION_PERCENTAGE_MIN: int = 0
COMPLETION_PERCENTAGE_MAX: int = 100

# ── Sample data seeded on startup ────────────────────────────
SAMPLE_HOME_LAT: float = 37.7749
SAMPLE_HOME_LNG: float = -122.4194
SAMPLE_HOME_RADIUS_M: float = 100.0

"""Global constants for coordinate parsing, distance and unit formatting.

Every numeric policy of the calculator lives here so the parser, converter,
distance engine and formatter agree on the same values.

Earth model:
    A sphere with the mean radius, in kilometers and in statute miles. The
    miles radius drives 2D miles directly; 3D miles are derived from
    kilometers with ``MILES_PER_KM``.

Precision:
    Decimal degrees are rendered with 10 places for copy/paste round trips,
    DMS seconds with 5, and every distance is rounded to 6 places when it is
    constructed.

Example:
    >>> from gpscalc.config import EARTH_RADIUS_KM, MAX_ABS_ELEVATION_M
    >>> EARTH_RADIUS_KM
    6371.0
"""

# Spherical Earth
EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MILES = 3959.0
MILES_PER_KM = 0.621371

# Length conversion
METERS_PER_FOOT = 0.3048
METERS_PER_SURVEY_FOOT = 0.30480061

# Coordinate ranges
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Deepest trench to above the highest summit, in meters
MAX_ABS_ELEVATION_M = 11000.0

# Upper bound on points the calculator UI accepts; the engine does not enforce it
MAX_COORDINATES = 8

# Output precision (decimal places)
DECIMAL_PRECISION = 10
DMS_PRECISION = 5
DISTANCE_PRECISION = 6

# Meters per degree of latitude: A - B*cos(2φ) + C*cos(4φ)
METERS_PER_DEGREE_LAT = (111132.92, 559.82, 1.175)
# Meters per degree of longitude: A*cos(φ) - B*cos(3φ)
METERS_PER_DEGREE_LON = (111412.84, 93.5)

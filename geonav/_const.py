"""
Constants declarations for geonav
"""
import sys

# Mean Earth radius (meters), used by all spherical calculations by default
EARTH_RADIUS_METERS = 6_371_000.0

# Name of the pivot datum; every Helmert transform relates a datum to this one
WGS84 = 'WGS84'

# Tolerance (degrees) for near-equality of two points
POINT_EPSILON_DEGREES = 1e-4

# Isometric latitude differences below this are treated as an east-west course
RHUMB_EPSILON = 10e-12

# Generic floating point tolerance for degenerate-geometry checks
EPSILON = sys.float_info.epsilon

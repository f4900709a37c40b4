from geonav._version import __version__  # noqa: F401
from geonav.utils.logging import LOGGER
from geonav.coordinates import GeodeticPoint, Latitude, Longitude
from geonav.vector import Vector3D
from geonav.reference import Datum, Ellipsoid, HelmertTransform, ReferenceRegistry, default_registry
from geonav.ellipsoidal import CoordinateConverter, UnknownDatumError, convert_datum
from geonav.spherical import (
    along_track_distance_to, area_of, cross_track_distance_to, crossing_parallels,
    destination_point, distance_to, final_bearing_to, initial_bearing_to,
    intermediate_point_to, intersection, max_latitude, midpoint_to, rhumb_bearing_to,
    rhumb_destination_point, rhumb_distance_to, rhumb_midpoint_to,
)

__all__ = [
    'CoordinateConverter',
    'Datum',
    'Ellipsoid',
    'GeodeticPoint',
    'HelmertTransform',
    'Latitude',
    'Longitude',
    'ReferenceRegistry',
    'UnknownDatumError',
    'Vector3D',
    'along_track_distance_to',
    'area_of',
    'convert_datum',
    'cross_track_distance_to',
    'crossing_parallels',
    'default_registry',
    'destination_point',
    'distance_to',
    'final_bearing_to',
    'initial_bearing_to',
    'intermediate_point_to',
    'intersection',
    'max_latitude',
    'midpoint_to',
    'rhumb_bearing_to',
    'rhumb_destination_point',
    'rhumb_distance_to',
    'rhumb_midpoint_to',
    'LOGGER',
]

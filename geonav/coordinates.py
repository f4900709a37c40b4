"""
Representation of a specific point on earth
"""

__all__ = ['Angle', 'GeodeticPoint', 'Latitude', 'Longitude']

from functools import cached_property
import math
from typing import Optional, Tuple, Union

from pydantic import validate_call

from geonav._const import POINT_EPSILON_DEGREES, WGS84
from geonav.utils.functions import round_half_up
from geonav.vector import Vector3D


class Angle:
    """
    A validated angle, held in degrees. Subclasses declare the permitted range; values
    outside of it are rejected rather than wrapped or clamped.
    """

    LIMIT: float = 360.
    LABEL: str = 'Angle'

    @validate_call
    def __init__(self, degrees: float):
        if not -self.LIMIT <= degrees <= self.LIMIT:
            raise ValueError(
                f'{self.LABEL} must be within [-{self.LIMIT:g}, {self.LIMIT:g}] degrees, '
                f'got {degrees}'
            )

        self._degrees = degrees

    def __eq__(self, other) -> bool:
        if not isinstance(other, Angle):
            return False

        return type(self) is type(other) and self._degrees == other.degrees

    def __float__(self) -> float:
        return self._degrees

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._degrees))

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._degrees})>'

    @property
    def degrees(self) -> float:
        return self._degrees

    @cached_property
    def radians(self) -> float:
        return math.radians(self._degrees)


class Latitude(Angle):
    """A latitude, in degrees north of the equator. Bounded to [-90, 90]."""
    LIMIT = 90.
    LABEL = 'Latitude'


class Longitude(Angle):
    """A longitude, in degrees east of the prime meridian. Bounded to [-180, 180]."""
    LIMIT = 180.
    LABEL = 'Longitude'


class GeodeticPoint:
    """
    Representation of a point on (or above) the globe: a latitude/longitude pair,
    an optional height above the reference ellipsoid, and the name of the datum the
    coordinates are referenced to.

    Spherical calculations ignore height and datum; ellipsoidal conversions use both.
    """

    def __init__(
        self,
        latitude: Union[Latitude, float, int, str],
        longitude: Union[Longitude, float, int, str],
        height: float = 0.,
        datum: str = WGS84,
    ):
        self._lat = latitude if isinstance(latitude, Latitude) else Latitude(latitude)
        self._lon = longitude if isinstance(longitude, Longitude) else Longitude(longitude)
        self._height = float(height)
        self._datum = datum

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self._lat == other.lat and
            self._lon == other.lon and
            self._height == other.height and
            self._datum == other.datum
        )

    def __hash__(self):
        return hash((self._lat, self._lon, self._height, self._datum))

    def __repr__(self):
        parts = [str(self.latitude), str(self.longitude)]
        if self._height:
            parts.append(str(self._height))
        if self._datum != WGS84:
            parts.append(self._datum)
        return f'<GeodeticPoint({", ".join(parts)})>'

    @property
    def datum(self) -> str:
        """The name of the datum the coordinates are referenced to"""
        return self._datum

    @property
    def height(self) -> float:
        """Height above the ellipsoid, in meters"""
        return self._height

    @property
    def lat(self) -> Latitude:
        return self._lat

    @property
    def lon(self) -> Longitude:
        return self._lon

    @property
    def latitude(self) -> float:
        """Latitude in degrees"""
        return self._lat.degrees

    @property
    def longitude(self) -> float:
        """Longitude in degrees"""
        return self._lon.degrees

    @property
    def phi(self) -> float:
        """Latitude in radians"""
        return self._lat.radians

    @property
    def lambda_(self) -> float:
        """Longitude in radians"""
        return self._lon.radians

    @cached_property
    def nvector(self) -> Vector3D:
        """The unit vector normal to a spherical earth's surface at this point"""
        cos_phi = math.cos(self.phi)
        return Vector3D(
            cos_phi * math.cos(self.lambda_),
            cos_phi * math.sin(self.lambda_),
            math.sin(self.phi),
        )

    @classmethod
    def from_nvector(cls, vector: Vector3D, height: float = 0., datum: str = WGS84):
        """
        Creates a point from a vector normal to a spherical earth's surface. The vector
        need not be of unit length.

        Args:
            vector:
                A vector pointing from the earth's center toward the point

            height:
                (Optional) Height above the ellipsoid, in meters

            datum:
                (Optional) The name of the datum

        Returns:
            GeodeticPoint
        """
        latitude = math.atan2(vector.z, math.hypot(vector.x, vector.y))
        longitude = math.atan2(vector.y, vector.x)
        return cls(math.degrees(latitude), math.degrees(longitude), height, datum)

    def is_near(self, other: 'GeodeticPoint', epsilon: Optional[float] = None) -> bool:
        """
        Tests whether two points lie within a small tolerance of one another. Only
        latitude and longitude are considered.

        Args:
            other:
                Another GeodeticPoint

            epsilon:
                (Default 1e-4) The tolerance, in degrees

        Returns:
            bool
        """
        epsilon = POINT_EPSILON_DEGREES if epsilon is None else epsilon
        return (
            abs(self.latitude - other.latitude) < epsilon and
            abs(self.longitude - other.longitude) < epsilon
        )

    def replace(self, **kwargs) -> 'GeodeticPoint':
        """
        Returns a copy of this point with the specified fields replaced.

        Keyword Args:
            latitude, longitude, height, datum

        Returns:
            GeodeticPoint
        """
        return GeodeticPoint(
            kwargs.get('latitude', self._lat),
            kwargs.get('longitude', self._lon),
            kwargs.get('height', self._height),
            kwargs.get('datum', self._datum),
        )

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the point to degrees, minutes, seconds and hemisphere.

        Returns:
            ((degrees, minutes, seconds, 'N'|'S'), (degrees, minutes, seconds, 'E'|'W'))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple:
        """
        Converts the point to a tuple of floats (latitude, longitude). If the point has
        a height, the tuple will be extended to include it.

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of up to length 3, consisting of (latitude, longitude, height)
        """
        out = [self.latitude, self.longitude]
        if reverse:
            out = out[::-1]

        if self._height:
            out.append(self._height)
        return tuple(out)

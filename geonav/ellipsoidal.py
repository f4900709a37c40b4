"""
Conversions between geodetic (latitude/longitude/height) and geocentric cartesian
(x/y/z) coordinates, and between datums via Helmert transforms
"""

__all__ = [
    'CoordinateConverter', 'UnknownDatumError', 'apply_transform',
    'cartesian_to_geodetic', 'convert_datum', 'geodetic_to_cartesian',
]

import math
from typing import Optional, Union

from geonav._const import WGS84
from geonav.coordinates import GeodeticPoint
from geonav.reference import Datum, HelmertTransform, ReferenceRegistry, default_registry
from geonav.utils.logging import warn_once
from geonav.utils.mixins import LoggingMixin
from geonav.vector import Vector3D


class UnknownDatumError(KeyError):
    """Raised when a datum name is not present in the registry in use"""


def geodetic_to_cartesian(point: GeodeticPoint, datum: Datum) -> Vector3D:
    """
    Converts a point from geodetic latitude/longitude/height to earth-centered,
    earth-fixed cartesian coordinates on the datum's ellipsoid.

    Args:
        point:
            The point to convert. Its datum name is not consulted.

        datum:
            The datum whose ellipsoid the point's coordinates refer to

    Returns:
        Vector3D, with x, y, z in meters from the earth's center
    """
    phi, lam, h = point.phi, point.lambda_, point.height
    a, e2 = datum.ellipsoid.a, datum.ellipsoid.e2

    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    nu = a / math.sqrt(1 - e2 * sin_phi ** 2)  # radius of curvature in prime vertical

    return Vector3D(
        (nu + h) * cos_phi * math.cos(lam),
        (nu + h) * cos_phi * math.sin(lam),
        (nu * (1 - e2) + h) * sin_phi,
    )


def cartesian_to_geodetic(vector: Vector3D, datum: Datum) -> GeodeticPoint:
    """
    Converts an earth-centered, earth-fixed cartesian vector to a geodetic point on the
    datum's ellipsoid, using Bowring's closed-form method (no iteration).

    A vector lying on the polar axis has no defined parametric latitude; its latitude
    is taken to be 0.

    Args:
        vector:
            The cartesian vector, in meters

        datum:
            The datum whose ellipsoid the point should be referred to

    Returns:
        GeodeticPoint carrying the datum's name
    """
    x, y, z = vector
    a, b = datum.ellipsoid.a, datum.ellipsoid.b
    e2, ep2 = datum.ellipsoid.e2, datum.ellipsoid.ep2

    p = math.hypot(x, y)  # distance from minor axis
    r = math.hypot(p, z)  # polar radius

    if p == 0:
        warn_once(
            'Cartesian vector lies on the polar axis; latitude is undefined and has '
            'been set to 0. (this warning will not repeat)'
        )
        phi = 0.
    else:
        # Parametric latitude (Bowring eqn 17)
        tan_beta = (b * z) / (a * p) * (1 + ep2 * b / r)
        cos_beta = 1 / math.sqrt(1 + tan_beta ** 2)
        sin_beta = tan_beta * cos_beta

        # Geodetic latitude (Bowring eqn 18)
        phi = math.atan2(z + ep2 * b * sin_beta ** 3, p - e2 * a * cos_beta ** 3)

    lam = math.atan2(y, x)

    # Height above ellipsoid (Bowring eqn 7)
    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    nu = a / math.sqrt(1 - e2 * sin_phi ** 2)
    h = p * cos_phi + z * sin_phi - (a ** 2 / nu)

    return GeodeticPoint(math.degrees(phi), math.degrees(lam), h, datum.name)


def apply_transform(vector: Vector3D, transform: HelmertTransform) -> Vector3D:
    """
    Applies a 7-parameter Helmert transform to a cartesian vector.

    Args:
        vector:
            The vector to transform, in meters

        transform:
            The transform to apply

    Returns:
        Vector3D
    """
    return transform.apply(vector)


class CoordinateConverter(LoggingMixin):
    """
    Converts points between geodetic and cartesian representations and between
    datums, resolving datum names against a reference registry.

    Every datum's transform relates it to WGS84, so conversions between two other
    datums pass through WGS84.

    Args:
        registry:
            (Optional) The registry to resolve datum names against. Defaults to the
            standard catalog.
    """

    def __init__(self, registry: Optional[ReferenceRegistry] = None):
        super().__init__()
        self.registry = registry or default_registry()

    def __repr__(self):
        return f'<CoordinateConverter using {self.registry!r}>'

    def resolve(self, datum: Union[Datum, str]) -> Datum:
        """
        Looks up a datum by name. Datum objects are returned as-is.

        Raises:
            UnknownDatumError if the name is not registered
        """
        if isinstance(datum, Datum):
            return datum

        resolved = self.registry.datum(datum)
        if resolved is None:
            raise UnknownDatumError(
                f"Unknown datum '{datum}'. Options: {sorted(self.registry.datums)}"
            )

        return resolved

    def to_cartesian(self, point: GeodeticPoint) -> Vector3D:
        """Converts a point to cartesian coordinates on its own datum's ellipsoid"""
        return geodetic_to_cartesian(point, self.resolve(point.datum))

    def to_geodetic(self, vector: Vector3D, datum: Union[Datum, str] = WGS84) -> GeodeticPoint:
        """Converts a cartesian vector to a geodetic point on the given datum"""
        return cartesian_to_geodetic(vector, self.resolve(datum))

    def convert_datum(self, point: GeodeticPoint, target: Union[Datum, str]) -> GeodeticPoint:
        """
        Converts a point to a new datum using a Helmert 7-parameter transform.

        Args:
            point:
                The point to convert; its datum property names the source datum

            target:
                The datum (or datum name) to convert to

        Returns:
            GeodeticPoint on the target datum. The point itself is returned if it
            is already on the target datum.
        """
        source = self.resolve(point.datum)
        target = self.resolve(target)

        if source.name == target.name:
            return point

        if source.name == WGS84:
            transform = target.transform
        elif target.name == WGS84:
            transform = source.transform.inverse()
        else:
            self.logger.debug(
                'Converting %s to %s by way of %s', source.name, target.name, WGS84
            )
            point = self.convert_datum(point, WGS84)
            transform = target.transform

        cartesian = geodetic_to_cartesian(point, self.resolve(point.datum))
        return cartesian_to_geodetic(apply_transform(cartesian, transform), target)


def convert_datum(
    point: GeodeticPoint,
    target: Union[Datum, str],
    registry: Optional[ReferenceRegistry] = None
) -> GeodeticPoint:
    """
    Convenience wrapper around CoordinateConverter.convert_datum.

    Args:
        point:
            The point to convert

        target:
            The datum (or datum name) to convert to

        registry:
            (Optional) The registry to resolve datum names against

    Returns:
        GeodeticPoint
    """
    return CoordinateConverter(registry).convert_datum(point, target)

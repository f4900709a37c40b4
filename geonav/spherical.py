"""
Great-circle and rhumb-line calculations on a spherical earth.

All functions accept and return degrees (and distances in the units of the supplied
radius, meters by default), and work in radians internally. Heights and datums of
the input points are ignored.
"""

__all__ = [
    'along_track_distance_to', 'area_of', 'cross_track_distance_to',
    'crossing_parallels', 'destination_point', 'distance_to', 'final_bearing_to',
    'initial_bearing_to', 'intermediate_point_to', 'intersection', 'max_latitude',
    'midpoint_to', 'rhumb_bearing_to', 'rhumb_destination_point', 'rhumb_distance_to',
    'rhumb_midpoint_to',
]

import math
from typing import List, Optional, Sequence, Tuple

from geonav._const import EARTH_RADIUS_METERS, EPSILON, RHUMB_EPSILON
from geonav.angles import (
    HALF_PI, bearing_delta, tan_half_angle, tan_half_angle_rotated, wrap_180, wrap_360,
    wrap_half_pi,
)
from geonav.coordinates import GeodeticPoint
from geonav.utils.logging import LOGGER


def _point(phi: float, lam: float) -> GeodeticPoint:
    """Builds a point from radians, normalizing longitude to [-180, 180]"""
    return GeodeticPoint(math.degrees(phi), wrap_180(math.degrees(lam)))


def _angular_distance(point1: GeodeticPoint, point2: GeodeticPoint) -> float:
    """The haversine central angle between two points, in radians"""
    phi1, phi2 = point1.phi, point2.phi
    d_phi = phi2 - phi1
    d_lam = point2.lambda_ - point1.lambda_

    a = (
        math.sin(d_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(d_lam / 2) ** 2
    )
    a = min(a, 1.)
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _delta_psi(phi1: float, phi2: float) -> float:
    """
    Difference in isometric (Mercator projected) latitude. The south pole lies
    infinitely far down the Mercator projection, so a difference involving it is
    infinite.
    """
    f1, f2 = tan_half_angle_rotated(phi1), tan_half_angle_rotated(phi2)
    if f1 <= 0 or f2 <= 0:
        if f1 <= 0 and f2 <= 0:
            return 0.
        return -math.inf if f2 <= 0 else math.inf

    return math.log(f2 / f1)


def _shortest_delta_lambda(d_lam: float) -> float:
    """Takes the shorter way around the globe when a longitude difference exceeds 180°"""
    if abs(d_lam) > math.pi:
        d_lam = -(2 * math.pi - d_lam) if d_lam > 0 else (2 * math.pi + d_lam)
    return d_lam


def _stretch_factor(d_phi: float, d_psi: float, phi1: float) -> float:
    """
    Mercator stretch factor Δφ/Δψ. On an east-west course Δψ tends to zero and the
    ratio becomes 0/0, so its limit cos(φ) is used instead.
    """
    return d_phi / d_psi if abs(d_psi) > RHUMB_EPSILON else math.cos(phi1)


# -------------------------------------------------------------------------
# Great circle
# -------------------------------------------------------------------------

def distance_to(
    point1: GeodeticPoint,
    point2: GeodeticPoint,
    radius: float = EARTH_RADIUS_METERS
) -> float:
    """
    The distance along the surface of the earth between two points, using the
    haversine formula.

    Args:
        point1:
            The start point

        point2:
            The destination point

        radius:
            (Default mean earth radius in meters) The radius of the earth

    Returns:
        (float) the distance, in the same units as radius
    """
    return radius * _angular_distance(point1, point2)


def initial_bearing_to(point1: GeodeticPoint, point2: GeodeticPoint) -> float:
    """
    The initial bearing (forward azimuth) from point1 toward point2.

    Args:
        point1:
            The start point

        point2:
            The destination point

    Returns:
        (float) the bearing in degrees clockwise from north, in [0, 360)
    """
    phi1, phi2 = point1.phi, point2.phi
    d_lam = point2.lambda_ - point1.lambda_

    y = math.sin(d_lam) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lam)
    return wrap_360(math.degrees(math.atan2(y, x)))


def final_bearing_to(point1: GeodeticPoint, point2: GeodeticPoint) -> float:
    """
    The bearing on arrival at point2 when travelling from point1 along a great circle.
    Differs from the initial bearing by varying degrees according to distance and
    latitude.

    Returns:
        (float) the bearing in degrees clockwise from north, in [0, 360)
    """
    return wrap_360(initial_bearing_to(point2, point1) + 180)


def midpoint_to(point1: GeodeticPoint, point2: GeodeticPoint) -> GeodeticPoint:
    """
    The point halfway along the great circle path between two points, found as the sum
    of the vectors to each point.

    Args:
        point1:
            The start point

        point2:
            The destination point

    Returns:
        GeodeticPoint
    """
    phi1, lam1, phi2 = point1.phi, point1.lambda_, point2.phi
    d_lam = point2.lambda_ - lam1

    # Vectors to each point, rotated so that point1 lies on the prime meridian
    c_x = math.cos(phi1) + math.cos(phi2) * math.cos(d_lam)
    c_y = math.cos(phi2) * math.sin(d_lam)
    c_z = math.sin(phi1) + math.sin(phi2)

    phi3 = math.atan2(c_z, math.hypot(c_x, c_y))
    lam3 = lam1 + math.atan2(c_y, c_x)
    return _point(phi3, lam3)


def intermediate_point_to(
    point1: GeodeticPoint,
    point2: GeodeticPoint,
    fraction: float
) -> GeodeticPoint:
    """
    The point at the given fraction of the way along the great circle from point1 to
    point2, by spherical linear interpolation.

    Args:
        point1:
            The start point

        point2:
            The destination point

        fraction:
            The fraction of the distance; 0 returns point1, 1 returns point2

    Returns:
        GeodeticPoint
    """
    if fraction == 0:
        return point1
    if fraction == 1:
        return point2

    sigma = _angular_distance(point1, point2)
    if sigma < EPSILON:
        # Coincident points; every intermediate point is the start point
        return point1

    a = math.sin((1 - fraction) * sigma) / math.sin(sigma)
    b = math.sin(fraction * sigma) / math.sin(sigma)

    v1, v2 = point1.nvector, point2.nvector
    x = a * v1.x + b * v2.x
    y = a * v1.y + b * v2.y
    z = a * v1.z + b * v2.z

    return _point(math.atan2(z, math.hypot(x, y)), math.atan2(y, x))


def destination_point(
    start: GeodeticPoint,
    distance: float,
    bearing: float,
    radius: float = EARTH_RADIUS_METERS
) -> GeodeticPoint:
    """
    Given a start point, a distance, and an initial bearing, returns the point reached
    by travelling along the great circle. The bearing will normally vary along the way.

    Args:
        start:
            The start point

        distance:
            The distance travelled, in the same units as radius

        bearing:
            The initial bearing, in degrees clockwise from north

        radius:
            (Default mean earth radius in meters) The radius of the earth

    Returns:
        GeodeticPoint
    """
    sigma = distance / radius
    theta = math.radians(bearing)
    phi1, lam1 = start.phi, start.lambda_

    sin_phi2 = (
        math.sin(phi1) * math.cos(sigma) +
        math.cos(phi1) * math.sin(sigma) * math.cos(theta)
    )
    phi2 = math.asin(max(-1., min(1., sin_phi2)))
    y = math.sin(theta) * math.sin(sigma) * math.cos(phi1)
    x = math.cos(sigma) - math.sin(phi1) * sin_phi2

    return _point(phi2, lam1 + math.atan2(y, x))


def intersection(
    point1: GeodeticPoint,
    bearing1: float,
    point2: GeodeticPoint,
    bearing2: float
) -> Optional[GeodeticPoint]:
    """
    The point where two great circle paths, each defined by a start point and an initial
    bearing, cross.

    Args:
        point1:
            The start of the first path

        bearing1:
            The initial bearing of the first path, in degrees

        point2:
            The start of the second path

        bearing2:
            The initial bearing of the second path, in degrees

    Returns:
        GeodeticPoint, or None if the paths have no unique intersection (they are
        co-linear, or the intersection is ambiguous). If both paths start from the
        same point, that point is returned.
    """
    phi1, lam1 = point1.phi, point1.lambda_
    phi2, lam2 = point2.phi, point2.lambda_
    theta13, theta23 = math.radians(bearing1), math.radians(bearing2)

    sigma12 = _angular_distance(point1, point2)
    if abs(sigma12) < EPSILON:
        return point1

    # Initial/final bearings between the two start points
    cos_theta_a = (
        (math.sin(phi2) - math.sin(phi1) * math.cos(sigma12)) /
        (math.sin(sigma12) * math.cos(phi1))
    )
    cos_theta_b = (
        (math.sin(phi1) - math.sin(phi2) * math.cos(sigma12)) /
        (math.sin(sigma12) * math.cos(phi2))
    )
    # Guard against rounding errors pushing the cosines beyond [-1, 1]
    theta_a = math.acos(min(max(cos_theta_a, -1.), 1.))
    theta_b = math.acos(min(max(cos_theta_b, -1.), 1.))

    if math.sin(lam2 - lam1) > 0:
        theta12, theta21 = theta_a, 2 * math.pi - theta_b
    else:
        theta12, theta21 = 2 * math.pi - theta_a, theta_b

    alpha1 = theta13 - theta12  # angle 2-1-3
    alpha2 = theta21 - theta23  # angle 1-2-3

    sin_a1, sin_a2 = math.sin(alpha1), math.sin(alpha2)
    if math.isclose(sin_a1, 0., abs_tol=1e-12) and math.isclose(sin_a2, 0., abs_tol=1e-12):
        LOGGER.debug('Paths are co-linear; no unique intersection')
        return None

    if sin_a1 * sin_a2 < 0:
        LOGGER.debug('Paths diverge from one another; intersection is ambiguous')
        return None

    cos_a3 = (
        -math.cos(alpha1) * math.cos(alpha2) +
        sin_a1 * sin_a2 * math.cos(sigma12)
    )
    sigma13 = math.atan2(
        math.sin(sigma12) * sin_a1 * sin_a2,
        math.cos(alpha2) + math.cos(alpha1) * cos_a3
    )
    sin_phi3 = (
        math.sin(phi1) * math.cos(sigma13) +
        math.cos(phi1) * math.sin(sigma13) * math.cos(theta13)
    )
    phi3 = math.asin(max(-1., min(1., sin_phi3)))
    d_lam13 = math.atan2(
        math.sin(theta13) * math.sin(sigma13) * math.cos(phi1),
        math.cos(sigma13) - math.sin(phi1) * math.sin(phi3)
    )
    return _point(phi3, lam1 + d_lam13)


def cross_track_distance_to(
    point: GeodeticPoint,
    path_start: GeodeticPoint,
    path_end: GeodeticPoint,
    radius: float = EARTH_RADIUS_METERS
) -> float:
    """
    The signed distance from a point to the great circle through path_start and
    path_end.

    Args:
        point:
            The point whose distance from the path is measured

        path_start:
            The start of the great circle path

        path_end:
            The end of the great circle path

        radius:
            (Default mean earth radius in meters) The radius of the earth

    Returns:
        (float) the distance, negative if the point lies left of the path and positive
        if right of it
    """
    sigma13 = _angular_distance(path_start, point)
    theta13 = math.radians(initial_bearing_to(path_start, point))
    theta12 = math.radians(initial_bearing_to(path_start, path_end))

    return math.asin(math.sin(sigma13) * math.sin(theta13 - theta12)) * radius


def along_track_distance_to(
    point: GeodeticPoint,
    path_start: GeodeticPoint,
    path_end: GeodeticPoint,
    radius: float = EARTH_RADIUS_METERS
) -> float:
    """
    How far along the great circle from path_start toward path_end lies the foot of the
    perpendicular dropped from the point onto the path.

    Args:
        point:
            The point being projected onto the path

        path_start:
            The start of the great circle path

        path_end:
            The end of the great circle path

        radius:
            (Default mean earth radius in meters) The radius of the earth

    Returns:
        (float) the signed distance from path_start; negative if the foot lies behind
        path_start, zero if the point lies perpendicular to path_start
    """
    sigma13 = _angular_distance(path_start, point)
    theta13 = math.radians(initial_bearing_to(path_start, point))
    theta12 = math.radians(initial_bearing_to(path_start, path_end))

    cos_theta = math.cos(theta12 - theta13)
    if abs(cos_theta) < EPSILON:
        return 0.

    cross_track = math.asin(math.sin(sigma13) * math.sin(theta13 - theta12))
    ratio = math.cos(sigma13) / abs(math.cos(cross_track))
    along_track = math.acos(min(max(ratio, -1.), 1.)) * radius
    return along_track if cos_theta > 0 else -along_track


def max_latitude(point: GeodeticPoint, bearing: float) -> float:
    """
    The maximum latitude reached travelling along a great circle on the given bearing
    from the point (Clairaut's formula). Negate the result for the minimum latitude.
    The result is independent of longitude.

    Args:
        point:
            The start point

        bearing:
            The initial bearing, in degrees

    Returns:
        (float) the maximum latitude, in degrees
    """
    theta = math.radians(bearing)
    return math.degrees(math.acos(abs(math.sin(theta) * math.cos(point.phi))))


def crossing_parallels(
    point1: GeodeticPoint,
    point2: GeodeticPoint,
    latitude: float
) -> Optional[Tuple[float, float]]:
    """
    The longitudes at which the great circle through two points crosses a given
    parallel of latitude.

    Args:
        point1:
            A point on the great circle

        point2:
            A second point on the great circle

        latitude:
            The latitude of the parallel, in degrees

    Returns:
        A 2-tuple of longitudes in degrees, or None if the points coincide or the
        great circle never reaches the latitude
    """
    if point1.is_near(point2):
        LOGGER.debug('Coincident points do not define a great circle')
        return None

    phi = math.radians(latitude)
    phi1, lam1, phi2 = point1.phi, point1.lambda_, point2.phi
    d_lam = point2.lambda_ - lam1

    x = math.sin(phi1) * math.cos(phi2) * math.cos(phi) * math.sin(d_lam)
    y = (
        math.sin(phi1) * math.cos(phi2) * math.cos(phi) * math.cos(d_lam) -
        math.cos(phi1) * math.sin(phi2) * math.cos(phi)
    )
    z = math.cos(phi1) * math.cos(phi2) * math.sin(phi) * math.sin(d_lam)

    if z ** 2 > x ** 2 + y ** 2 or not (x or y):
        LOGGER.debug('Great circle does not reach latitude %s', latitude)
        return None

    lam_max = math.atan2(-y, x)  # longitude at maximum latitude
    d_lam_i = math.acos(z / math.hypot(x, y))

    return (
        wrap_180(math.degrees(lam1 + lam_max - d_lam_i)),
        wrap_180(math.degrees(lam1 + lam_max + d_lam_i)),
    )


# -------------------------------------------------------------------------
# Rhumb line
# -------------------------------------------------------------------------

def rhumb_distance_to(
    point1: GeodeticPoint,
    point2: GeodeticPoint,
    radius: float = EARTH_RADIUS_METERS
) -> float:
    """
    The distance travelled between two points along a rhumb line (a path of constant
    bearing).

    Args:
        point1:
            The start point

        point2:
            The destination point

        radius:
            (Default mean earth radius in meters) The radius of the earth

    Returns:
        (float) the distance, in the same units as radius
    """
    phi1, phi2 = point1.phi, point2.phi
    d_phi = phi2 - phi1
    d_lam = _shortest_delta_lambda(point2.lambda_ - point1.lambda_)

    q = _stretch_factor(d_phi, _delta_psi(phi1, phi2), phi1)
    return math.sqrt(d_phi ** 2 + q ** 2 * d_lam ** 2) * radius


def rhumb_bearing_to(point1: GeodeticPoint, point2: GeodeticPoint) -> float:
    """
    The constant bearing of the rhumb line from point1 to point2.

    Returns:
        (float) the bearing in degrees clockwise from north, in [0, 360)
    """
    d_lam = _shortest_delta_lambda(point2.lambda_ - point1.lambda_)
    d_psi = _delta_psi(point1.phi, point2.phi)
    return wrap_360(math.degrees(math.atan2(d_lam, d_psi)))


def rhumb_destination_point(
    start: GeodeticPoint,
    distance: float,
    bearing: float,
    radius: float = EARTH_RADIUS_METERS
) -> GeodeticPoint:
    """
    The point reached by travelling the given distance from start along a rhumb line
    of the given bearing.

    Args:
        start:
            The start point

        distance:
            The distance travelled, in the same units as radius

        bearing:
            The constant bearing, in degrees clockwise from north

        radius:
            (Default mean earth radius in meters) The radius of the earth

    Returns:
        GeodeticPoint
    """
    sigma = distance / radius
    theta = math.radians(bearing)
    phi1, lam1 = start.phi, start.lambda_

    d_phi = sigma * math.cos(theta)

    # Passing over a pole comes back down the other side, as many times as it takes
    phi2 = max(-HALF_PI, min(HALF_PI, wrap_half_pi(phi1 + d_phi)))

    q = _stretch_factor(d_phi, _delta_psi(phi1, phi2), phi1)
    # Longitude is undefined at a pole
    d_lam = sigma * math.sin(theta) / q if q else 0.

    return _point(phi2, lam1 + d_lam)


def rhumb_midpoint_to(point1: GeodeticPoint, point2: GeodeticPoint) -> GeodeticPoint:
    """
    The point halfway along the rhumb line between two points.

    Args:
        point1:
            The start point

        point2:
            The destination point

    Returns:
        GeodeticPoint
    """
    phi1, lam1 = point1.phi, point1.lambda_
    phi2, lam2 = point2.phi, point2.lambda_

    # Take the shorter way across the antimeridian
    lam2 = lam1 + _shortest_delta_lambda(lam2 - lam1)

    phi3 = (phi1 + phi2) / 2
    f1 = tan_half_angle_rotated(phi1)
    f2 = tan_half_angle_rotated(phi2)
    f3 = tan_half_angle_rotated(phi3)

    try:
        lam3 = (
            (lam2 - lam1) * math.log(f3) + lam1 * math.log(f2) - lam2 * math.log(f1)
        ) / math.log(f2 / f1)
    except (ValueError, ZeroDivisionError):
        # Same parallel, or a point at a pole
        lam3 = (lam1 + lam2) / 2

    return _point(phi3, lam3)


# -------------------------------------------------------------------------
# Area
# -------------------------------------------------------------------------

def _is_pole_enclosed_by(ring: List[GeodeticPoint]) -> bool:
    """
    Tests whether a closed ring encircles a pole. Walking around an ordinary polygon
    turns through ±360° in total; walking around a pole turns through roughly 0°.
    """
    total = 0.
    prev_bearing = initial_bearing_to(ring[0], ring[1])
    for p1, p2 in zip(ring, ring[1:]):
        init_bearing = initial_bearing_to(p1, p2)
        final_bearing = final_bearing_to(p1, p2)
        total += bearing_delta(prev_bearing, init_bearing)
        total += bearing_delta(init_bearing, final_bearing)
        prev_bearing = final_bearing

    total += bearing_delta(prev_bearing, initial_bearing_to(ring[0], ring[1]))
    return abs(total) < 90


def area_of(polygon: Sequence[GeodeticPoint], radius: float = EARTH_RADIUS_METERS) -> float:
    """
    The area of a spherical polygon whose edges are great circle arcs, using Karney's
    trapezium excess method.

    Args:
        polygon:
            The polygon's vertices, in order. The ring does not need to be closed.

        radius:
            (Default mean earth radius in meters) The radius of the earth

    Returns:
        (float) the area, in the square of the units of radius
    """
    ring = list(polygon)
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])

    if len(ring) < 4:
        raise ValueError('A polygon requires at least 3 vertices.')

    excess = 0.  # spherical excess, in steradians
    for p1, p2 in zip(ring, ring[1:]):
        t1, t2 = tan_half_angle(p1.phi), tan_half_angle(p2.phi)
        d_lam = p2.lambda_ - p1.lambda_
        excess += 2 * math.atan2(tan_half_angle(d_lam) * (t1 + t2), 1 + t1 * t2)

    if _is_pole_enclosed_by(ring):
        excess = abs(excess) - 2 * math.pi

    return abs(excess * radius ** 2)

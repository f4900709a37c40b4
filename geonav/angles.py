"""
Angle conversion and range-reduction helpers
"""

__all__ = [
    'bearing_delta', 'radians_2pi', 'radians_half_pi', 'radians_pi',
    'tan_half_angle', 'tan_half_angle_rotated', 'to_degrees', 'to_radians',
    'wrap_2pi', 'wrap_90', 'wrap_180', 'wrap_360', 'wrap_half_pi', 'wrap_pi',
    'wrap_radians_to_90', 'wrap_radians_to_180', 'wrap_radians_to_360',
]

import math

HALF_PI = math.pi / 2
TWO_PI = math.pi * 2


def to_radians(degrees: float) -> float:
    """Converts an angle in degrees to radians"""
    return math.radians(degrees)


def to_degrees(radians: float) -> float:
    """Converts an angle in radians to degrees"""
    return math.degrees(radians)


def _wrap_periodic(value: float, lower: float, period: float) -> float:
    """Reduces a value into the half-open range [lower, lower + period)"""
    return (value - lower) % period + lower


def _wrap_triangle(value: float, amplitude: float, period: float) -> float:
    """
    Reduces a value into [-amplitude, amplitude] by reflecting it back off each
    bound, i.e. a triangle wave. Used for latitudes that run over a pole.
    """
    return 4 * amplitude / period * abs(
        (value - period / 4) % period - period / 2
    ) - amplitude


def wrap_360(degrees: float) -> float:
    """
    Constrains degrees to the range [0, 360), e.g. for bearings.

    Args:
        degrees:
            An angle in degrees

    Returns:
        float
    """
    if 0 <= degrees < 360:
        return degrees

    return _wrap_periodic(degrees, 0., 360.)


def wrap_180(degrees: float) -> float:
    """
    Constrains degrees to the range [-180, 180], e.g. for longitudes. Values already
    within the range are returned untouched; all others land in [-180, 180).

    Args:
        degrees:
            An angle in degrees

    Returns:
        float
    """
    if -180 <= degrees <= 180:
        return degrees

    return _wrap_periodic(degrees, -180., 360.)


def wrap_90(degrees: float) -> float:
    """
    Constrains degrees to the range [-90, 90], e.g. for latitudes. Values beyond a pole
    are reflected back, so 91 becomes 89 and -100 becomes -80.

    Args:
        degrees:
            An angle in degrees

    Returns:
        float
    """
    if -90 <= degrees <= 90:
        return degrees

    return _wrap_triangle(degrees, 90., 360.)


def wrap_2pi(radians: float) -> float:
    """Constrains radians to the range [0, 2π)"""
    if 0 <= radians < TWO_PI:
        return radians

    return _wrap_periodic(radians, 0., TWO_PI)


def wrap_pi(radians: float) -> float:
    """Constrains radians to the range [-π, π]"""
    if -math.pi <= radians <= math.pi:
        return radians

    return _wrap_periodic(radians, -math.pi, TWO_PI)


def wrap_half_pi(radians: float) -> float:
    """Constrains radians to the range [-π/2, π/2], reflecting off each bound"""
    if -HALF_PI <= radians <= HALF_PI:
        return radians

    return _wrap_triangle(radians, HALF_PI, TWO_PI)


def wrap_radians_to_360(radians: float) -> float:
    """Converts radians to degrees in the range [0, 360)"""
    return wrap_360(to_degrees(radians))


def wrap_radians_to_180(radians: float) -> float:
    """Converts radians to degrees in the range [-180, 180]"""
    return wrap_180(to_degrees(radians))


def wrap_radians_to_90(radians: float) -> float:
    """Converts radians to degrees in the range [-90, 90]"""
    return wrap_90(to_degrees(radians))


def radians_2pi(degrees: float) -> float:
    """Converts degrees to radians in the range [0, 2π)"""
    return wrap_2pi(to_radians(degrees))


def radians_pi(degrees: float) -> float:
    """Converts degrees to radians in the range [-π, π]"""
    return wrap_pi(to_radians(degrees))


def radians_half_pi(degrees: float) -> float:
    """Converts degrees to radians in the range [-π/2, π/2]"""
    return wrap_half_pi(to_radians(degrees))


def tan_half_angle(radians: float) -> float:
    """tan(θ/2)"""
    return math.tan(radians / 2)


def tan_half_angle_rotated(radians: float) -> float:
    """
    tan((θ + π/2) / 2), i.e. tan(π/4 + θ/2). The log of this value for a latitude
    is its isometric (Mercator) latitude.
    """
    return math.tan((radians + HALF_PI) / 2)


def bearing_delta(bearing1: float, bearing2: float) -> float:
    """
    The signed change in course, in degrees, when turning from bearing1 to bearing2.

    Args:
        bearing1:
            The initial bearing, in degrees

        bearing2:
            The subsequent bearing, in degrees

    Returns:
        float in the range [-180, 180)
    """
    return (bearing2 - bearing1 + 540) % 360 - 180

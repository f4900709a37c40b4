"""
Module for unit conversions
"""
__all__ = ['convert_from_meters', 'convert_to_meters', 'meters_to_degrees']

import math

from geonav._const import EARTH_RADIUS_METERS

# Meters per unit
_CONVERSION_FACTORS = {
    'm': 1.,
    'km': 1000.,
    'mi': 1609.344,
    'nmi': 1852.,
    'ft': 0.3048,
    'usft': 1200 / 3937,
    'yd': 0.9144,
}


def _factor(unit: str) -> float:
    unit = unit.lower()
    if unit not in _CONVERSION_FACTORS:
        raise ValueError(
            f"Unknown distance unit '{unit}'. Options: {list(_CONVERSION_FACTORS.keys())}"
        )

    return _CONVERSION_FACTORS[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer= 'km', statute mile = 'mi',
        nautical mile = 'nmi', international feet ='ft', US survey feet = 'usft',
        yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit.

    Args:
        distance (float): The distance value, in meters.
        unit (str): The target unit; accepts the same units as convert_to_meters.

    Returns:
        float: The distance in the target unit.
    """
    return distance / _factor(unit)


def meters_to_degrees(distance: float, radius: float = EARTH_RADIUS_METERS) -> float:
    """
    Converts a distance along the surface of a sphere to the angle it subtends at the
    center, e.g. degrees of longitude along the equator.

    Args:
        distance (float): The distance value, in meters.
        radius (float): The radius of the sphere, in meters.

    Returns:
        float: The angle in degrees.
    """
    return math.degrees(distance / radius)

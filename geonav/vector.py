"""
Representation of a vector in three-dimensional space
"""

__all__ = ['Vector3D']

import math
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np
from typing_extensions import Self


class Vector3D:
    """
    An immutable (x, y, z) vector. Used both for earth-centered, earth-fixed (ECEF)
    cartesian positions in meters and for unit vectors normal to the earth's surface.

    All operations return new vectors.
    """

    __slots__ = ('_x', '_y', '_z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))
        object.__setattr__(self, '_z', float(z))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __add__(self, other: 'Vector3D') -> 'Vector3D':
        return self.add(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3D):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __mul__(self, other: float) -> 'Vector3D':
        return self.scale(other)

    def __neg__(self) -> 'Vector3D':
        return self.negate()

    def __repr__(self):
        return f'<Vector3D({self._x}, {self._y}, {self._z})>'

    def __rmul__(self, other: float) -> 'Vector3D':
        return self.scale(other)

    def __sub__(self, other: 'Vector3D') -> 'Vector3D':
        return self.subtract(other)

    def __truediv__(self, other: float) -> 'Vector3D':
        return self.divide(other)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @classmethod
    def from_array(cls, arr: Sequence[float]) -> Self:
        """Creates a vector from any length-3 sequence, e.g. a numpy array"""
        if len(arr) != 3:
            raise ValueError(f'A 3D vector requires exactly 3 components, got {len(arr)}')

        return cls(arr[0], arr[1], arr[2])

    def add(self, other: 'Vector3D') -> 'Vector3D':
        """Component-wise sum of this vector and another"""
        return Vector3D(self._x + other.x, self._y + other.y, self._z + other.z)

    def angle_to(self, other: 'Vector3D', normal: Optional['Vector3D'] = None) -> float:
        """
        Calculates the angle between this vector and another.

        Args:
            other:
                The vector whose angle from this vector is to be determined

            normal:
                (Optional) A plane normal. If supplied, the angle is signed: positive if
                this->other is clockwise looking along the normal, negative otherwise.

        Returns:
            The angle in radians; in the range [0, π] if no normal is supplied,
            otherwise [-π, π]
        """
        cross = self.cross(other)
        sin_theta = cross.length()
        if normal is not None and cross.dot(normal) < 0:
            sin_theta = -sin_theta

        return math.atan2(sin_theta, self.dot(other))

    def cross(self, other: 'Vector3D') -> 'Vector3D':
        """Cross product of this vector with another"""
        return Vector3D(
            self._y * other.z - self._z * other.y,
            self._z * other.x - self._x * other.z,
            self._x * other.y - self._y * other.x,
        )

    def divide(self, scalar: float) -> 'Vector3D':
        """
        Divides each component by a scalar.

        Raises:
            ZeroDivisionError if the scalar is zero
        """
        if scalar == 0:
            raise ZeroDivisionError('Cannot divide a vector by zero')

        return Vector3D(self._x / scalar, self._y / scalar, self._z / scalar)

    def dot(self, other: 'Vector3D') -> float:
        """Dot (scalar) product of this vector with another"""
        return self._x * other.x + self._y * other.y + self._z * other.z

    def is_near(self, other: 'Vector3D', tolerance: float = 1e-9) -> bool:
        """Tests whether every component lies within tolerance of the other vector's"""
        return all(abs(a - b) <= tolerance for a, b in zip(self, other))

    def length(self) -> float:
        """The magnitude (euclidean norm) of the vector"""
        return math.sqrt(self._x ** 2 + self._y ** 2 + self._z ** 2)

    def negate(self) -> 'Vector3D':
        """A vector of equal magnitude pointing in the opposite direction"""
        return Vector3D(-self._x, -self._y, -self._z)

    def rotate_around(self, axis: 'Vector3D', angle_degrees: float) -> 'Vector3D':
        """
        Rotates the direction of this vector around an axis by the specified angle, using
        the Rodrigues (axis-angle) rotation matrix.

        Note that the rotation is applied to this vector's unit vector, so the
        result is always of unit length.

        Args:
            axis:
                The axis being rotated around

            angle_degrees:
                The angle of rotation, in degrees. Positive angles rotate
                counter-clockwise looking down the axis toward the origin.

        Returns:
            Vector3D
        """
        theta = math.radians(angle_degrees)
        p = self.unit().to_array()
        ax, ay, az = axis.unit()

        sin_t, cos_t = math.sin(theta), math.cos(theta)
        t = 1 - cos_t
        R = np.array([
            [ax * ax * t + cos_t, ax * ay * t - az * sin_t, ax * az * t + ay * sin_t],
            [ay * ax * t + az * sin_t, ay * ay * t + cos_t, ay * az * t - ax * sin_t],
            [az * ax * t - ay * sin_t, az * ay * t + ax * sin_t, az * az * t + cos_t],
        ])
        return Vector3D.from_array(R @ p)

    def scale(self, scalar: float) -> 'Vector3D':
        """Multiplies each component by a scalar"""
        return Vector3D(self._x * scalar, self._y * scalar, self._z * scalar)

    def subtract(self, other: 'Vector3D') -> 'Vector3D':
        """Component-wise difference of this vector and another"""
        return Vector3D(self._x - other.x, self._y - other.y, self._z - other.z)

    def to_array(self) -> np.ndarray:
        """The vector as a numpy array"""
        return np.array(self.to_tuple())

    def to_tuple(self) -> Tuple[float, float, float]:
        return self._x, self._y, self._z

    def unit(self) -> 'Vector3D':
        """
        Normalizes the vector to unit length. A vector whose length is exactly 0 or 1
        is returned as-is.
        """
        norm = self.length()
        if norm in (0., 1.):
            return self

        return Vector3D(self._x / norm, self._y / norm, self._z / norm)

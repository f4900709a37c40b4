"""
Reference ellipsoids, Helmert transforms and the datums composed from them
"""

__all__ = [
    'Datum', 'Ellipsoid', 'HelmertTransform', 'ReferenceRegistry',
    'default_registry',
]

from dataclasses import dataclass, field
from functools import lru_cache
import math
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from geonav._const import WGS84
from geonav.vector import Vector3D


@dataclass(frozen=True)
class Ellipsoid:
    """
    A reference ellipsoid.

    Attributes:
        name: Unique name of the ellipsoid
        a: Semi-major (equatorial) axis, in meters
        b: Semi-minor (polar) axis, in meters
        f: Flattening, (a - b) / a; zero for spheres
    """
    name: str
    a: float
    b: float
    f: float

    @property
    def e2(self) -> float:
        """First eccentricity squared, (a² - b²) / a²"""
        return 2 * self.f - self.f ** 2

    @property
    def ep2(self) -> float:
        """Second eccentricity squared, (a² - b²) / b²"""
        return self.e2 / (1 - self.e2)

    @property
    def is_sphere(self) -> bool:
        return self.f == 0

    @classmethod
    def from_inverse_flattening(cls, name: str, a: float, b: float, rf: float) -> 'Ellipsoid':
        """
        Creates an ellipsoid from its inverse flattening (1/f), the form in which most
        ellipsoids are published. An inverse flattening of 0 denotes a sphere.
        """
        return cls(name, a, b, 1 / rf if rf else 0.)


@dataclass(frozen=True)
class HelmertTransform:
    """
    A 7-parameter Helmert transform relating a datum to WGS84.

    Attributes:
        name: Unique name of the transform
        tx, ty, tz: Translations, in meters
        sx, sy, sz: Rotations, in arc-seconds
        s: Scale, in parts per million
    """
    name: str
    tx: float = 0.
    ty: float = 0.
    tz: float = 0.
    sx: float = 0.
    sy: float = 0.
    sz: float = 0.
    s: float = 0.

    rx: float = field(init=False, repr=False, compare=False)
    ry: float = field(init=False, repr=False, compare=False)
    rz: float = field(init=False, repr=False, compare=False)
    s1: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Derived values are fixed at construction; the dataclass is frozen
        object.__setattr__(self, 'rx', math.radians(self.sx / 3600))
        object.__setattr__(self, 'ry', math.radians(self.sy / 3600))
        object.__setattr__(self, 'rz', math.radians(self.sz / 3600))
        object.__setattr__(self, 's1', self.s * 1e-6 + 1)

    @property
    def is_identity(self) -> bool:
        return not any((self.tx, self.ty, self.tz, self.sx, self.sy, self.sz, self.s))

    def apply(self, vector: Vector3D) -> Vector3D:
        """
        Applies the transform to a cartesian vector, using the small-angle
        (linearised) form of the Helmert rotation.

        Args:
            vector:
                The vector to transform, in meters

        Returns:
            Vector3D
        """
        x1, y1, z1 = vector
        return Vector3D(
            self.tx + x1 * self.s1 - y1 * self.rz + z1 * self.ry,
            self.ty + x1 * self.rz + y1 * self.s1 - z1 * self.rx,
            self.tz - x1 * self.ry + y1 * self.rx + z1 * self.s1,
        )

    def inverse(self) -> 'HelmertTransform':
        """
        The inverse transform, approximated by negating all seven parameters. Returns a
        new object; this transform is left untouched.
        """
        return HelmertTransform(
            f'{self.name}-Inverse',
            -self.tx, -self.ty, -self.tz,
            -self.sx, -self.sy, -self.sz,
            -self.s,
        )


@dataclass(frozen=True)
class Datum:
    """
    A geodetic datum: a reference ellipsoid plus the Helmert transform relating it to
    WGS84.
    """
    name: str
    ellipsoid: Ellipsoid
    transform: HelmertTransform


class ReferenceRegistry:
    """
    A read-only catalog of named ellipsoids, Helmert transforms and datums.

    Registries are built once and passed explicitly to whatever needs them (see
    CoordinateConverter); default_registry() provides the standard catalog.
    Lookups of unknown names return None.
    """

    def __init__(
        self,
        ellipsoids: Iterable[Ellipsoid] = (),
        transforms: Iterable[HelmertTransform] = (),
        datums: Iterable[Datum] = (),
    ):
        self._ellipsoids = MappingProxyType({x.name: x for x in ellipsoids})
        self._transforms = MappingProxyType({x.name: x for x in transforms})
        self._datums = MappingProxyType({x.name: x for x in datums})

    def __contains__(self, name: str) -> bool:
        return name in self._datums

    def __repr__(self):
        return (
            f'<ReferenceRegistry of {len(self._ellipsoids)} ellipsoids, '
            f'{len(self._transforms)} transforms, {len(self._datums)} datums>'
        )

    @property
    def datums(self) -> Mapping[str, Datum]:
        return self._datums

    @property
    def ellipsoids(self) -> Mapping[str, Ellipsoid]:
        return self._ellipsoids

    @property
    def transforms(self) -> Mapping[str, HelmertTransform]:
        return self._transforms

    def datum(self, name: str) -> Optional[Datum]:
        """The datum registered under name, or None if not found"""
        return self._datums.get(name)

    def ellipsoid(self, name: str) -> Optional[Ellipsoid]:
        """The ellipsoid registered under name, or None if not found"""
        return self._ellipsoids.get(name)

    def transform(self, name: str) -> Optional[HelmertTransform]:
        """The transform registered under name, or None if not found"""
        return self._transforms.get(name)

    @property
    def wgs84(self) -> Optional[Datum]:
        """The pivot datum"""
        return self._datums.get(WGS84)


@lru_cache(maxsize=1)
def default_registry() -> ReferenceRegistry:
    """
    The standard catalog of ellipsoids, transforms and datums. Built on first use and
    shared thereafter; the registry cannot be modified.
    """
    from geonav._catalog import DATUMS, ELLIPSOIDS, TRANSFORMS  # pylint: disable=import-outside-toplevel
    return ReferenceRegistry(ELLIPSOIDS, TRANSFORMS, DATUMS)

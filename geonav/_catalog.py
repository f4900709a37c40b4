"""
Standard catalog of reference ellipsoids, Helmert transforms and datums.

Ellipsoids are listed as (name, a, b, inverse flattening); spheres have an inverse
flattening of zero. Transform rotations are in arc-seconds, scales in ppm.
"""

__all__ = ['DATUMS', 'ELLIPSOIDS', 'TRANSFORMS']

from geonav.reference import Datum, Ellipsoid, HelmertTransform

_ELLIPSOID_PARAMS = [
    ('Airy1830', 6377563.396, 6356256.909, 299.3249646),
    ('AiryModified', 6377340.189, 6356034.448, 299.3249646),
    ('Australia1966', 6378160.0, 6356774.719, 298.25),
    ('Bessel1841', 6377397.155, 6356078.962818, 299.1528128),
    ('Clarke1866', 6378206.4, 6356583.8, 294.978698214),
    ('Clarke1880', 6378249.145, 6356514.86954978, 293.465),
    ('Clarke1880IGN', 6378249.2, 6356515.0, 293.466021294),
    ('Clarke1880Mod', 6378249.145, 6356514.96582849, 293.4663),
    ('CPM1799', 6375738.7, 6356671.92557493, 334.39),
    ('Delambre1810', 6376428.0, 6355957.92616372, 311.5),
    ('Engelis1985', 6378136.05, 6356751.32272154, 298.2566),
    ('Everest1969', 6377295.664, 6356094.667915, 300.8017),
    ('Fisher1968', 6378150.0, 6356768.33724438, 298.3),
    ('GEM10C', 6378137.0, 6356752.31424783, 298.2572236),
    ('GRS67', 6378160.0, 6356774.516, 298.247167427),
    ('GRS80', 6378137.0, 6356752.314140, 298.257222101),
    ('Helmert1906', 6378200.0, 6356818.16962789, 298.3),
    ('IERS1989', 6378136.0, 6356751.302, 298.257),
    ('IERS1992TOPEX', 6378136.3, 6356751.61659215, 298.257223563),
    ('IERS2003', 6378136.6, 6356751.85797165, 298.25642),
    ('Intl1924', 6378388.0, 6356911.946, 297.0),
    ('Intl1967', 6378157.5, 6356772.2, 298.24961539),
    ('Krassovski1940', 6378245.0, 6356863.01877305, 298.3),
    ('Maupertuis1738', 6397300.0, 6363806.28272251, 191.0),
    ('Mercury1960', 6378166.0, 6356784.28360711, 298.3),
    ('Mercury1968Mod', 6378150.0, 6356768.33724438, 298.3),
    ('NWL1965', 6378145.0, 6356759.76948868, 298.25),
    ('OSU86F', 6378136.2, 6356751.51693008, 298.2572236),
    ('OSU91A', 6378136.3, 6356751.6165948, 298.2572236),
    ('Plessis1817', 6397523.0, 6355863.0, 153.56512242),
    ('SGS85', 6378136.0, 6356751.30156878, 298.257),
    ('SoAmerican1969', 6378160.0, 6356774.71919531, 298.25),
    ('Struve1860', 6378298.3, 6356657.14266956, 294.73),
    ('WGS60', 6378165.0, 6356783.28695944, 298.3),
    ('WGS66', 6378145.0, 6356759.76948868, 298.25),
    ('WGS72', 6378135.0, 6356750.5, 298.26),
    ('WGS84', 6378137.0, 6356752.314245, 298.257223563),
    ('Sphere', 6371008.771415, 6371008.771415, 0.),
    ('SphereAuthalic', 6371000.0, 6371000.0, 0.),
    ('SpherePopular', 6378137.0, 6378137.0, 0.),
]

ELLIPSOIDS = [Ellipsoid.from_inverse_flattening(*params) for params in _ELLIPSOID_PARAMS]

TRANSFORMS = [
    HelmertTransform('BD72', 106.868628, -52.297783, 103.723893, -0.33657, -0.456955, -1.84218, 1.2727),
    HelmertTransform('Bessel1841', -582.0, -105.0, -414.0, -1.04, -0.35, 3.08, -8.3),
    HelmertTransform('Clarke1866', 8., -160., -176.),
    HelmertTransform('DHDN', -591.28, -81.35, -396.39, 1.477, -0.0736, -1.458, -9.82),
    HelmertTransform('ED50', 89.5, 93.8, 123.1, 0.0, 0.0, 0.156, -1.2),
    HelmertTransform('ETRS89'),
    HelmertTransform('Irl1975', -482.530, 130.596, -564.557, 1.042, 0.214, 0.631, -8.150),
    HelmertTransform('Krassowsky1940', -24.0, 123.0, 94.0, -0.02, 0.26, 0.13, -2.423),
    HelmertTransform('MGI', -577.326, -90.129, -463.920, 5.137, 1.474, 5.297, -2.423),
    HelmertTransform('NAD27', 8., -160., -176.),
    HelmertTransform('NAD83', 1.004, -1.910, -0.515, 0.0267, 0.00034, 0.011, -0.00150),
    HelmertTransform('NTF', -168., -60., 320.),
    HelmertTransform('OSGB36', -446.448, 125.157, -542.060, -0.1502, -0.2470, -0.8421, 20.4894),
    HelmertTransform('Potsdam', -582.0, -105.0, -414.0, 1.04, 0.35, -3.08, -8.3),
    HelmertTransform('TokyoJapan', 148., -507., -685.),
    HelmertTransform('WGS72', -4.5, 0.554, -0.22),
    HelmertTransform('WGS84'),
]

_E = {x.name: x for x in ELLIPSOIDS}
_T = {x.name: x for x in TRANSFORMS}

# (datum name, ellipsoid name, transform name)
_DATUM_PARAMS = [
    ('BD72', 'Intl1924', 'BD72'),
    ('DHDN', 'Bessel1841', 'DHDN'),
    ('ED50', 'Intl1924', 'ED50'),
    ('ETRS89', 'GRS80', 'WGS84'),
    ('GDA2020', 'GRS80', 'WGS84'),
    ('GRS80', 'GRS80', 'WGS84'),
    ('Irl1975', 'AiryModified', 'Irl1975'),
    ('Krassowsky1940', 'Krassovski1940', 'Krassowsky1940'),
    ('MGI', 'Bessel1841', 'MGI'),
    ('NAD27', 'Clarke1866', 'NAD27'),
    ('NAD83', 'GRS80', 'NAD83'),
    ('NTF', 'Clarke1880IGN', 'NTF'),
    ('OSGB36', 'Airy1830', 'OSGB36'),
    ('Potsdam', 'Bessel1841', 'Bessel1841'),
    ('Sphere', 'Sphere', 'WGS84'),
    ('TokyoJapan', 'Bessel1841', 'TokyoJapan'),
    ('WGS72', 'WGS72', 'WGS72'),
    ('WGS84', 'WGS84', 'WGS84'),
]

DATUMS = [Datum(name, _E[ellipsoid], _T[transform]) for name, ellipsoid, transform in _DATUM_PARAMS]
